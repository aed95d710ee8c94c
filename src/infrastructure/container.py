"""Backend selection and lifecycle."""

from dataclasses import dataclass, field

import httpx
import structlog

from core.config import CatalogBackend, Settings, StorageBackend
from domain.repositories.catalog_gateway import ICatalogGateway
from domain.repositories.group_repository import IGroupRepository
from domain.repositories.user_repository import IUserRepository
from domain.services.group_service import GroupService
from domain.services.movie_service import MovieService
from domain.services.user_service import UserService
from infrastructure.catalog.imdb_gateway import ImdbCatalogGateway, build_imdb_client
from infrastructure.catalog.local_gateway import LocalCatalogGateway
from infrastructure.elasticsearch.client import ElasticsearchIndex, build_elasticsearch_client
from infrastructure.elasticsearch.repositories.es_group_repo import ElasticsearchGroupRepository
from infrastructure.elasticsearch.repositories.es_user_repo import ElasticsearchUserRepository
from infrastructure.file.repositories.file_group_repo import FileGroupRepository
from infrastructure.file.repositories.file_user_repo import FileUserRepository

logger = structlog.get_logger()


@dataclass
class Container:
    """Stores, catalog and services for one application run."""

    groups: IGroupRepository
    users: IUserRepository
    catalog: ICatalogGateway
    clients: list[httpx.AsyncClient] = field(default_factory=list)

    @property
    def group_service(self) -> GroupService:
        return GroupService(self.groups, self.users, self.catalog)

    @property
    def movie_service(self) -> MovieService:
        return MovieService(self.catalog)

    @property
    def user_service(self) -> UserService:
        return UserService(self.users)

    async def aclose(self) -> None:
        """Close the catalog and any shared HTTP clients."""
        await self.catalog.close()
        for client in self.clients:
            await client.aclose()


async def build_container(settings: Settings) -> Container:
    """Resolve the configured backends once, at startup."""
    clients: list[httpx.AsyncClient] = []
    groups: IGroupRepository
    users: IUserRepository
    catalog: ICatalogGateway

    if settings.storage_backend == StorageBackend.ELASTICSEARCH:
        es_client = build_elasticsearch_client(settings)
        clients.append(es_client)
        prefix = settings.elasticsearch_index_prefix
        groups = ElasticsearchGroupRepository(ElasticsearchIndex(es_client, f"{prefix}groups"))
        users = ElasticsearchUserRepository(ElasticsearchIndex(es_client, f"{prefix}users"))
    else:
        file_groups = FileGroupRepository(settings.groups_file)
        file_users = FileUserRepository(settings.users_file)
        await file_groups.open()
        await file_users.open()
        groups, users = file_groups, file_users

    if settings.catalog_backend == CatalogBackend.LOCAL:
        catalog = LocalCatalogGateway(settings.catalog_local_dir)
    else:
        catalog = ImdbCatalogGateway(build_imdb_client(settings), settings.imdb_api_key)

    logger.info(
        "backends_ready",
        storage=settings.storage_backend.value,
        catalog=settings.catalog_backend.value,
    )
    return Container(groups=groups, users=users, catalog=catalog, clients=clients)
