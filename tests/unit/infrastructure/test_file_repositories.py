"""Unit tests for the JSON file storage backend."""

import asyncio
import json
from pathlib import Path

import pytest

from core.exceptions import (
    ArgumentNotFoundError,
    InternalError,
    InvalidArgumentError,
    InvalidUserError,
)
from domain.entities.movie import MovieDetails
from infrastructure.file.json_document import JsonDocument
from infrastructure.file.repositories.file_group_repo import FileGroupRepository
from infrastructure.file.repositories.file_user_repo import FileUserRepository
from infrastructure.user_lookup import UserLookupMixin

OWNER = "1"
STRANGER = "2"


def _movie(n: int, minutes: int = 100) -> MovieDetails:
    return MovieDetails(id=f"tt{n:07d}", title=f"Movie {n}", duration_minutes=minutes)


@pytest.fixture
async def groups(tmp_path: Path) -> FileGroupRepository:
    repo = FileGroupRepository(tmp_path / "groups.json")
    await repo.open()
    return repo


@pytest.fixture
async def users(tmp_path: Path) -> FileUserRepository:
    repo = FileUserRepository(tmp_path / "users.json")
    await repo.open()
    return repo


# --- JsonDocument ---


class TestJsonDocument:
    @pytest.mark.asyncio
    async def test_open_creates_empty_document(self, tmp_path: Path):
        path = tmp_path / "nested" / "groups.json"

        await JsonDocument(path, "groups").open()

        assert json.loads(path.read_text()) == {"IDs": 0, "groups": []}

    @pytest.mark.asyncio
    async def test_open_keeps_existing_document(self, tmp_path: Path):
        path = tmp_path / "groups.json"
        path.write_text(json.dumps({"IDs": 4, "groups": []}))

        await JsonDocument(path, "groups").open()

        assert json.loads(path.read_text())["IDs"] == 4

    @pytest.mark.asyncio
    async def test_malformed_document_is_internal_error(self, tmp_path: Path):
        path = tmp_path / "groups.json"
        path.write_text("{not json")

        with pytest.raises(InternalError):
            await JsonDocument(path, "groups").read()

    @pytest.mark.asyncio
    async def test_wrong_shape_is_internal_error(self, tmp_path: Path):
        path = tmp_path / "groups.json"
        path.write_text(json.dumps({"IDs": 0, "groups": {}}))

        with pytest.raises(InternalError):
            await JsonDocument(path, "groups").read()

    @pytest.mark.asyncio
    async def test_failed_mutation_is_not_written(self, tmp_path: Path):
        document = JsonDocument(tmp_path / "groups.json", "groups")
        await document.open()

        with pytest.raises(RuntimeError):
            async with document.mutate() as content:
                content["groups"].append({"id": 1})
                raise RuntimeError("boom")

        assert (await document.read())["groups"] == []

    @pytest.mark.asyncio
    async def test_write_leaves_no_temp_files(self, tmp_path: Path):
        document = JsonDocument(tmp_path / "groups.json", "groups")
        await document.open()

        async with document.mutate() as content:
            document.next_id(content)

        assert sorted(p.name for p in tmp_path.iterdir()) == ["groups.json"]


# --- FileGroupRepository ---


class TestFileGroupCreateAndList:
    @pytest.mark.asyncio
    async def test_create_assigns_sequential_ids(self, groups: FileGroupRepository):
        first = await groups.create_group("A", "a", OWNER)
        second = await groups.create_group("B", "b", OWNER)

        assert (first.id, second.id) == ("1", "2")
        assert first.movies == []

    @pytest.mark.asyncio
    async def test_ids_never_reused_after_delete(self, groups: FileGroupRepository):
        await groups.create_group("A", "a", OWNER)
        second = await groups.create_group("B", "b", OWNER)
        await groups.delete_group(second.id, OWNER)

        third = await groups.create_group("C", "c", OWNER)

        assert third.id == "3"

    @pytest.mark.asyncio
    async def test_create_rejects_blank_fields(self, groups: FileGroupRepository):
        with pytest.raises(InvalidArgumentError):
            await groups.create_group("", "a", OWNER)

    @pytest.mark.asyncio
    async def test_list_only_returns_own_groups(self, groups: FileGroupRepository):
        await groups.create_group("Mine", "a", OWNER)
        await groups.create_group("Theirs", "b", STRANGER)

        result = await groups.list_groups(OWNER)

        assert [g.name for g in result.items] == ["Mine"]
        assert result.total_pages == 1

    @pytest.mark.asyncio
    async def test_list_pages_in_creation_order(self, groups: FileGroupRepository):
        for n in range(8):
            await groups.create_group(f"G{n}", "d", OWNER)

        second_page = await groups.list_groups(OWNER, page=2)

        assert [g.name for g in second_page.items] == ["G6", "G7"]
        assert second_page.total_pages == 2

    @pytest.mark.asyncio
    async def test_list_for_user_without_groups(self, groups: FileGroupRepository):
        result = await groups.list_groups(OWNER)

        assert result.items == []
        assert result.total_pages == 0

    @pytest.mark.asyncio
    async def test_list_bad_limit(self, groups: FileGroupRepository):
        with pytest.raises(InvalidArgumentError):
            await groups.list_groups(OWNER, limit="zero")

    @pytest.mark.asyncio
    async def test_stored_entry_shape(self, groups: FileGroupRepository, tmp_path: Path):
        await groups.create_group("A", "a", OWNER)

        content = json.loads((tmp_path / "groups.json").read_text())

        assert content == {
            "IDs": 1,
            "groups": [
                {"id": 1, "name": "A", "description": "a", "userId": OWNER, "movies": []}
            ],
        }


class TestFileGroupPrecedence:
    """Existence is checked before ownership, ownership before content."""

    @pytest.mark.asyncio
    async def test_missing_group_for_every_operation(self, groups: FileGroupRepository):
        calls = [
            groups.get_group_details("42", OWNER),
            groups.edit_group("42", OWNER, "n", "d"),
            groups.delete_group("42", OWNER),
            groups.add_movie_in_group("42", "tt0000001", _movie(1), OWNER),
            groups.remove_movie_in_group("42", "tt0000001", OWNER),
        ]
        for call in calls:
            with pytest.raises(ArgumentNotFoundError) as exc_info:
                await call
            assert exc_info.value.detail == "group"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("group_id", ["abc", "1.5", ""])
    async def test_non_numeric_group_id_is_not_found(
        self, groups: FileGroupRepository, group_id
    ):
        await groups.create_group("A", "a", OWNER)

        with pytest.raises(ArgumentNotFoundError):
            await groups.get_group_details(group_id, OWNER)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("group_id", ["01", "1.0", " 1", 1])
    async def test_numeric_like_group_id_is_coerced(
        self, groups: FileGroupRepository, group_id
    ):
        await groups.create_group("A", "a", OWNER)

        details = await groups.get_group_details(group_id, OWNER)
        edited = await groups.edit_group(group_id, OWNER, "B", "b")

        assert details.name == "A"
        assert edited.id == "1"

    @pytest.mark.asyncio
    async def test_foreign_group_for_every_operation(self, groups: FileGroupRepository):
        group = await groups.create_group("A", "a", OWNER)
        await groups.add_movie_in_group(group.id, "tt0000001", _movie(1), OWNER)

        calls = [
            groups.get_group_details(group.id, STRANGER),
            groups.edit_group(group.id, STRANGER, "n", "d"),
            groups.delete_group(group.id, STRANGER),
            # A duplicate add from a stranger still fails on ownership first
            groups.add_movie_in_group(group.id, "tt0000001", _movie(1), STRANGER),
            # So does removing a movie that is not there
            groups.remove_movie_in_group(group.id, "tt9999999", STRANGER),
        ]
        for call in calls:
            with pytest.raises(InvalidUserError) as exc_info:
                await call
            assert exc_info.value.detail == "userId"

        details = await groups.get_group_details(group.id, OWNER)
        assert details.name == "A"
        assert len(details.movies.items) == 1

    @pytest.mark.asyncio
    async def test_bad_page_checked_after_ownership(self, groups: FileGroupRepository):
        group = await groups.create_group("A", "a", OWNER)

        with pytest.raises(InvalidUserError):
            await groups.get_group_details(group.id, STRANGER, page=0)
        with pytest.raises(ArgumentNotFoundError) as exc_info:
            await groups.get_group_details(group.id, OWNER, page=0)
        assert exc_info.value.detail == "page"


class TestFileGroupEditAndDelete:
    @pytest.mark.asyncio
    async def test_edit_keeps_movies(self, groups: FileGroupRepository):
        group = await groups.create_group("A", "a", OWNER)
        await groups.add_movie_in_group(group.id, "tt0000001", _movie(1), OWNER)

        edited = await groups.edit_group(group.id, OWNER, "B", "b")

        assert (edited.name, edited.description) == ("B", "b")
        assert [m.id for m in edited.movies] == ["tt0000001"]

    @pytest.mark.asyncio
    async def test_delete_removes_group(self, groups: FileGroupRepository):
        group = await groups.create_group("A", "a", OWNER)

        await groups.delete_group(group.id, OWNER)

        with pytest.raises(ArgumentNotFoundError):
            await groups.get_group_details(group.id, OWNER)


class TestFileGroupMovies:
    @pytest.mark.asyncio
    async def test_full_scenario(self, groups: FileGroupRepository):
        group = await groups.create_group("Favs", "best", OWNER)
        dark_knight = MovieDetails(id="tt0468569", title="The Dark Knight", duration_minutes=152)

        added = await groups.add_movie_in_group(group.id, dark_knight.id, dark_knight, OWNER)
        details = await groups.get_group_details(group.id, OWNER)

        assert added.title == "The Dark Knight"
        assert [(m.id, m.title, m.duration_minutes) for m in details.movies.items] == [
            ("tt0468569", "The Dark Knight", 152)
        ]
        assert details.movies_total_duration == 152

        await groups.remove_movie_in_group(group.id, dark_knight.id, OWNER)
        details = await groups.get_group_details(group.id, OWNER)

        assert details.movies.items == []
        assert details.movies_total_duration == 0

    @pytest.mark.asyncio
    async def test_duplicate_movie_rejected(self, groups: FileGroupRepository):
        group = await groups.create_group("A", "a", OWNER)
        await groups.add_movie_in_group(group.id, "tt0000001", _movie(1), OWNER)

        with pytest.raises(InvalidArgumentError):
            await groups.add_movie_in_group(group.id, "tt0000001", _movie(1), OWNER)

    @pytest.mark.asyncio
    async def test_duplicate_checked_on_requested_movie_id(self, groups: FileGroupRepository):
        group = await groups.create_group("A", "a", OWNER)
        await groups.add_movie_in_group(group.id, "tt1", MovieDetails(id="tt1", title="T"), OWNER)

        with pytest.raises(InvalidArgumentError):
            await groups.add_movie_in_group(
                group.id, "tt1", MovieDetails(id="TT1", title="T"), OWNER
            )

        details = await groups.get_group_details(group.id, OWNER)
        assert [m.id for m in details.movies.items] == ["tt1"]

    @pytest.mark.asyncio
    async def test_remove_missing_movie(self, groups: FileGroupRepository):
        group = await groups.create_group("A", "a", OWNER)

        with pytest.raises(ArgumentNotFoundError) as exc_info:
            await groups.remove_movie_in_group(group.id, "tt0000001", OWNER)

        assert exc_info.value.detail == "movie"

    @pytest.mark.asyncio
    async def test_movie_pages_and_total_duration(self, groups: FileGroupRepository):
        group = await groups.create_group("A", "a", OWNER)
        for n in range(1, 12):
            await groups.add_movie_in_group(group.id, f"tt{n:07d}", _movie(n, 10), OWNER)

        details = await groups.get_group_details(group.id, OWNER, page=2)

        assert [m.id for m in details.movies.items] == ["tt0000010", "tt0000011"]
        assert details.movies.total_pages == 2
        assert details.movies_total_duration == 110

    @pytest.mark.asyncio
    async def test_concurrent_adds_are_all_kept(self, groups: FileGroupRepository):
        group = await groups.create_group("A", "a", OWNER)

        await asyncio.gather(
            *(
                groups.add_movie_in_group(group.id, f"tt{n:07d}", _movie(n), OWNER)
                for n in range(1, 21)
            )
        )

        details = await groups.get_group_details(group.id, OWNER, limit=50)
        assert sorted(m.id for m in details.movies.items) == [
            f"tt{n:07d}" for n in range(1, 21)
        ]

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_add_keeps_one(self, groups: FileGroupRepository):
        group = await groups.create_group("A", "a", OWNER)

        results = await asyncio.gather(
            *(
                groups.add_movie_in_group(group.id, "tt0000001", _movie(1), OWNER)
                for _ in range(5)
            ),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, InvalidArgumentError)]
        assert len(failures) == 4
        details = await groups.get_group_details(group.id, OWNER)
        assert len(details.movies.items) == 1


# --- FileUserRepository ---


class TestFileUserRepository:
    @pytest.mark.asyncio
    async def test_create_and_lookup(self, users: FileUserRepository):
        user = await users.create("alice", "secret", "alice@example.com")

        assert user.id == "1"
        assert user.token
        assert (await users.get_by_token(user.token)).username == "alice"
        assert (await users.get_by_username("alice")).id == "1"
        assert (await users.get_by_email("alice@example.com")).id == "1"

    @pytest.mark.asyncio
    async def test_tokens_are_unique(self, users: FileUserRepository):
        a = await users.create("alice", "p", "a@example.com")
        b = await users.create("bob", "p", "b@example.com")

        assert a.token != b.token
        assert b.id == "2"

    @pytest.mark.asyncio
    async def test_lookup_is_exact(self, users: FileUserRepository):
        await users.create("alice", "p", "a@example.com")

        assert await users.get_by_username("Alice") is None
        assert await users.get_by_username("ali") is None

    @pytest.mark.asyncio
    async def test_require_by_token_unknown(self, users: FileUserRepository):
        from core.exceptions import UserNotFoundError

        with pytest.raises(UserNotFoundError):
            await users.require_by_token("missing")

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, users: FileUserRepository):
        await users.create("alice", "p", "a@example.com")

        with pytest.raises(InvalidUserError):
            await users.create("alice", "p", "other@example.com")

    @pytest.mark.asyncio
    async def test_concurrent_registration_keeps_one(self, users: FileUserRepository):
        results = await asyncio.gather(
            *(users.create("alice", "p", "a@example.com") for _ in range(3)),
            return_exceptions=True,
        )

        assert sum(1 for r in results if isinstance(r, InvalidUserError)) == 2

    def test_directory_without_find_by_cannot_be_built(self):
        class NoLookup(UserLookupMixin):
            pass

        with pytest.raises(TypeError):
            NoLookup()
