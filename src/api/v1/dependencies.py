"""Dependency injection factories for API v1."""

from fastapi import Depends, Request

from domain.services.group_service import GroupService
from domain.services.movie_service import MovieService
from domain.services.user_service import UserService
from infrastructure.container import Container


def get_container(request: Request) -> Container:
    """The container built by the application lifespan."""
    return request.app.state.container


def get_group_service(container: Container = Depends(get_container)) -> GroupService:
    """Get Group service instance."""
    return container.group_service


def get_movie_service(container: Container = Depends(get_container)) -> MovieService:
    """Get Movie service instance."""
    return container.movie_service


def get_user_service(container: Container = Depends(get_container)) -> UserService:
    """Get User service instance."""
    return container.user_service
