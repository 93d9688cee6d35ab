"""User registration endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from fastapi import APIRouter, FastAPI, Request

from gas_station_api.core.models import CreateUserRequest, UserResponse

if TYPE_CHECKING:
    from gas_station_api.services.user_service import UserService

router: APIRouter = APIRouter()


def _user_service(http_request: Request) -> UserService:
    return cast("UserService", http_request.app.state.services["user_service"])


def create_user(request: CreateUserRequest, http_request: Request) -> UserResponse:
    """Register a user, replacing any existing user with the same email."""

    return _user_service(http_request).register(request)


def list_users(http_request: Request) -> list[UserResponse]:
    """Return every registered user without passwords."""

    return _user_service(http_request).list_users()


def register_user_routes(app: FastAPI) -> None:
    """Attach user routes to the provided application."""

    router.add_api_route(
        "/users",
        create_user,
        methods=["POST"],
        status_code=201,
        response_model=UserResponse,
    )
    router.add_api_route(
        "/users",
        list_users,
        methods=["GET"],
        response_model=list[UserResponse],
    )
    app.include_router(router)
