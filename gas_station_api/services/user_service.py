"""User registry operations."""

from __future__ import annotations

from typing import Any

from gas_station_api.adapters.store.base import Store
from gas_station_api.core.models import CreateUserRequest, User, UserResponse


class UserService:
    def __init__(self, *, store: Store, logger: Any | None = None) -> None:
        self._store = store
        self._logger = logger

    def register(self, request: CreateUserRequest) -> UserResponse:
        user = User(name=request.name, email=request.email, password=request.password)
        self._store.create_user(user)
        if self._logger is not None:
            self._logger.info("registered user %s", user.email)
        return UserResponse.from_user(user)

    def list_users(self) -> list[UserResponse]:
        return [UserResponse.from_user(user) for user in self._store.get_all_users().values()]
