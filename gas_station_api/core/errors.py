"""Typed failures raised by the store and services."""

from __future__ import annotations


class ApiError(Exception):
    """Base failure carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(ApiError):
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


class GasStationNotFoundError(NotFoundError):
    """Raised when a station name is not present in the store."""

    def __init__(self, name: str) -> None:
        super().__init__("gas station not found")
        self.name = name
