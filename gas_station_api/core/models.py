"""Pydantic models shared by the store, services and HTTP layer."""

from __future__ import annotations

from pydantic import BaseModel, Field

PriceRecord = dict[str, float]


class Location(BaseModel):
    """Point in (lat, lon) degree space."""

    lat: float = 0.0
    lon: float = 0.0


class GasStation(BaseModel):
    """A gas station keyed by its unique name."""

    name: str
    address: str = ""
    location: Location = Field(default_factory=Location)
    prices: PriceRecord = Field(default_factory=dict)


class HistoryRecord(BaseModel):
    """Immutable snapshot of the prices supplied in one price update."""

    model_config = {"frozen": True}

    timestamp: int
    prices: PriceRecord


class GasStationWithHistory(GasStation):
    """Station detail returned by `GET /gas-stations/{name}`."""

    history: list[HistoryRecord] = Field(default_factory=list)


class User(BaseModel):
    """Registered user keyed by email."""

    name: str
    email: str
    password: str


class CreateUserRequest(BaseModel):
    """Body of `POST /users`."""

    name: str
    email: str
    password: str


class UserResponse(BaseModel):
    """Public view of a user; never carries the password."""

    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        return cls(name=user.name, email=user.email)


class ErrorResponse(BaseModel):
    """Error body shape shared by every failing endpoint."""

    Err: str
    Status: int
