"""
Infrastructure adapter: pydantic JSON wire models → ICodec.

Wire models mirror the backend's JSON shapes and are converted to and from the
frozen domain dataclasses here, so pydantic never leaks into the domain layer.
"""

import dataclasses
from typing import Any, Callable, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from daocore.domain.entities.quote import Quote
from daocore.domain.entities.status import Coordinates, Status
from daocore.domain.exceptions import CodecError
from daocore.domain.ports.codec_port import ICodec

T = TypeVar("T")


class CoordinatesPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str = "Point"
    coordinates: list[float]

    @field_validator("coordinates")
    @classmethod
    def _pair(cls, value: list[float]) -> list[float]:
        if len(value) != 2:
            raise ValueError("coordinates must be a [longitude, latitude] pair")
        return value


class StatusPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: Optional[str] = None
    id_str: Optional[str] = None
    text: str
    created_at: Optional[str] = None
    coordinates: Optional[CoordinatesPayload] = None
    retweet_count: Optional[int] = None
    favorite_count: Optional[int] = None
    favorited: Optional[bool] = None
    retweeted: Optional[bool] = None

    def to_entity(self) -> Status:
        coordinates = None
        if self.coordinates is not None:
            coordinates = Coordinates(
                coordinates=tuple(self.coordinates.coordinates),
                type=self.coordinates.type,
            )
        return Status(
            text=self.text,
            coordinates=coordinates,
            id=self.id,
            id_str=self.id_str,
            created_at=self.created_at,
            retweet_count=self.retweet_count,
            favorite_count=self.favorite_count,
            favorited=self.favorited,
            retweeted=self.retweeted,
        )


class QuotePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ticker: str
    last_price: float
    bid_price: float
    bid_size: int
    ask_price: float
    ask_size: int

    def to_entity(self) -> Quote:
        return Quote(**self.model_dump())


class JsonCodec(ICodec):
    """JSON codec for Status and Quote entities."""

    _DECODERS: dict[type, Callable[[str], Any]] = {
        Status: lambda text: StatusPayload.model_validate_json(text).to_entity(),
        Quote: lambda text: QuotePayload.model_validate_json(text).to_entity(),
    }

    def decode(self, text: str, shape: type[T]) -> T:
        decoder = self._DECODERS.get(shape)
        if decoder is None:
            raise CodecError(f"No JSON decoder registered for {shape.__name__}")
        try:
            return decoder(text)
        except ValidationError as exc:
            raise CodecError(f"Unable to decode JSON into {shape.__name__}: {exc}") from exc

    def encode(self, entity: object) -> str:
        try:
            if isinstance(entity, Status):
                payload = dataclasses.asdict(entity)
                if entity.coordinates is not None:
                    payload["coordinates"]["coordinates"] = list(entity.coordinates.coordinates)
                return StatusPayload.model_validate(payload).model_dump_json(exclude_none=True)
            if isinstance(entity, Quote):
                return QuotePayload.model_validate(dataclasses.asdict(entity)).model_dump_json()
        except ValidationError as exc:
            raise CodecError(
                f"Unable to encode {type(entity).__name__} as JSON: {exc}"
            ) from exc
        raise CodecError(f"No JSON encoder registered for {type(entity).__name__}")
