"""
Domain entities for status posts published to the remote REST resource.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Coordinates:
    """GeoJSON-style point: coordinates are ordered (longitude, latitude)."""

    coordinates: tuple[float, ...]
    type: str = "Point"

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]


@dataclass(frozen=True)
class Status:
    text: str
    coordinates: Optional[Coordinates] = None
    id: Optional[str] = None
    id_str: Optional[str] = None
    created_at: Optional[str] = None
    retweet_count: Optional[int] = None
    favorite_count: Optional[int] = None
    favorited: Optional[bool] = None
    retweeted: Optional[bool] = None

    @classmethod
    def compose(cls, text: str, longitude: float, latitude: float) -> "Status":
        """Build an unsaved status located at (*longitude*, *latitude*)."""
        return cls(text=text, coordinates=Coordinates((longitude, latitude)))
