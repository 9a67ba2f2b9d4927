"""
Port (interface) for the HTTP transport collaborator.
Infrastructure adapters (e.g. HttpxHelper) must implement this interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass(frozen=True)
class HttpResponse:
    """Raw backend answer: status code, headers, and the undecoded body."""

    status_code: int
    body: Optional[bytes] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    encoding: str = "utf-8"

    def has_body(self) -> bool:
        return bool(self.body)


class IHttpHelper(ABC):
    @abstractmethod
    def get(self, uri: str) -> HttpResponse:
        """Issue a GET against a fully formed absolute URI."""
        ...

    @abstractmethod
    def post(self, uri: str) -> HttpResponse:
        """Issue a body-less POST against a fully formed absolute URI."""
        ...
