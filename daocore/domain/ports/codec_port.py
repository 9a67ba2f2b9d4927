"""
Port (interface) for object <-> text codecs.
Infrastructure adapters (e.g. JsonCodec) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import TypeVar

T = TypeVar("T")


class ICodec(ABC):
    @abstractmethod
    def decode(self, text: str, shape: type[T]) -> T:
        """Decode *text* into an instance of *shape*.

        Raises:
            CodecError: if the text is malformed or does not fit *shape*.
        """
        ...

    @abstractmethod
    def encode(self, entity: object) -> str:
        """Encode a domain entity into its wire text."""
        ...
