"""Port: Random strings — source of generated secrets."""

from abc import ABC, abstractmethod


class RandomStringPort(ABC):
    """Contract for generating random strings."""

    @abstractmethod
    def generate(self, length: int, alphabet: str) -> str:
        """Return a string of *length* characters drawn from *alphabet*."""
        ...
