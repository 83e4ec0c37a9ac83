"""Random string generator — implements RandomStringPort with ``secrets``."""

from __future__ import annotations

import secrets

from deskstore.domain.ports.random_port import RandomStringPort


class SecretsRandomGenerator(RandomStringPort):
    """Cryptographically strong random strings."""

    def generate(self, length: int, alphabet: str) -> str:
        if length <= 0:
            raise ValueError("length must be positive")
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        return "".join(secrets.choice(alphabet) for _ in range(length))
