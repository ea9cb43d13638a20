"""Opaque identifier generation."""

from uuid import uuid4

from .base import Service


class IdGenerator(Service):
    """Produces unique string IDs for new users and posts."""

    def generate(self) -> str:
        return str(uuid4())
