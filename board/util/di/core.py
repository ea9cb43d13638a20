"""Configuration providers."""

from dishka import Scope, provide

from board.config import AuthSettings, Settings
from board.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings for the whole process, read once per container.

    Tests get the same provider; they steer it through environment variables
    set in ``tests/conftest.py``.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Token and password hashing parameters."""
        return settings.auth
