"""Configuration providers."""

from dishka import Scope, provide

from study.config import AuthSettings, CalendarSettings, Settings, StorageSettings
from study.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the sections services depend on directly.

    Always concrete: tests control configuration through the environment.
    """

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def storage(self, settings: Settings) -> StorageSettings:
        return settings.storage

    @provide
    def calendar(self, settings: Settings) -> CalendarSettings:
        return settings.calendar
