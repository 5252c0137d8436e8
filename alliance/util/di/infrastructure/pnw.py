"""Politics & War infrastructure providers."""

from dishka import Scope, provide

from alliance.adapter.pnw import PnWNationDirectory, RealPnWNationDirectory
from alliance.config import Settings
from alliance.util.di.base import ProviderBase


class PnWProvider(ProviderBase):
    """Politics & War component base."""

    __mock_component__ = "pnw"


class ProdPnWProvider(PnWProvider):
    """Production Politics & War provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_nation_directory(self, settings: Settings) -> PnWNationDirectory:
        """Provide the GraphQL-backed nation directory."""
        return RealPnWNationDirectory(
            api_url=settings.pnw.api_url,
            timeout=settings.pnw.timeout_seconds,
        )
