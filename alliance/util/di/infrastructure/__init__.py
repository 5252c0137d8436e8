"""Infrastructure providers."""

# Import bases
from .discord import DiscordProvider
from .persistence import PersistenceProvider
from .pnw import PnWProvider

# Import implementations (needed for __subclasses__())
from .discord import ProdDiscordProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .pnw import ProdPnWProvider  # noqa: F401

__all__ = [
    "DiscordProvider",
    "PersistenceProvider",
    "PnWProvider",
    "ProdDiscordProvider",
    "ProdPersistenceProvider",
    "ProdPnWProvider",
]
