"""Politics & War API adapter."""

from .client import (
    MockPnWNationDirectory,
    PnWAPIError,
    PnWNationDirectory,
    RealPnWNationDirectory,
)

__all__ = [
    "PnWAPIError",
    "PnWNationDirectory",
    "RealPnWNationDirectory",
    "MockPnWNationDirectory",
]
