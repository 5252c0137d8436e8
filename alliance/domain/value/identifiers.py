"""Strongly typed identifiers for domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)

# Politics & War nation ids are integers assigned by the game
NationId = NewType("NationId", int)
