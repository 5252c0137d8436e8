"""Unit tests for error to status mapping."""

import pytest

from alliance.adapter.discord import DiscordOAuthError
from alliance.adapter.pnw import PnWAPIError
from alliance.domain.error import (
    ConflictError,
    DomainError,
    InvalidCredentialsError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
    VerificationRequiredError,
)
from alliance.interface.api.errors import status_for


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (ValidationError("bad"), 400),
        (ConflictError("taken"), 409),
        (InvalidCredentialsError(), 401),
        (NotFoundError("User", "1"), 404),
        (PnWAPIError("bad key"), 400),
        (DiscordOAuthError("bad code"), 400),
        (InvalidStateError(), 400),
        (VerificationRequiredError(), 403),
        (DomainError("unmapped"), 500),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected
