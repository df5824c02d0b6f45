from __future__ import annotations

import pytest
from pydantic import ValidationError

from config.settings import Settings


def test_unknown_timezone_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(TIMEZONE="America/Atlantida")


def test_valid_timezone_is_kept() -> None:
    assert Settings(TIMEZONE="America/Recife").TIMEZONE == "America/Recife"
