from __future__ import annotations

from datetime import timedelta

import pytest

from backend.trip_planner.core.security import TokenError, create_access_token, decode_token


def test_access_token_round_trip() -> None:
    payload = decode_token(create_access_token(42))
    assert payload["sub"] == "42"
    assert payload["type"] == "access"


def test_expired_token_is_rejected() -> None:
    token = create_access_token(42, expires_delta=timedelta(minutes=-5))
    with pytest.raises(TokenError) as exc_info:
        decode_token(token)
    assert exc_info.value.status_code == 401
