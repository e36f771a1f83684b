"""Tests for access token issuing and verification."""

import jwt
import pytest

from bookreviews.config import Settings
from bookreviews.services.tokens import InvalidTokenError, TokenAuthority


@pytest.fixture
def authority(clock):
    return TokenAuthority(secret="secret", ttl=3600, clock=clock)


def test_issued_token_decodes_to_username(authority, clock):
    issued = authority.issue("alice")

    assert issued.username == "alice"
    assert issued.issued_at == int(clock.now)
    assert issued.expires_at == issued.issued_at + 3600

    payload = jwt.decode(
        issued.token, "secret", algorithms=["HS256"], options={"verify_exp": False}
    )
    assert payload["username"] == "alice"
    assert payload["exp"] == issued.expires_at


def test_token_valid_until_expiry(authority):
    issued = authority.issue("alice")

    verified = authority.verify(issued.token, now=issued.expires_at - 1)
    assert verified.username == "alice"

    with pytest.raises(InvalidTokenError):
        authority.verify(issued.token, now=issued.expires_at)
    with pytest.raises(InvalidTokenError):
        authority.verify(issued.token, now=issued.expires_at + 1)


def test_token_expiry_follows_clock(authority, clock):
    issued = authority.issue("alice")
    clock.advance(3599)
    assert authority.verify(issued.token).username == "alice"

    clock.advance(2)
    with pytest.raises(InvalidTokenError):
        authority.verify(issued.token)


def test_wrong_secret_rejected(authority):
    issued = authority.issue("alice")
    other = TokenAuthority(secret="other-secret", clock=authority.clock)

    with pytest.raises(InvalidTokenError):
        other.verify(issued.token)


def test_garbage_token_rejected(authority):
    with pytest.raises(InvalidTokenError):
        authority.verify("not-a-jwt")


def test_token_without_username_rejected(authority, clock):
    token = jwt.encode(
        {"iat": int(clock.now), "exp": int(clock.now) + 60}, "secret", algorithm="HS256"
    )
    with pytest.raises(InvalidTokenError):
        authority.verify(token)


def test_from_settings():
    settings = Settings(access_token_secret="s3", access_token_ttl=120)
    authority = TokenAuthority.from_settings(settings)

    assert authority.secret == "s3"
    assert authority.ttl == 120
    assert authority.algorithm == "HS256"
