import pytest

from taskboard.core.security import (
    JwtTokenStrategy,
    OpaqueTokenStrategy,
    TokenStrategy,
    get_token_strategy,
)
from taskboard.schemas.user import User

USER = User(id="u-1", username="test", email="test@example.com")


def test_opaque_token_shape():
    token = OpaqueTokenStrategy(prefix="mock-jwt-token").issue(USER)
    assert token.startswith("mock-jwt-token-")
    assert len(token.split("-")) == 5


def test_opaque_tokens_unique():
    strategy = OpaqueTokenStrategy()
    assert len({strategy.issue(USER) for _ in range(50)}) == 50


@pytest.mark.parametrize("token, valid", [
    ("abc", True),
    ("", False),
    ("   ", False),
    (None, False),
])
def test_opaque_validate(token, valid):
    assert OpaqueTokenStrategy().validate(token) is valid


def test_jwt_roundtrip():
    strategy = JwtTokenStrategy(secret="secret")
    token = strategy.issue(USER)
    payload = strategy.decode(token)
    assert payload["sub"] == "u-1"
    assert payload["email"] == "test@example.com"
    assert strategy.validate(token)


def test_jwt_wrong_secret():
    token = JwtTokenStrategy(secret="secret").issue(USER)
    assert not JwtTokenStrategy(secret="other").validate(token)


def test_jwt_tampered():
    header, payload, _ = JwtTokenStrategy(secret="secret").issue(USER).split(".")
    foreign_sig = JwtTokenStrategy(secret="other").issue(USER).split(".")[2]
    assert not JwtTokenStrategy(secret="secret").validate(".".join([header, payload, foreign_sig]))


def test_jwt_expired():
    strategy = JwtTokenStrategy(secret="secret", expire_min=-1)
    assert not strategy.validate(strategy.issue(USER))


def test_jwt_tokens_unique():
    strategy = JwtTokenStrategy(secret="secret")
    assert strategy.issue(USER) != strategy.issue(USER)


def test_get_token_strategy():
    assert isinstance(get_token_strategy("opaque"), OpaqueTokenStrategy)
    assert isinstance(get_token_strategy("jwt"), JwtTokenStrategy)
    with pytest.raises(ValueError):
        get_token_strategy("kerberos")


def test_incomplete_strategy_cannot_be_created():
    """Une stratégie sans validate() échoue dès l'instanciation"""
    class IssueOnly(TokenStrategy):
        def issue(self, user):
            return "t"

    with pytest.raises(TypeError):
        IssueOnly()
