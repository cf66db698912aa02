import logging
import time
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from taskboard.core.config import settings
from taskboard.schemas.user import User

logger = logging.getLogger(__name__)


class TokenStrategy(ABC):
    """Émet et valide les tokens de session"""

    name = "base"

    @abstractmethod
    def issue(self, user: User) -> str:
        ...

    @abstractmethod
    def validate(self, token: Optional[str]) -> bool:
        ...


class OpaqueTokenStrategy(TokenStrategy):
    """Token opaque : préfixe + horodatage ms + suffixe aléatoire.

    Aucune garantie cryptographique, la validation vérifie seulement la présence.
    """

    name = "opaque"

    def __init__(self, prefix: str = None):
        self.prefix = prefix or settings.TOKEN_PREFIX

    def issue(self, user: User) -> str:
        return f"{self.prefix}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"

    def validate(self, token: Optional[str]) -> bool:
        return bool(token and token.strip())


class JwtTokenStrategy(TokenStrategy):
    """Token JWT HS256 signé avec JWT_SECRET"""

    name = "jwt"

    def __init__(self, secret: str = None, expire_min: int = None):
        self.secret = secret or settings.JWT_SECRET
        self.expire_min = expire_min if expire_min is not None else settings.JWT_EXPIRE_MIN

    def issue(self, user: User) -> str:
        payload = {
            "sub": user.id,
            "email": user.email,
            "exp": datetime.now(timezone.utc) + timedelta(minutes=self.expire_min),
            "jti": uuid.uuid4().hex,
            "type": "access",
        }
        return jwt.encode(payload, self.secret, algorithm="HS256")

    def decode(self, token: str) -> Optional[dict]:
        try:
            return jwt.decode(token, self.secret, algorithms=["HS256"])
        except JWTError:
            return None

    def validate(self, token: Optional[str]) -> bool:
        if not token:
            return False
        payload = self.decode(token)
        if payload is None:
            logger.debug("Rejected JWT session token")
            return False
        return payload.get("type") == "access"


_STRATEGIES = {
    OpaqueTokenStrategy.name: OpaqueTokenStrategy,
    JwtTokenStrategy.name: JwtTokenStrategy,
}


def get_token_strategy(name: str = None) -> TokenStrategy:
    name = name or settings.TOKEN_STRATEGY
    try:
        return _STRATEGIES[name]()
    except KeyError:
        raise ValueError(f"Unknown token strategy: {name}") from None
