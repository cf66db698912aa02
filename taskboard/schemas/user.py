from pydantic import BaseModel, ConfigDict, model_validator
from typing import Optional

class User(BaseModel):
    id: str
    username: str
    email: str

    model_config = ConfigDict(frozen=True)

class SessionState(BaseModel):
    """État de la session exposé au reste de l'application"""
    is_authenticated: bool = False
    user: Optional[User] = None
    token: Optional[str] = None
    loading: bool = True

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_authenticated(self):
        # authentifié => user et token présents
        if self.is_authenticated and (self.user is None or not self.token):
            raise ValueError("an authenticated session needs a user and a token")
        return self

    @classmethod
    def anonymous(cls) -> "SessionState":
        return cls(is_authenticated=False, loading=False)

    @classmethod
    def authenticated(cls, user: User, token: str) -> "SessionState":
        return cls(is_authenticated=True, user=user, token=token, loading=False)
