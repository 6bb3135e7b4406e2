# This project was developed with assistance from AI tools.
"""Caller identity schemas."""

from db.enums import UserRole
from pydantic import BaseModel, ConfigDict, Field


class UserContext(BaseModel):
    """Injected by the auth dependency into every authenticated request."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    role: UserRole
    email: str = ""


class TokenPayload(BaseModel):
    """Decoded JWT claims issued by the identity provider."""

    sub: str
    email: str = ""
    role: str = ""
    app_metadata: dict = Field(default_factory=dict)
