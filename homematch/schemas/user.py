from pydantic import BaseModel, Field, validator
from typing import Optional


class SessionUser(BaseModel):
    """The authenticated user as returned by /auth/login, /auth/signup and /auth/me"""
    id: str
    email: Optional[str] = None
    role: str = "user"
    created_at: Optional[str] = Field(None, alias="createdAt")

    @validator("id", pre=True)
    def coerce_id(cls, v):
        return str(v) if v is not None else v

    @property
    def user_id(self) -> str:
        return self.id

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    class Config:
        populate_by_name = True
        extra = "ignore"


class AuthResponse(BaseModel):
    """Login / signup response"""
    token: Optional[str] = None
    user: Optional[SessionUser] = None

    class Config:
        extra = "ignore"


class Credentials(BaseModel):
    """Request body for login and signup"""
    email: str
    password: str
