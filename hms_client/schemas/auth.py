from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional
import re

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserLogin(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Email is required")
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        if not v:
            raise ValueError("Password is required")
        return v


class LoginResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    access_token: Optional[str] = None
    token: Optional[str] = None

    @property
    def session_token(self) -> Optional[str]:
        return self.access_token or self.token
