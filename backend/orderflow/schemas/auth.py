"""Auth Schemas — login request and response.

Invariants:
    - LoginRequest.username: stripped, non-empty (blank → 400 via the validation handler)
    - The password is accepted but never echoed back
"""

from pydantic import BaseModel, Field, field_validator


class LoginRequest(BaseModel):
    """Login credentials."""
    username: str = Field(min_length=1, max_length=256)
    password: str = Field("", max_length=1024)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username cannot be empty or whitespace")
        return v


class LoginResponse(BaseModel):
    """Successful login; the session token travels only in the cookie."""
    username: str
    expires_in: int
