"""Auth Schemas — login form validation for credentials sign-in."""

from pydantic import BaseModel, Field, field_validator


class LoginForm(BaseModel):
    """Email/password pair. Malformed input is treated as rejected credentials."""
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=255)
    password: str = Field(min_length=6, max_length=1024)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v
