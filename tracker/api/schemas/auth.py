from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SignUpRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(default="", max_length=255)
    password: str = Field(default="", max_length=256)
    confirm_password: str | None = Field(default=None, alias="confirmPassword", max_length=256)


class SignInRequest(BaseModel):
    email: str = Field(default="", max_length=255)
    password: str = Field(default="", max_length=256)


class AuthUserResponse(BaseModel):
    id: str
    email: str
