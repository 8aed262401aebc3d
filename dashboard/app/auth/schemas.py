"""Pydantic schemas for the login exchange."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from dashboard.app.common.models import FormPayload

from .models import Role


class LoginForm(FormPayload):
    username: Role = Field(default=Role.ADMIN, description="Role the user signs in as")
    password: str

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("비밀번호를 입력하세요")
        return value


class LoginResponse(BaseModel):
    role: Role
