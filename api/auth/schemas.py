"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    password: str = Field(..., min_length=1, max_length=128)


class LoginResponse(BaseModel):
    token: str
    expiresIn: str
    message: str = "Login successful."


class VerifyResponse(BaseModel):
    valid: bool
    authEnabled: bool


class StatusResponse(BaseModel):
    authEnabled: bool
    message: str
