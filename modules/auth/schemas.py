from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    success: bool
    message: str


class AuthStatus(BaseModel):
    authenticated: bool
