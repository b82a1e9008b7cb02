from pydantic import EmailStr

from taskmanager.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    email: EmailStr
    name: str
    password: str


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class LoginResponse(CamelModel):
    token: str
    token_type: str = "bearer"
    user_id: int
    email: str
    name: str
