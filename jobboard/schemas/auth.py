# jobboard/schemas/auth.py
from typing import Optional
from pydantic import BaseModel, EmailStr


# Fields are optional here so a missing one reaches the auth flow,
# which reports it as "All fields are required".
class RegisterIn(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    mobile: Optional[str] = None
    password: Optional[str] = None


class LoginIn(BaseModel):
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class AuthOut(BaseModel):
    message: str
    name: str
    token: str
