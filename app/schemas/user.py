from typing import Optional

from pydantic import BaseModel, Field


class UserSignup(BaseModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str | int] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = Field(None, alias="confirmPassword")

    model_config = {"populate_by_name": True}


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserRead(BaseModel):
    id: int
    full_name: str
    email: str
    phone: Optional[str] = None

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    message: str
    user: UserRead
