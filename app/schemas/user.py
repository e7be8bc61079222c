# app/schemas/user.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RegisterUserRequest(BaseModel):
    username: str
    email: str
    password: str


class UpdateUserRequest(BaseModel):
    """Partial profile update; omitted fields are left untouched."""
    username: Optional[str] = None
    email: Optional[str] = None


class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    """Public view of a user. There is deliberately no password field."""
    id: int
    username: str
    email: str
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserListData(BaseModel):
    users: List[UserResponse]


class NewUserData(BaseModel):
    new_user: UserResponse = Field(alias="newUser")

    model_config = ConfigDict(populate_by_name=True)


class UserData(BaseModel):
    user: UserResponse


class LoginData(BaseModel):
    user: UserResponse
    token: str
