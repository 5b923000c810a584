from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1, description="Unique login name")
    password: str = Field(..., min_length=1, description="Plaintext password, hashed before storage")
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)

class UserSummary(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str

    class Config:
        from_attributes = True

class UserDetail(UserSummary):
    join_at: datetime
    last_login_at: Optional[datetime] = None

class LoginTimestamp(BaseModel):
    username: str
    last_login_at: datetime

    class Config:
        from_attributes = True
