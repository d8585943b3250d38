from datetime import datetime

from pydantic import EmailStr

from app.schemas.base import CamelModel


class UserCreate(CamelModel):
    username: str
    email: EmailStr
    password: str


# Password is never echoed back
class UserResponse(CamelModel):
    id: int
    username: str
    email: str
    created_at: datetime
