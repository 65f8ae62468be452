from pydantic import BaseModel, EmailStr

from app.schemas.base import BaseSchema
from app.schemas.user import UserResponse


# Login schemas
class UserLogin(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseSchema):
    message: str
    user: UserResponse


# Token schemas
class TokenPayload(BaseModel):
    sub: str
    exp: int
