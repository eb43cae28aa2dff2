from pydantic import BaseModel

from app.schemas.common.camel_model import CamelModel
from app.schemas.users.user_out import UserOut


class LoginRequest(BaseModel):
    # username or email
    username: str
    password: str


class LoginResponse(CamelModel):
    token: str
    token_type: str = "bearer"
    user: UserOut


class UserExistsResponse(CamelModel):
    username: str
    exists: bool
