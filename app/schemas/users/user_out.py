from typing import Optional

from app.schemas.common.camel_model import CamelModel
from app.services.choices import UserRole, UserStatus


class UserOut(CamelModel):
    id: int
    username: str
    email: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: UserRole
    status: UserStatus
