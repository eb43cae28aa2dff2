import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.security import verify_password
from app.models.user_db.user_db import User
from app.models.user_db.user_db_crud import get_user_by_username_or_email
from app.services.choices import UserRole, UserStatus

logger = logging.getLogger(__name__)


def authenticate_admin(db: Session, username: str, password: str) -> Optional[User]:
    """Return the user when it is an active admin with a matching password."""
    user = get_user_by_username_or_email(db, username)
    if user is None:
        logger.warning("Admin check failed - unknown user: %s", username)
        return None

    if user.role != UserRole.ADMIN:
        logger.warning("Admin check failed - not an admin: %s", username)
        return None

    if user.status != UserStatus.ACTIVE:
        logger.warning("Admin check failed - user %s is %s", username, user.status.value)
        return None

    if not verify_password(password, user.password):
        logger.warning("Admin check failed - wrong password: %s", username)
        return None

    logger.info("Admin check passed: %s", username)
    return user


def check_user_exists(db: Session, username: str) -> bool:
    return get_user_by_username_or_email(db, username) is not None
