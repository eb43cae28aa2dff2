from sqlalchemy import or_
from sqlalchemy.orm import Session
from app.models.user_db.user_db import User
from app.core.security import hash_password
from app.services.choices import UserRole, UserStatus


def create_user(
    db: Session,
    username: str,
    email: str,
    password: str,
    full_name: str = None,
    avatar_url: str = None,
    role: UserRole = UserRole.USER,
    status: UserStatus = UserStatus.ACTIVE,
):
    db_user = User(
        username=username,
        email=email,
        password=hash_password(password),
        full_name=full_name,
        avatar_url=avatar_url,
        role=role,
        status=status,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def get_user_by_id(db: Session, user_id: int):
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username_or_email(db: Session, username_or_email: str):
    return db.query(User).filter(
        or_(User.username == username_or_email, User.email == username_or_email)
    ).first()
