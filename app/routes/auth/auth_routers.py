from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import create_access_token, get_current_user
from app.models.user_db.user_db import User
from app.schemas.login.login_base import LoginRequest, LoginResponse, UserExistsResponse
from app.schemas.users.user_out import UserOut
from app.services.auth_service import authenticate_admin, check_user_exists

auth_router = APIRouter(prefix="/api/auth", tags=["Auth"])


@auth_router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate_admin(db, payload.username, payload.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({"sub": user.username})
    return LoginResponse(token=token, user=UserOut.model_validate(user))


@auth_router.get("/check-user", response_model=UserExistsResponse)
def check_user(username: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    return UserExistsResponse(username=username, exists=check_user_exists(db, username))


@auth_router.get("/me", response_model=UserOut)
def get_me(current_user: User = Depends(get_current_user)):
    return current_user
