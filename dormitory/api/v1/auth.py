"""
Session endpoints: login, logout and the current session.
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.config import settings
from dormitory.core.permissions import Principal
from dormitory.schemas.auth import LoginRequest
from dormitory.schemas.common import SuccessResponse
from dormitory.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login")
def login(payload: LoginRequest, response: Response, db: Session = Depends(deps.get_db)):
    principal, token = AuthService(db).login(payload.identifier, payload.password)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_EXPIRE_HOURS * 3600,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
        path="/",
    )
    return SuccessResponse.create({"user": principal.to_dict(), "token": token}, message="Login successful")


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(settings.SESSION_COOKIE_NAME, path="/")
    return SuccessResponse.create(None, message="Logged out")


@router.get("/session")
def read_session(principal: Principal = Depends(deps.get_current_user)):
    return SuccessResponse.create({"user": principal.to_dict()})
