# app/api/routers/users.py
from fastapi import APIRouter, Depends

from app.api.deps import get_auth_service
from app.domain.schemas import AuthOut, LoginIn, RegisterIn
from app.services.auth_service import AuthService

router = APIRouter(prefix="/user", tags=["users"])


@router.post("/signup", response_model=AuthOut, status_code=201)
def register(payload: RegisterIn, svc: AuthService = Depends(get_auth_service)):
    return svc.register(payload)


@router.post("/signin", response_model=AuthOut)
def login(payload: LoginIn, svc: AuthService = Depends(get_auth_service)):
    return svc.login(payload)
