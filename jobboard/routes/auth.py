# jobboard/routes/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobboard.deps import get_db
from jobboard.schemas.auth import AuthOut, LoginIn, RegisterIn
from jobboard.services import auth as auth_service

router = APIRouter(tags=["Auth"])


@router.post("/register", response_model=AuthOut, status_code=201)
def register(body: RegisterIn, db: Session = Depends(get_db)):
    result = auth_service.register(
        db,
        name=body.name,
        email=body.email,
        mobile=body.mobile,
        password=body.password,
    )
    return AuthOut(message="User registered successfully", name=result.name, token=result.token)


@router.post("/login", response_model=AuthOut)
def login(body: LoginIn, db: Session = Depends(get_db)):
    result = auth_service.login(db, email=body.email, password=body.password)
    return AuthOut(message="Login successful", name=result.name, token=result.token)
