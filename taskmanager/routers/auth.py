from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskmanager.core.database import get_db
from taskmanager.schemas.user import LoginRequest, LoginResponse, RegisterRequest
from taskmanager.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    """Create an account and return a bearer token."""
    return auth_service.register(db, data)


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    return auth_service.login(db, credentials)
