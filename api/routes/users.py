"""Registration and login routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from domain.schemas.user_schemas import AuthResponse, LoginRequest, RegisterRequest
from services.auth_service import AuthService

router = APIRouter(tags=["Users"])
logger = logging.getLogger("chefexpress.api.users")


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    """Create an account. The email must not be registered yet."""
    user = AuthService.register(db, body.email, body.name, body.pass_hash)
    return AuthResponse(uuid=user.user_id, name=user.name)


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    """Check credentials and return the user's id and display name."""
    user = AuthService.login(db, body.email, body.pass_hash)
    return AuthResponse(uuid=user.user_id, name=user.name)
