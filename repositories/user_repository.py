"""
User Repository - Data access layer for user accounts
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import AppUser
from app.exceptions import ServiceValidationError


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_email(self, email: str) -> Optional[AppUser]:
        """Get user by email (case-insensitive)"""
        return (
            self.db.query(AppUser)
            .filter(AppUser.email == normalize_email(email))
            .first()
        )

    def create_user(self, email: str, name: str, pass_hash: str) -> AppUser:
        """Create a new user"""
        user = AppUser(email=normalize_email(email), name=name, pass_hash=pass_hash)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ServiceValidationError("Email is already registered")
