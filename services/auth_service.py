"""Registration and login"""

import hmac
import logging
from sqlalchemy.orm import Session

from domain.models import AppUser
from repositories import UserRepository
from app.exceptions import ServiceValidationError, UnauthorizedError

logger = logging.getLogger("chefexpress.auth")

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """Business logic for user accounts.

    The client hashes the password before sending it; the server only stores
    and compares that hash.
    """

    @staticmethod
    def register(db: Session, email: str, name: str, pass_hash: str) -> AppUser:
        user_repo = UserRepository(db)
        if user_repo.get_by_email(email):
            logger.warning(f"register_rejected reason=email_taken email={email}")
            raise ServiceValidationError("Email is already registered")

        user = user_repo.create_user(email, name, pass_hash)
        logger.info(f"user_registered user_id={user.user_id} email={user.email}")
        return user

    @staticmethod
    def login(db: Session, email: str, pass_hash: str) -> AppUser:
        user = UserRepository(db).get_by_email(email)
        if not user or not hmac.compare_digest(
            user.pass_hash.encode("utf-8"), pass_hash.encode("utf-8")
        ):
            logger.warning(f"login_failed email={email}")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        logger.info(f"login_succeeded user_id={user.user_id}")
        return user
