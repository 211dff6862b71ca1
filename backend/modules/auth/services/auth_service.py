# backend/modules/auth/services/auth_service.py

"""
Account registration and credential checks.
"""

import logging
from typing import Optional

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.config import Settings, get_settings
from core.exceptions import AuthenticationError, ConflictError, InvalidInputError, PersistenceError
from core.validators import normalize_email, optional_text, require_text

from ..models.user_models import User, UserRole
from ..schemas.auth_schemas import UserLogin, UserRegister

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        # Unrecognised hash format
        return False


class AuthService:
    """Service for user accounts"""

    def __init__(self, db: Session, settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or get_settings()

    def register(self, data: UserRegister) -> User:
        email = normalize_email(data.email)
        first_name = require_text(data.first_name, "First name is required")
        last_name = require_text(data.last_name, "Last name is required")

        if len(data.password or "") < self.settings.min_password_length:
            raise InvalidInputError(
                f"Password must be at least {self.settings.min_password_length} characters"
            )

        if self._find_by_email(email):
            raise ConflictError("Email already exists", error_code="EMAIL_EXISTS")

        user = User(
            email=email,
            password_hash=hash_password(data.password),
            first_name=first_name,
            last_name=last_name,
            phone=optional_text(data.phone),
            role=UserRole.CUSTOMER.value,
        )

        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError:
            # Lost a race with a concurrent registration
            self.db.rollback()
            raise ConflictError("Email already exists", error_code="EMAIL_EXISTS")
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to register user")
            raise PersistenceError("Registration failed")

        logger.info(f"Registered user {user.id}")
        return user

    def authenticate(self, data: UserLogin) -> User:
        try:
            email = normalize_email(data.email)
        except InvalidInputError:
            raise AuthenticationError()

        user = self._find_by_email(email)
        if user is None or not verify_password(data.password, user.password_hash):
            logger.warning("Failed login attempt")
            raise AuthenticationError()
        return user

    def _find_by_email(self, email: str) -> Optional[User]:
        try:
            return self.db.query(User).filter(User.email == email).first()
        except SQLAlchemyError:
            logger.exception("Failed to look up user by email")
            raise PersistenceError()
