"""Registration and login against the credential store."""

import logging

from sqlalchemy.orm import Session

from taskmanager.core.exceptions import DuplicateError, UnauthorizedError, ValidationError
from taskmanager.core.security import create_access_token
from taskmanager.models.user import User
from taskmanager.repositories import user_repository
from taskmanager.schemas.user import LoginRequest, LoginResponse, RegisterRequest

logger = logging.getLogger(__name__)

EMAIL_MAX_LENGTH = 255
NAME_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_BYTES = 72  # limite de bcrypt

INVALID_CREDENTIALS = "Invalid email or password"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _login_response(user: User) -> LoginResponse:
    return LoginResponse(
        token=create_access_token(user.id, user.email),
        user_id=user.id,
        email=user.email,
        name=user.name,
    )


def _validate_registration(email: str, name: str, password: str) -> None:
    if len(email) > EMAIL_MAX_LENGTH:
        raise ValidationError("email", f"Email must be at most {EMAIL_MAX_LENGTH} characters")
    if not name:
        raise ValidationError("name", "Name is required")
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError("name", f"Name must be at most {NAME_MAX_LENGTH} characters")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError("password", f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
    if len(password.encode()) > PASSWORD_MAX_BYTES:
        raise ValidationError("password", f"Password must be at most {PASSWORD_MAX_BYTES} bytes")


def register(db: Session, data: RegisterRequest) -> LoginResponse:
    email = normalize_email(data.email)
    name = data.name.strip()
    _validate_registration(email, name, data.password)

    if user_repository.email_exists(db, email):
        raise DuplicateError("Email already registered")

    user = User(email=email, name=name)
    user.set_password(data.password)
    user = user_repository.add(db, user)

    logger.info("Registered user %s", user.id)
    return _login_response(user)


def login(db: Session, data: LoginRequest) -> LoginResponse:
    email = normalize_email(data.email)
    user = user_repository.get_by_email(db, email)

    # même message que l'email soit inconnu ou le mot de passe faux
    too_long = len(data.password.encode()) > PASSWORD_MAX_BYTES
    if user is None or too_long or not user.verify_password(data.password):
        logger.warning("Login failed for email: %s", email)
        raise UnauthorizedError(INVALID_CREDENTIALS)

    return _login_response(user)
