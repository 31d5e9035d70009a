# Auth service: registration, login and token minting over the user store

from taskboard.db_handlers import UserDBHandler
from taskboard.errors import AuthError, ConflictError, ValidationError
from taskboard.schemas import AuthResponse, UserLogin, UserRegister
from taskboard.utils.auth import create_user_token, get_password_hash, verify_password
from taskboard.utils.logger import setup_logger

logger = setup_logger(__name__)

# bcrypt only hashes the first 72 bytes
MAX_PASSWORD_BYTES = 72


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class AuthService:
    """
    Registers users and exchanges credentials for bearer tokens.

    The user handler is injected so the service can run against any store
    exposing ``get_user_by_username``, ``get_user_by_email`` and ``create_user``.
    """

    def __init__(self, user_db_handler: UserDBHandler):
        self.user_db_handler = user_db_handler

    async def register(self, user_data: UserRegister) -> AuthResponse:
        if any(
            _is_blank(value)
            for value in (
                user_data.username,
                user_data.password,
                user_data.email,
                user_data.mobile,
            )
        ):
            raise ValidationError(
                "Please provide username, password, email, and mobile"
            )

        if len(user_data.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes long"
            )

        username = user_data.username.strip()
        email = user_data.email.strip()

        if await self.user_db_handler.get_user_by_username(username):
            raise ConflictError("User already exists")
        if await self.user_db_handler.get_user_by_email(email):
            raise ConflictError("Email already exists")

        user = await self.user_db_handler.create_user(
            {
                "username": username,
                "email": email,
                "mobile": user_data.mobile.strip(),
                "hashed_password": get_password_hash(user_data.password),
            }
        )
        logger.info(f"Registered user '{user.username}' ({user.id})")

        return AuthResponse(
            id=user.id, username=user.username, token=create_user_token(user.id)
        )

    async def login(self, credentials: UserLogin) -> AuthResponse:
        if _is_blank(credentials.username) or not credentials.password:
            raise ValidationError("Please provide username and password")

        user = await self.user_db_handler.get_user_by_username(
            credentials.username.strip()
        )
        # Same error for unknown user and wrong password
        if not user or not verify_password(credentials.password, user.hashed_password):
            logger.info(f"Failed login attempt for '{credentials.username}'")
            raise AuthError("Invalid credentials")

        return AuthResponse(
            id=user.id, username=user.username, token=create_user_token(user.id)
        )
