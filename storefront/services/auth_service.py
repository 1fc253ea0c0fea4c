# storefront/services/auth_service.py
from datetime import timedelta

from sqlalchemy.orm import Session

from storefront.domain.errors import InvalidCredentials
from storefront.domain.schemas import TokenOut
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger
from storefront.utils.security import create_access_token, verify_password
from storefront.utils.settings import ACCESS_TOKEN_EXPIRE_MINUTES

logger = get_logger(__name__)


class AuthService:
    """
    Logowanie haslem i wydawanie tokena JWT.
    Brak sesji po stronie serwera - token niesie id i email uzytkownika.
    """

    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def login(self, email: str, password: str) -> TokenOut:
        user = self.repo.get_user_by_email(email)

        # ten sam blad dla nieznanego maila i zlego hasla
        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for {email}")
            raise InvalidCredentials()

        expires = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
        token = create_access_token(
            data={"sub": str(user.id), "email": user.email},
            expires_delta=expires,
        )

        logger.info(f"User {user.id} logged in")
        return TokenOut(access_token=token, expires_in=int(expires.total_seconds()))
