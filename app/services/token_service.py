# app/services/token_service.py
from datetime import datetime, timedelta, timezone

import jwt

from app.domain.exceptions import InvalidCredentialError
from app.utils.logging import get_logger

logger = get_logger(__name__)


class TokenService:
    """
    Wydawanie i weryfikacja bezstanowych tokenow sesji (JWT).
    Payload: {"id": <user id>, "iat": ..., "exp": ...}.
    Weryfikacja zalezy tylko od (token, sekret, teraz) - bez bazy.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_in: timedelta = timedelta(days=36500)):
        if not secret:
            raise ValueError("Sekret JWT nie moze byc pusty")
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, user_id: str, now: datetime | None = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "id": user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + self.expires_in).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str, now: datetime | None = None) -> str:
        """Zwraca user id z tokena albo rzuca InvalidCredentialError."""
        try:
            #exp sprawdzamy sami, zeby "teraz" dalo sie podac z zewnatrz
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False, "verify_iat": False, "require": ["id", "exp"]},
            )
        except jwt.InvalidTokenError as e:
            logger.warning(f"Odrzucony token: {e}")
            raise InvalidCredentialError("Invalid or expired token") from e

        now = now or datetime.now(timezone.utc)
        exp = payload["exp"]
        if not isinstance(exp, (int, float)) or exp <= now.timestamp():
            logger.warning("Odrzucony token: wygasl")
            raise InvalidCredentialError("Invalid or expired token")

        user_id = payload["id"]
        if not isinstance(user_id, str) or not user_id:
            raise InvalidCredentialError("Invalid or expired token")
        return user_id
