# app/services/auth_service.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.data.models.user import UserModel
from app.domain.exceptions import ConflictError, ForbiddenError, NotFoundError
from app.domain.schemas import LoginIn, RegisterIn
from app.repos.user_repo import UserRepo
from app.services.password_hasher import PasswordHasher
from app.services.token_service import TokenService
from app.services.views import user_to_dict
from app.utils.logging import get_logger

logger = get_logger(__name__)


class AuthService:
    """Rejestracja i logowanie. Oba zwracaja {"token", "user"}."""

    def __init__(self, db: Session, token_service: TokenService, password_hasher: PasswordHasher):
        self.repo = UserRepo(db)
        self.token_service = token_service
        self.password_hasher = password_hasher

    def register(self, payload: RegisterIn):
        email = payload.email.lower()

        if self.repo.get_user_by_email(email):
            logger.info("Rejestracja odrzucona, email zajety")
            raise ConflictError("Email is already in use.")

        user = UserModel(
            email=email,
            password=self.password_hasher.hash(payload.password),
            name=payload.name,
            img=payload.img,
        )

        try:
            created = self.repo.create_user(user)
        except IntegrityError:
            #rownolegla rejestracja tego samego emaila, unique constraint
            self.repo.rollback()
            raise ConflictError("Email is already in use.")

        logger.info(f"Zarejestrowano uzytkownika {created.id}")

        return {
            "token": self.token_service.issue(created.id),
            "user": user_to_dict(created),
        }

    def login(self, payload: LoginIn):
        user = self.repo.get_user_by_email(payload.email.lower())

        if not user:
            #409 a nie 404, tego oczekuje klient API
            raise NotFoundError("User not found.", status_code=409)

        if not self.password_hasher.verify(payload.password, user.password):
            logger.info(f"Niepoprawne haslo dla uzytkownika {user.id}")
            raise ForbiddenError("Incorrect password")

        logger.info(f"Uzytkownik {user.id} zalogowany")

        return {
            "token": self.token_service.issue(user.id),
            "user": user_to_dict(user),
        }
