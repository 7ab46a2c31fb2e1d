# app/repos/user_repo.py
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.data.models.user import UserModel
from app.domain.exceptions import ConcurrentModificationError
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: str) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_user_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_user_version(self, user_id: str, old_version: int) -> int:
        """
        Optimistic locking, np:
        update users set version = 2 where id = :id and version = 1
        Zwraca rowcount, 0 oznacza ze ktos zmienil usera w miedzyczasie.
        """
        result = self.db.execute(
            update(UserModel)
            .where(UserModel.id == user_id, UserModel.version == old_version)
            .values(version=old_version + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def bump_version_or_raise(self, user: UserModel):
        """
        Podbija wersje usera i commituje cala transakcje.
        Ktos zmienil usera w miedzyczasie -> rollback i ConcurrentModificationError.
        """
        rowcount = self.update_user_version(user.id, user.version)
        if rowcount == 0:
            self.rollback()
            logger.warning(f"Konflikt wspolbieznosci na uzytkowniku {user.id}")
            raise ConcurrentModificationError()
        self.commit()
        self.refresh(user)

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    def refresh(self, user: UserModel):
        self.db.refresh(user)
