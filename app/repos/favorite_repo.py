# app/repos/favorite_repo.py
from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from app.data.models.favorite import FavoriteModel


class FavoriteRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_favorites(self, user_id: str) -> list[FavoriteModel]:
        return list(
            self.db.execute(
                select(FavoriteModel)
                .where(FavoriteModel.user_id == user_id)
                .order_by(FavoriteModel.id)
            ).scalars()
        )

    def exists(self, user_id: str, product_id: str) -> bool:
        return self.db.execute(
            select(FavoriteModel.id).where(
                FavoriteModel.user_id == user_id,
                FavoriteModel.product_id == product_id,
            )
        ).first() is not None

    def add_favorite(self, favorite: FavoriteModel) -> FavoriteModel:
        self.db.add(favorite)
        self.db.flush()
        return favorite

    def remove_favorite(self, user_id: str, product_id: str) -> int:
        result = self.db.execute(
            delete(FavoriteModel).where(
                FavoriteModel.user_id == user_id,
                FavoriteModel.product_id == product_id,
            )
        )
        return result.rowcount
