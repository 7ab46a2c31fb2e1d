# app/services/favorite_service.py
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.data.models.favorite import FavoriteModel
from app.domain.exceptions import BadRequestError, ConcurrentModificationError, NotFoundError
from app.domain.ids import normalize_id
from app.repos.favorite_repo import FavoriteRepo
from app.repos.user_repo import UserRepo
from app.services.product_client import ProductClient
from app.services.views import user_to_dict
from app.utils.logging import get_logger

logger = get_logger(__name__)


class FavoriteService:
    def __init__(self, db: Session, product_client: ProductClient):
        self.users = UserRepo(db)
        self.repo = FavoriteRepo(db)
        self.product_client = product_client

    def _get_user(self, user_id: str):
        user = self.users.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def add_favorite(self, user_id: str, product_id: str | None) -> Dict[str, Any]:
        """Idempotentne - drugi raz ten sam produkt nic nie zmienia."""
        if not product_id:
            raise BadRequestError("productId is required")

        product_id = normalize_id(product_id)
        if product_id is None:
            raise BadRequestError("Invalid productId format")

        user = self._get_user(user_id)

        if not self.repo.exists(user_id, product_id):
            try:
                self.repo.add_favorite(FavoriteModel(user_id=user_id, product_id=product_id))
            except IntegrityError:
                #ktos dodal ten sam produkt rownolegle
                self.users.rollback()
                raise ConcurrentModificationError()
            self.users.bump_version_or_raise(user)
            logger.info(f"Dodano {product_id} do ulubionych uzytkownika {user_id}")

        return {
            "message": "Product added to favorites",
            "user": user_to_dict(user),
        }

    def remove_favorite(self, user_id: str, product_id: str | None) -> Dict[str, Any]:
        user = self._get_user(user_id)

        #brak produktu w ulubionych to nie blad
        product_id = normalize_id(product_id)
        if product_id and self.repo.remove_favorite(user_id, product_id):
            self.users.bump_version_or_raise(user)
            logger.info(f"Usunieto {product_id} z ulubionych uzytkownika {user_id}")

        return {
            "message": "Product removed from favorites successfully",
            "user": user_to_dict(user),
        }

    def list_favorites(self, user_id: str) -> List[Dict[str, Any]]:
        self._get_user(user_id)
        favorites = self.repo.get_favorites(user_id)
        products = self.product_client.fetch_products(f.product_id for f in favorites)

        #produkty usuniete z katalogu pomijamy
        return [products[f.product_id] for f in favorites if products.get(f.product_id) is not None]
