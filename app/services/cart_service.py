# app/services/cart_service.py
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.data.models.cart_item import CartItemModel
from app.domain.exceptions import BadRequestError, ConcurrentModificationError, NotFoundError
from app.domain.ids import normalize_id
from app.repos.cart_repo import CartRepo
from app.repos.user_repo import UserRepo
from app.services.product_client import ProductClient
from app.services.views import user_to_dict
from app.utils.settings import MAX_CART_LINE_QUANTITY, MAX_CART_LINES
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Serwis obsługujący Use Case'y dla koszyka uzytkownika.
    Komendy (add, remove) i zapytanie (list).
    Koszyk nalezy do usera, wiec optimistic locking idzie po users.version.
    """

    def __init__(
        self,
        db: Session,
        product_client: ProductClient,
        max_line_quantity: int = MAX_CART_LINE_QUANTITY,
        max_lines: int = MAX_CART_LINES,
    ):
        self.users = UserRepo(db)
        self.repo = CartRepo(db)
        self.product_client = product_client
        self.max_line_quantity = max_line_quantity
        self.max_lines = max_lines

    def _get_user(self, user_id: str):
        user = self.users.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    # =====================================================
    # QUERY
    # =====================================================
    def list_items(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Use Case: Pobranie koszyka z produktami z katalogu.
        """
        self._get_user(user_id)
        items = self.repo.get_cart_items(user_id)
        products = self.product_client.fetch_products(i.product_id for i in items)

        return [
            {"product": products.get(i.product_id), "quantity": i.quantity}
            for i in items
        ]

    # =====================================================
    # COMMANDS
    # =====================================================
    def add_product(self, user_id: str, product_id: str, quantity: int) -> Dict[str, Any]:
        """
        Use Case: Dodanie produktu do koszyka.
        Produkt juz w koszyku -> zwiekszamy ilosc, inaczej nowa pozycja.
        """
        product_id = normalize_id(product_id)
        if product_id is None:
            raise BadRequestError("Invalid productId format")

        if quantity <= 0:
            raise BadRequestError("Quantity must be greater than 0")

        user = self._get_user(user_id)
        existing_item = self.repo.get_cart_item(user_id, product_id)

        if existing_item:
            new_quantity = existing_item.quantity + quantity
            if new_quantity > self.max_line_quantity:
                raise BadRequestError(f"Quantity per product cannot exceed {self.max_line_quantity}")

            logger.info(
                f"Produkt {product_id} juz jest w koszyku, zwiekszam ilosc "
                f"z {existing_item.quantity} do {new_quantity}"
            )
            existing_item.quantity = new_quantity
            self.repo.add_cart_item(existing_item)
        else:
            if quantity > self.max_line_quantity:
                raise BadRequestError(f"Quantity per product cannot exceed {self.max_line_quantity}")
            if len(self.repo.get_cart_items(user_id)) >= self.max_lines:
                raise BadRequestError(f"Cart cannot hold more than {self.max_lines} products")

            logger.info(f"Dodaje nowy produkt {product_id} do koszyka uzytkownika {user_id}")
            try:
                self.repo.add_cart_item(
                    CartItemModel(
                        user_id=user_id,
                        product_id=product_id,
                        quantity=quantity,
                    )
                )
            except IntegrityError:
                self.users.rollback()
                raise ConcurrentModificationError()

        self.users.bump_version_or_raise(user)

        return {
            "message": "Product added to cart successfully",
            "user": user_to_dict(user),
        }

    def remove_product(self, user_id: str, product_id: str, quantity: int | None = None) -> Dict[str, Any]:
        """
        Use Case: Usuniecie produktu z koszyka.
        quantity > 0 zmniejsza ilosc (<= 0 usuwa pozycje), brak quantity usuwa pozycje.
        """
        user = self._get_user(user_id)
        #zly format id nie moze byc w koszyku, wiec tez 404
        product_id = normalize_id(product_id)
        item = self.repo.get_cart_item(user_id, product_id) if product_id else None

        if not item:
            raise NotFoundError("Product not found in the user's cart")

        if quantity and quantity > 0:
            item.quantity -= quantity
            if item.quantity <= 0:
                logger.info(f"Usuwanie produktu {product_id} z koszyka uzytkownika {user_id}")
                self.repo.delete_cart_item(item)
            else:
                self.repo.add_cart_item(item)
        else:
            logger.info(f"Usuwanie produktu {product_id} z koszyka uzytkownika {user_id}")
            self.repo.delete_cart_item(item)

        self.users.bump_version_or_raise(user)

        return {
            "message": "Product quantity updated in cart",
            "user": user_to_dict(user),
        }
