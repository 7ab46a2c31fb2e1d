# app/services/order_service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.data.models.order import OrderLineModel, OrderModel
from app.domain.exceptions import BadRequestError, NotFoundError
from app.domain.ids import normalize_id
from app.domain.schemas import OrderCreate
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.repos.user_repo import UserRepo
from app.services.notification_service import NotificationService
from app.services.product_client import ProductClient
from app.services.views import order_to_dict
from app.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Zamowienie to niezmienny snapshot przeslanych pozycji.
    """

    def __init__(
        self,
        db: Session,
        product_client: ProductClient,
        notification_service: NotificationService | None = None,
    ):
        self.repo = OrderRepo(db)
        self.users = UserRepo(db)
        self.carts = CartRepo(db)
        self.product_client = product_client
        self.notification_service = notification_service or NotificationService()

    def place_order(self, user_id: str, payload: OrderCreate) -> Dict[str, Any]:
        """
        Use Case: Zlozenie zamowienia.

        1. Tworzy zamowienie z dokladnie przeslanych pozycji
        2. Czysci koszyk uzytkownika (ta sama transakcja)
        3. Wysyla powiadomienie (async)

        totalAmount przyjmujemy od klienta, nie liczymy go po stronie serwera.
        """
        product_ids = [normalize_id(line.product) for line in payload.products]
        if None in product_ids:
            raise BadRequestError("Invalid productId format")

        user = self.users.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")

        order = OrderModel(
            user_id=user.id,
            status="PLACED",
            total_amount=payload.total_amount,
            address=payload.address,
            products=[
                OrderLineModel(position=i, product_id=product_id, quantity=line.quantity)
                for i, (product_id, line) in enumerate(zip(product_ids, payload.products))
            ],
        )
        created_order = self.repo.add_order(order)

        cleared = self.carts.clear_cart(user.id)

        self.users.bump_version_or_raise(user)

        logger.info(
            f"Zamowienie {created_order.id} zlozone przez {user_id}, "
            f"wyczyszczono {cleared} pozycji koszyka"
        )

        self.notification_service.send_order_notification(user_id, created_order.id)

        return {
            "message": "Order placed successfully",
            "order": order_to_dict(created_order),
        }

    def list_orders(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Use Case: Lista zamowien uzytkownika (Query), produkty z katalogu.
        """
        orders = self.repo.get_orders_by_user(user_id)
        products = self.product_client.fetch_products(
            line.product_id for order in orders for line in order.products
        )
        return [order_to_dict(order, products) for order in orders]
