# app/services/views.py
from typing import Any, Dict, Mapping

from app.data.models.order import OrderModel
from app.data.models.user import UserModel


def user_to_dict(user: UserModel) -> Dict[str, Any]:
    #hash hasla nigdy nie wychodzi na zewnatrz
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "img": user.img,
        "cart": [
            {"product": line.product_id, "quantity": line.quantity}
            for line in user.cart
        ],
        "favourites": [fav.product_id for fav in user.favourites],
        "created_at": user.created_at,
    }


def order_to_dict(order: OrderModel, products: Mapping[str, Any] | None = None) -> Dict[str, Any]:
    """Bez `products` linie maja same id, z `products` - pelne rekordy z katalogu."""
    return {
        "id": order.id,
        "user": order.user_id,
        "products": [
            {
                "product": products.get(line.product_id) if products is not None else line.product_id,
                "quantity": line.quantity,
            }
            for line in order.products
        ],
        "total_amount": order.total_amount,
        "address": order.address,
        "status": order.status,
        "created_at": order.created_at,
    }
