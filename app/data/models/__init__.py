#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.user import UserModel
from app.data.models.cart_item import CartItemModel
from app.data.models.favorite import FavoriteModel
from app.data.models.order import OrderModel, OrderLineModel

__all__ = ["UserModel", "CartItemModel", "FavoriteModel", "OrderModel", "OrderLineModel"]
