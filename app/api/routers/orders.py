# app/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_current_user_id, get_order_service
from app.domain.schemas import OrderCreate, OrderMessageOut, OrderOut
from app.services.order_service import OrderService

router = APIRouter(prefix="/user/order", tags=["orders"])


@router.post("", response_model=OrderMessageOut)
def place_order(
    payload: OrderCreate,
    user_id: str = Depends(get_current_user_id),
    svc: OrderService = Depends(get_order_service),
):
    """
    Sklada zamowienie i czysci koszyk.
    Wysyla powiadomienie asynchronicznie.
    """
    return svc.place_order(user_id, payload)


@router.get("", response_model=List[OrderOut])
def list_orders(
    user_id: str = Depends(get_current_user_id),
    svc: OrderService = Depends(get_order_service),
):
    return svc.list_orders(user_id)
