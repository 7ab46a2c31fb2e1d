# app/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_cart_service, get_current_user_id
from app.domain.schemas import CartLineOut, ItemIn, ItemRemoveIn, UserMessageOut
from app.services.cart_service import CartService

router = APIRouter(prefix="/user/cart", tags=["cart"])


@router.get("", response_model=List[CartLineOut])
def get_cart(
    user_id: str = Depends(get_current_user_id),
    svc: CartService = Depends(get_cart_service),
):
    return svc.list_items(user_id)


@router.post("", response_model=UserMessageOut)
def add_item(
    payload: ItemIn,
    user_id: str = Depends(get_current_user_id),
    svc: CartService = Depends(get_cart_service),
):
    return svc.add_product(
        user_id=user_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )


@router.patch("", response_model=UserMessageOut)
def remove_item(
    payload: ItemRemoveIn,
    user_id: str = Depends(get_current_user_id),
    svc: CartService = Depends(get_cart_service),
):
    return svc.remove_product(
        user_id=user_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )
