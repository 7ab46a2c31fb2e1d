# app/api/routers/favorites.py
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from app.api.deps import get_current_user_id, get_favorite_service
from app.domain.schemas import FavoriteIn, UserMessageOut
from app.services.favorite_service import FavoriteService

router = APIRouter(prefix="/user/favorite", tags=["favorites"])


@router.get("", response_model=List[Dict[str, Any]])
def list_favorites(
    user_id: str = Depends(get_current_user_id),
    svc: FavoriteService = Depends(get_favorite_service),
):
    return svc.list_favorites(user_id)


@router.post("", response_model=UserMessageOut)
def add_favorite(
    payload: FavoriteIn,
    user_id: str = Depends(get_current_user_id),
    svc: FavoriteService = Depends(get_favorite_service),
):
    return svc.add_favorite(user_id, payload.product_id)


@router.patch("", response_model=UserMessageOut)
def remove_favorite(
    payload: FavoriteIn,
    user_id: str = Depends(get_current_user_id),
    svc: FavoriteService = Depends(get_favorite_service),
):
    return svc.remove_favorite(user_id, payload.product_id)
