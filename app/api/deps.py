# app/api/deps.py
from datetime import timedelta
from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.exceptions import UnauthenticatedError
from app.services.auth_service import AuthService
from app.services.cart_service import CartService
from app.services.favorite_service import FavoriteService
from app.services.order_service import OrderService
from app.services.password_hasher import PasswordHasher
from app.services.product_client import ProductClient
from app.services.token_service import TokenService
from app.utils import settings


@lru_cache
def get_token_service() -> TokenService:
    return TokenService(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expires_in=timedelta(days=settings.JWT_EXPIRES_DAYS),
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=settings.BCRYPT_ROUNDS)


def get_product_client() -> ProductClient:
    return ProductClient()


def get_current_user_id(
    request: Request,
    token_service: TokenService = Depends(get_token_service),
) -> str:
    """
    Auth gate: Authorization: Bearer <token>.
    Brak naglowka/tokena -> 401, zly podpis albo wygasly -> 403.
    Id usera laduje w request.state dla dalszych etapow.
    """
    auth_header = request.headers.get("authorization")
    if not auth_header:
        raise UnauthenticatedError("No token provided")

    parts = auth_header.split(" ")
    token = parts[1] if len(parts) > 1 else ""
    if not token:
        raise UnauthenticatedError("Token is missing")

    user_id = token_service.verify(token)
    request.state.user_id = user_id
    return user_id


def get_auth_service(
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(db=db, token_service=token_service, password_hasher=password_hasher)


def get_cart_service(
    db: Session = Depends(get_db),
    product_client: ProductClient = Depends(get_product_client),
) -> CartService:
    return CartService(db=db, product_client=product_client)


def get_order_service(
    db: Session = Depends(get_db),
    product_client: ProductClient = Depends(get_product_client),
) -> OrderService:
    return OrderService(db=db, product_client=product_client)


def get_favorite_service(
    db: Session = Depends(get_db),
    product_client: ProductClient = Depends(get_product_client),
) -> FavoriteService:
    return FavoriteService(db=db, product_client=product_client)
