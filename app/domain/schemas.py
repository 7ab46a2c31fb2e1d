# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr, field_validator
from typing import Any, Dict, List, Optional
from decimal import Decimal
from datetime import datetime


class _Schema(BaseModel):
    """Pola w snake_case w Pythonie, camelCase w JSON."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


# =====================================================
# AUTH
# =====================================================
class RegisterIn(_Schema):
    """Schema dla rejestracji uzytkownika."""

    email: EmailStr
    password: str = Field(..., min_length=1, description="Haslo, max 72 bajty w UTF-8")
    name: str = Field(..., min_length=1, max_length=255)
    img: Optional[str] = None

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        #bcrypt bierze tylko 72 bajty, dluzsze haslo byloby po cichu uciete
        if len(value.encode("utf-8")) > 72:
            raise ValueError("password cannot be longer than 72 bytes")
        return value


class LoginIn(_Schema):
    email: EmailStr
    password: str = Field(..., min_length=1)


class CartLineRefOut(_Schema):
    product: str
    quantity: int


class UserOut(_Schema):
    """Uzytkownik w odpowiedzi - bez hasha hasla."""

    id: str
    email: str
    name: str
    img: Optional[str] = None
    cart: List[CartLineRefOut]
    favourites: List[str]
    created_at: datetime = Field(..., alias="createdAt")


class AuthOut(_Schema):
    token: str
    user: UserOut


class UserMessageOut(_Schema):
    message: str
    user: UserOut


# =====================================================
# CART
# =====================================================
class ItemIn(_Schema):
    """Schema dla dodawania produktu do koszyka."""

    product_id: str = Field(..., alias="productId", description="ID produktu")
    quantity: int = Field(..., gt=0, description="Ilosc produktu (musi byc > 0)")


class ItemRemoveIn(_Schema):
    """Brak ilosci (albo <= 0) usuwa cala pozycje."""

    product_id: str = Field(..., alias="productId")
    quantity: Optional[int] = None


class CartLineOut(_Schema):
    product: Optional[Dict[str, Any]] = None
    quantity: int


# =====================================================
# ORDERS
# =====================================================
class OrderLineIn(_Schema):
    product: str = Field(..., description="ID produktu")
    quantity: int = Field(..., gt=0)


class OrderCreate(_Schema):
    """Schema dla skladania zamowienia."""

    products: List[OrderLineIn] = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    total_amount: Decimal = Field(..., alias="totalAmount", ge=0, max_digits=10, decimal_places=2)


class OrderLineOut(_Schema):
    product: Dict[str, Any] | str | None = None
    quantity: int


class OrderOut(_Schema):
    """Schema dla zamowienia (response)."""

    id: str
    user: str
    products: List[OrderLineOut]
    total_amount: Decimal = Field(..., alias="totalAmount")
    address: str
    status: str
    created_at: datetime = Field(..., alias="createdAt")


class OrderMessageOut(_Schema):
    message: str
    order: OrderOut


# =====================================================
# FAVOURITES
# =====================================================
class FavoriteIn(_Schema):
    """productId walidowany w serwisie, zeby brak/zly format dawal 400."""

    product_id: Optional[str] = Field(None, alias="productId")


class HealthOut(_Schema):
    status: str
    database: str
