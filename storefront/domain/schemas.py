# storefront/domain/schemas.py
from pydantic import BaseModel, EmailStr, Field, ConfigDict
from typing import List, Optional
from decimal import Decimal
from datetime import datetime

from storefront.data.models.order import OrderStatus


class Message(BaseModel):
    message: str


# ---------- Auth ----------

class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


# ---------- Users ----------

class UserCreate(BaseModel):
    """Rejestracja uzytkownika."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)
    postal_code: Optional[str] = Field(None, max_length=20)
    country: Optional[str] = Field(None, max_length=100)


class UserUpdate(BaseModel):
    """Czesciowa aktualizacja - pola None zostaja bez zmian."""

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)
    postal_code: Optional[str] = Field(None, max_length=20)
    country: Optional[str] = Field(None, max_length=100)


class UserRead(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: EmailStr
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---------- Products ----------

class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    stock_quantity: int = Field(0, ge=0)
    category_id: Optional[int] = None
    brand_id: Optional[int] = None


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    stock_quantity: Optional[int] = Field(None, ge=0)
    category_id: Optional[int] = None
    brand_id: Optional[int] = None


class ProductRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    stock_quantity: int
    category_id: Optional[int] = None
    brand_id: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---------- Carts ----------

class CreateCartIn(BaseModel):
    """Schema dla tworzenia koszyka."""

    user_id: int = Field(..., gt=0, description="ID uzytkownika (musi byc > 0)")


class ItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, description="ID produktu (musi byc > 0)")
    quantity: int = Field(..., gt=0, description="Ilosc produktu (musi byc > 0)")


class ItemQuantityIn(BaseModel):
    quantity: int = Field(..., gt=0)


class CartItemRecord(BaseModel):
    """Pozycja w koszyku zapisana w bazie."""

    item_id: int
    cart_id: int
    product_id: int
    quantity: int


class CartItemOut(BaseModel):
    """Pozycja w koszyku z aktualna cena z katalogu."""

    item_id: int
    product_id: int
    product_name: str
    price: Decimal
    quantity: int


class CartRead(BaseModel):
    cart_id: int
    user_id: int
    created_at: datetime


class CartOut(BaseModel):
    cart_id: int
    user_id: int
    items: List[CartItemOut]
    total: Decimal


# ---------- Checkout ----------

class CheckoutIn(BaseModel):
    cart_id: int = Field(..., gt=0)
    user_id: int = Field(..., gt=0)


class CheckoutLineOut(CartItemOut):
    line_total: Decimal


class CheckoutOut(BaseModel):
    cart_id: int
    user_id: int
    total: Decimal
    items: List[CheckoutLineOut]
    payment_reference: str


# ---------- Orders ----------

class OrderCreate(BaseModel):
    """Schema dla tworzenia zamowienia."""

    user_id: int = Field(..., gt=0)
    total_amount: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    status: OrderStatus = OrderStatus.PENDING


class OrderUpdate(BaseModel):
    total_amount: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    status: Optional[OrderStatus] = None


class OrderOut(BaseModel):
    """Schema dla zamowienia (response)."""

    id: int
    user_id: int
    status: OrderStatus
    total_amount: Decimal
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
