#storefront/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import require_auth
from storefront.data.database import get_db
from storefront.domain.schemas import (
    CartItemOut,
    CartItemRecord,
    CartOut,
    CartRead,
    CreateCartIn,
    ItemIn,
    ItemQuantityIn,
    Message,
)
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["carts"], dependencies=[Depends(require_auth)])


def get_service(db: Session):
    return CartService(db)


@router.post("", response_model=CartRead, status_code=201)
def create_cart(payload: CreateCartIn, db: Session = Depends(get_db)):
    return get_service(db).create_cart(payload.user_id)


@router.get("/{cart_id}", response_model=CartOut)
def get_cart(cart_id: int, db: Session = Depends(get_db)):
    return get_service(db).get_cart(cart_id)


@router.delete("/{cart_id}", response_model=Message)
def delete_cart(cart_id: int, db: Session = Depends(get_db)):
    get_service(db).delete_cart(cart_id)
    return Message(message="Cart deleted")


@router.post("/{cart_id}/items", response_model=CartItemRecord, status_code=201)
def add_item(cart_id: int, payload: ItemIn, db: Session = Depends(get_db)):
    return get_service(db).add_item(
        cart_id=cart_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )


@router.get("/{cart_id}/items", response_model=List[CartItemOut])
def list_items(cart_id: int, db: Session = Depends(get_db)):
    return get_service(db).list_items(cart_id)


@router.put("/{cart_id}/items/{item_id}", response_model=CartItemRecord)
def update_item(cart_id: int, item_id: int, payload: ItemQuantityIn, db: Session = Depends(get_db)):
    return get_service(db).update_item_quantity(cart_id, item_id, payload.quantity)


@router.delete("/{cart_id}/items/{item_id}", response_model=Message)
def remove_item(cart_id: int, item_id: int, db: Session = Depends(get_db)):
    get_service(db).remove_item(cart_id, item_id)
    return Message(message="Item removed from cart")
