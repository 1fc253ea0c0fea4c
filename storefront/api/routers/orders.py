# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.api.deps import require_auth
from storefront.data.database import get_db
from storefront.domain.schemas import Message, OrderCreate, OrderOut, OrderUpdate
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"], dependencies=[Depends(require_auth)])


def get_service(db: Session):
    return OrderService(db)


@router.post("", response_model=OrderOut, status_code=201)
def create_order(payload: OrderCreate, db: Session = Depends(get_db)):
    return get_service(db).create_order(payload)


@router.get("", response_model=List[OrderOut])
def list_orders(
    user_id: int | None = Query(None, gt=0),
    db: Session = Depends(get_db),
):
    return get_service(db).list_orders(user_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: int, db: Session = Depends(get_db)):
    return get_service(db).get_order(order_id)


@router.put("/{order_id}", response_model=OrderOut)
def update_order(order_id: int, payload: OrderUpdate, db: Session = Depends(get_db)):
    return get_service(db).update_order(order_id, payload)


@router.delete("/{order_id}", response_model=Message)
def delete_order(order_id: int, db: Session = Depends(get_db)):
    get_service(db).delete_order(order_id)
    return Message(message="Order deleted")
