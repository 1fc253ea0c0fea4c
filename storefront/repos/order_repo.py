# storefront/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def list_orders(self, user_id: int | None = None) -> List[OrderModel]:
        stmt = select(OrderModel).order_by(OrderModel.id)
        if user_id is not None:
            stmt = stmt.where(OrderModel.user_id == user_id)
        return list(self.db.execute(stmt).scalars())

    def update_order(self, order: OrderModel, changes: dict) -> OrderModel:
        for field, value in changes.items():
            setattr(order, field, value)
        self.db.commit()
        self.db.refresh(order)
        return order

    def delete_order(self, order: OrderModel) -> None:
        self.db.delete(order)
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
