# storefront/services/order_service.py
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.domain.errors import NotFound
from storefront.domain.schemas import OrderCreate, OrderOut, OrderUpdate
from storefront.repos.order_repo import OrderRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Zamowienie jest niezalezne od koszyka - checkout go nie tworzy.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)

    def _get_or_404(self, order_id: int) -> OrderModel:
        order = self.repo.get_order(order_id)
        if not order:
            raise NotFound("Order not found")
        return order

    def create_order(self, payload: OrderCreate) -> OrderOut:
        order = OrderModel(
            user_id=payload.user_id,
            total_amount=payload.total_amount,
            status=payload.status.value,
        )
        try:
            created = self.repo.create_order(order)
        except IntegrityError:
            self.repo.rollback()
            raise NotFound("User not found")

        logger.info(f"Order {created.id} created for user {created.user_id}")
        return OrderOut.model_validate(created)

    def get_order(self, order_id: int) -> OrderOut:
        return OrderOut.model_validate(self._get_or_404(order_id))

    def list_orders(self, user_id: int | None = None) -> List[OrderOut]:
        return [OrderOut.model_validate(o) for o in self.repo.list_orders(user_id)]

    def update_order(self, order_id: int, payload: OrderUpdate) -> OrderOut:
        order = self._get_or_404(order_id)

        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if "status" in changes:
            changes["status"] = changes["status"].value
        if changes:
            order = self.repo.update_order(order, changes)
            logger.info(f"Order {order_id} updated: {changes}")

        return OrderOut.model_validate(order)

    def delete_order(self, order_id: int) -> None:
        order = self._get_or_404(order_id)
        self.repo.delete_order(order)
        logger.info(f"Order {order_id} deleted")
