# storefront/services/checkout_service.py
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.domain.errors import CheckoutFailed, EmptyCart, Forbidden, NotFound
from storefront.repos.cart_repo import CartRepo
from storefront.services.cart_service import CENT, cart_total, line_items
from storefront.services.payment_service import PaymentGateway, SimulatedPaymentGateway
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CheckoutService:
    """
    Checkout koszyka jako jedna transakcja.

    1. Pobiera pozycje z aktualna cena z katalogu
    2. Pusty koszyk -> EmptyCart, bez zmian w bazie
    3. Liczy total na Decimal
    4. Autoryzuje platnosc (PaymentGateway)
    5. Czysci pozycje koszyka, koszyk zostaje

    Blad bazy w trakcie -> rollback i CheckoutFailed.
    Zamowienie tworzy osobno klient przez /orders.
    """

    def __init__(self, db: Session, payment_gateway: PaymentGateway | None = None):
        self.repo = CartRepo(db)
        self.payment_gateway = payment_gateway or SimulatedPaymentGateway()

    def checkout(self, cart_id: int, user_id: int) -> Dict[str, Any]:
        try:
            cart = self.repo.get_cart(cart_id)
            if not cart:
                raise NotFound("Cart not found")
            if cart.user_id != user_id:
                raise Forbidden("Cart does not belong to this user")

            items = line_items(self.repo.get_priced_items(cart_id))
            if not items:
                raise EmptyCart()

            total = cart_total(items)
            logger.info(f"Checkout koszyka {cart_id}: {len(items)} pozycji, total {total}")

            reference = self.payment_gateway.authorize(user_id, total)

            cleared = self.repo.clear_items(cart_id)
            self.repo.commit()
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Checkout koszyka {cart_id} nieudany: {e}", exc_info=True)
            raise CheckoutFailed() from e
        except Exception:
            self.repo.rollback()
            raise

        logger.info(f"Checkout koszyka {cart_id} zakonczony, usunieto {cleared} pozycji")

        for i in items:
            i["line_total"] = (i["price"] * i["quantity"]).quantize(CENT)
        return {
            "cart_id": cart_id,
            "user_id": user_id,
            "total": total,
            "items": items,
            "payment_reference": reference,
        }
