# storefront/api/routers/checkout.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import require_auth
from storefront.data.database import get_db
from storefront.domain.errors import Forbidden
from storefront.domain.schemas import CheckoutIn, CheckoutOut
from storefront.services.checkout_service import CheckoutService
from storefront.services.payment_service import PaymentGateway, SimulatedPaymentGateway

router = APIRouter(tags=["checkout"])


def get_payment_gateway() -> PaymentGateway:
    return SimulatedPaymentGateway()


@router.post("/checkout", response_model=CheckoutOut)
def checkout(
    payload: CheckoutIn,
    claims: dict = Depends(require_auth),
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    """
    Finalizuje koszyk: total z aktualnych cen, platnosc, czyszczenie pozycji.
    Nie tworzy zamowienia.
    """
    # checkout tylko na wlasne konto z tokena
    if claims.get("sub") != str(payload.user_id):
        raise Forbidden("Token does not match user_id")

    svc = CheckoutService(db, payment_gateway=gateway)
    return svc.checkout(payload.cart_id, payload.user_id)
