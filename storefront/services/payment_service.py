# storefront/services/payment_service.py
import uuid
from abc import ABC, abstractmethod
from decimal import Decimal

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class PaymentGateway(ABC):
    """
    Autoryzacja platnosci przy checkoucie.
    authorize zwraca referencje platnosci albo rzuca PaymentDeclined.
    """

    @abstractmethod
    def authorize(self, user_id: int, amount: Decimal) -> str:
        ...


class SimulatedPaymentGateway(PaymentGateway):
    """Brak prawdziwej bramki - kazda platnosc przechodzi."""

    def authorize(self, user_id: int, amount: Decimal) -> str:
        reference = f"sim-{uuid.uuid4().hex}"
        logger.info(f"Simulated payment {reference}: user {user_id}, amount {amount}")
        return reference
