# storefront/domain/errors.py
"""
Bledy domenowe. Serwisy rzucaja je bez wiedzy o HTTP,
a handler w main.py mapuje status_code na odpowiedz.
"""


class StorefrontError(Exception):
    status_code = 500
    default_detail = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFound(StorefrontError):
    status_code = 404
    default_detail = "Resource not found"


class InvalidCredentials(StorefrontError):
    status_code = 400
    default_detail = "Invalid email or password"


class EmailAlreadyRegistered(StorefrontError):
    status_code = 400
    default_detail = "Email already registered"


class EmptyCart(StorefrontError):
    status_code = 400
    default_detail = "Cart is empty"


class Unauthorized(StorefrontError):
    status_code = 401
    default_detail = "Could not validate credentials"


class PaymentDeclined(StorefrontError):
    status_code = 402
    default_detail = "Payment declined"


class Forbidden(StorefrontError):
    status_code = 403
    default_detail = "Access denied"


class InternalError(StorefrontError):
    pass


class CheckoutFailed(InternalError):
    default_detail = "Checkout failed"


class ProductInUse(StorefrontError):
    status_code = 400
    default_detail = "Product is referenced by cart items"
