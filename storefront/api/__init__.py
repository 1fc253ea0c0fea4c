# storefront/api/__init__.py
from fastapi import FastAPI

from storefront.api.routers import auth, carts, checkout, health, orders, products, users


def include_routers(app: FastAPI) -> None:
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(checkout.router)
    app.include_router(orders.router)
