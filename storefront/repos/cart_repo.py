# storefront/repos/cart_repo.py
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.product import ProductModel


class CartRepo:
    """
    Dostep do koszykow i pozycji. Metody nie commituja,
    transakcja jest zamykana przez serwis (commit / rollback).
    """

    def __init__(self, db: Session):
        self.db = db

    def get_cart(self, cart_id: int) -> CartModel | None:
        return self.db.get(CartModel, cart_id)

    def create_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.flush()
        return cart

    def delete_cart(self, cart: CartModel) -> None:
        self.db.delete(cart)
        self.db.flush()

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def get_cart_item(self, cart_id: int, item_id: int) -> CartItemModel | None:
        return self.db.execute(
            select(CartItemModel).where(
                CartItemModel.id == item_id,
                CartItemModel.cart_id == cart_id,
            )
        ).scalar_one_or_none()

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def delete_cart_item(self, item: CartItemModel) -> None:
        self.db.delete(item)
        self.db.flush()

    def get_priced_items(self, cart_id: int) -> List[Row]:
        """Pozycje koszyka z nazwa i cena produktu z katalogu (live)."""
        stmt = (
            select(
                CartItemModel.id.label("item_id"),
                CartItemModel.product_id,
                ProductModel.name.label("product_name"),
                ProductModel.price,
                CartItemModel.quantity,
            )
            .join(ProductModel, ProductModel.id == CartItemModel.product_id)
            .where(CartItemModel.cart_id == cart_id)
            .order_by(CartItemModel.id)
        )
        return list(self.db.execute(stmt).all())

    def clear_items(self, cart_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(CartItemModel.cart_id == cart_id)
        )
        return result.rowcount

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
