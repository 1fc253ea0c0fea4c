# storefront/services/cart_service.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.domain.errors import NotFound
from storefront.repos.cart_repo import CartRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CENT = Decimal("0.01")


def line_items(rows) -> List[Dict[str, Any]]:
    return [
        {
            "item_id": r.item_id,
            "product_id": r.product_id,
            "product_name": r.product_name,
            "price": r.price,
            "quantity": r.quantity,
        }
        for r in rows
    ]


def cart_total(items: List[Dict[str, Any]]) -> Decimal:
    total = sum((Decimal(i["price"]) * i["quantity"] for i in items), Decimal("0.00"))
    return total.quantize(CENT)


class CartService:
    """
    Koszyk i jego pozycje.
    commands (create, add, update, remove, delete) modyfikuja stan
    query (get, list_items) tylko odczyt, cena zawsze z katalogu
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)

    def _get_cart_or_404(self, cart_id: int) -> CartModel:
        cart = self.repo.get_cart(cart_id)
        if not cart:
            raise NotFound("Cart not found")
        return cart

    def _get_item_or_404(self, cart_id: int, item_id: int) -> CartItemModel:
        item = self.repo.get_cart_item(cart_id, item_id)
        if not item:
            raise NotFound("Cart item not found")
        return item

    @staticmethod
    def _item_record(item: CartItemModel) -> Dict[str, Any]:
        return {
            "item_id": item.id,
            "cart_id": item.cart_id,
            "product_id": item.product_id,
            "quantity": item.quantity,
        }

    #query
    def get_cart(self, cart_id: int) -> Dict[str, Any]:
        cart = self._get_cart_or_404(cart_id)
        items = line_items(self.repo.get_priced_items(cart_id))
        return {
            "cart_id": cart.id,
            "user_id": cart.user_id,
            "items": items,
            "total": cart_total(items),
        }

    def list_items(self, cart_id: int) -> List[Dict[str, Any]]:
        self._get_cart_or_404(cart_id)
        return line_items(self.repo.get_priced_items(cart_id))

    #commands
    def create_cart(self, user_id: int) -> Dict[str, Any]:
        try:
            cart = self.repo.create_cart(CartModel(user_id=user_id))
            self.repo.commit()
        except IntegrityError:
            # FK na users
            self.repo.rollback()
            raise NotFound("User not found")

        logger.info(f"Utworzono koszyk {cart.id} dla uzytkownika {user_id}")
        return {"cart_id": cart.id, "user_id": cart.user_id, "created_at": cart.created_at}

    def add_item(self, cart_id: int, product_id: int, quantity: int) -> Dict[str, Any]:
        self._get_cart_or_404(cart_id)
        if not self.repo.get_product(product_id):
            raise NotFound("Product not found")

        # kazde wywolanie to osobna pozycja, bez scalania po product_id
        try:
            item = self.repo.add_cart_item(
                CartItemModel(cart_id=cart_id, product_id=product_id, quantity=quantity)
            )
            self.repo.commit()
        except IntegrityError:
            # koszyk albo produkt usuniety w miedzyczasie
            self.repo.rollback()
            raise NotFound("Cart or product not found")

        logger.info(f"Dodano produkt {product_id} x{quantity} do koszyka {cart_id}")
        return self._item_record(item)

    def update_item_quantity(self, cart_id: int, item_id: int, quantity: int) -> Dict[str, Any]:
        item = self._get_item_or_404(cart_id, item_id)
        item.quantity = quantity
        self.repo.commit()

        logger.info(f"Pozycja {item_id} w koszyku {cart_id}: ilosc {quantity}")
        return self._item_record(item)

    def remove_item(self, cart_id: int, item_id: int) -> None:
        item = self._get_item_or_404(cart_id, item_id)
        self.repo.delete_cart_item(item)
        self.repo.commit()
        logger.info(f"Usunieto pozycje {item_id} z koszyka {cart_id}")

    def delete_cart(self, cart_id: int) -> None:
        cart = self._get_cart_or_404(cart_id)
        self.repo.delete_cart(cart)
        self.repo.commit()
        logger.info(f"Usunieto koszyk {cart_id}")
