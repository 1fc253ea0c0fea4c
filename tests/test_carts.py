from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from storefront.data.database import SessionLocal
from storefront.data.models import CartItemModel, CartModel
from storefront.domain.errors import NotFound
from storefront.repos.cart_repo import CartRepo
from storefront.services.cart_service import CartService


@pytest.fixture()
def cart(db, make_user):
    user = make_user()
    created = CartService(db).create_cart(user.id)
    return created["cart_id"]


class TestCartService:
    def test_create_cart_for_unknown_user(self, db):
        with pytest.raises(NotFound):
            CartService(db).create_cart(999)

    def test_add_and_list_items(self, db, cart, make_product):
        shirt = make_product(name="Shirt", price="10.00")
        socks = make_product(name="Socks", price="5.00")
        svc = CartService(db)

        svc.add_item(cart, shirt.id, 2)
        svc.add_item(cart, socks.id, 1)

        items = svc.list_items(cart)
        assert [(i["product_name"], i["price"], i["quantity"]) for i in items] == [
            ("Shirt", Decimal("10.00"), 2),
            ("Socks", Decimal("5.00"), 1),
        ]

    def test_list_items_reads_live_price(self, db, cart, make_product):
        shirt = make_product(price="10.00")
        svc = CartService(db)
        svc.add_item(cart, shirt.id, 1)

        shirt.price = Decimal("12.50")
        db.commit()

        assert svc.list_items(cart)[0]["price"] == Decimal("12.50")

    def test_add_unknown_product_raises_not_found(self, db, cart):
        with pytest.raises(NotFound, match="^Product not found$"):
            CartService(db).add_item(cart, 999, 1)

    def test_add_to_unknown_cart_raises_not_found(self, db, make_product):
        product = make_product()

        with pytest.raises(NotFound, match="^Cart not found$"):
            CartService(db).add_item(999, product.id, 1)

    def test_cart_removed_during_add_raises_not_found(self, db, cart, make_product, monkeypatch):
        product = make_product()

        def fk_violation(self, item):
            raise IntegrityError("INSERT", {}, Exception("FOREIGN KEY constraint failed"))

        monkeypatch.setattr(CartRepo, "add_cart_item", fk_violation)

        with pytest.raises(NotFound, match="Cart or product not found"):
            CartService(db).add_item(cart, product.id, 1)

    def test_update_quantity(self, db, cart, make_product):
        product = make_product()
        svc = CartService(db)
        item = svc.add_item(cart, product.id, 1)

        updated = svc.update_item_quantity(cart, item["item_id"], 4)

        assert updated["quantity"] == 4

    def test_update_item_of_other_cart_raises_not_found(self, db, cart, make_user, make_product):
        product = make_product()
        svc = CartService(db)
        other_cart = svc.create_cart(make_user(email="other@example.com").id)["cart_id"]
        item = svc.add_item(other_cart, product.id, 1)

        with pytest.raises(NotFound):
            svc.update_item_quantity(cart, item["item_id"], 3)

    def test_remove_item(self, db, cart, make_product):
        product = make_product()
        svc = CartService(db)
        item = svc.add_item(cart, product.id, 1)

        svc.remove_item(cart, item["item_id"])

        assert svc.list_items(cart) == []
        with pytest.raises(NotFound):
            svc.remove_item(cart, item["item_id"])

    def test_delete_cart_cascades_items(self, db, cart, make_product):
        product = make_product()
        svc = CartService(db)
        svc.add_item(cart, product.id, 1)

        svc.delete_cart(cart)

        assert db.get(CartModel, cart) is None
        assert db.query(CartItemModel).filter_by(cart_id=cart).count() == 0

    def test_concurrent_adds_each_persist(self, cart, make_product):
        product = make_product()

        def add(quantity):
            session = SessionLocal()
            try:
                return CartService(session).add_item(cart, product.id, quantity)["item_id"]
            finally:
                session.close()

        with ThreadPoolExecutor(max_workers=4) as pool:
            item_ids = list(pool.map(add, range(1, 9)))

        assert len(set(item_ids)) == 8
        session = SessionLocal()
        try:
            quantities = sorted(i["quantity"] for i in CartService(session).list_items(cart))
        finally:
            session.close()
        assert quantities == list(range(1, 9))


class TestCartEndpoints:
    def test_cart_flow(self, client, auth_headers, make_user, make_product):
        user = make_user()
        product = make_product(price="10.00")

        created = client.post("/carts", json={"user_id": user.id}, headers=auth_headers)
        cart_id = created.json()["cart_id"]
        added = client.post(
            f"/carts/{cart_id}/items",
            json={"product_id": product.id, "quantity": 3},
            headers=auth_headers,
        )
        item_id = added.json()["item_id"]
        updated = client.put(f"/carts/{cart_id}/items/{item_id}", json={"quantity": 2}, headers=auth_headers)
        cart = client.get(f"/carts/{cart_id}", headers=auth_headers)

        assert created.status_code == 201
        assert added.status_code == 201
        assert updated.json()["quantity"] == 2
        assert Decimal(cart.json()["total"]) == Decimal("20.00")

    def test_items_listing(self, client, auth_headers, make_user, make_product):
        user = make_user()
        product = make_product(name="Hoodie", price="45.00")
        cart_id = client.post("/carts", json={"user_id": user.id}, headers=auth_headers).json()["cart_id"]
        client.post(f"/carts/{cart_id}/items", json={"product_id": product.id, "quantity": 1}, headers=auth_headers)

        response = client.get(f"/carts/{cart_id}/items", headers=auth_headers)

        assert response.status_code == 200
        [item] = response.json()
        assert item["product_name"] == "Hoodie"
        assert set(item) == {"item_id", "product_id", "product_name", "price", "quantity"}

    def test_zero_quantity_rejected(self, client, auth_headers, make_user, make_product):
        user = make_user()
        product = make_product()
        cart_id = client.post("/carts", json={"user_id": user.id}, headers=auth_headers).json()["cart_id"]

        response = client.post(f"/carts/{cart_id}/items", json={"product_id": product.id, "quantity": 0}, headers=auth_headers)

        assert response.status_code == 422

    def test_missing_item_and_cart_are_404(self, client, auth_headers, make_user):
        user = make_user()
        cart_id = client.post("/carts", json={"user_id": user.id}, headers=auth_headers).json()["cart_id"]

        assert client.delete(f"/carts/{cart_id}/items/999", headers=auth_headers).status_code == 404
        assert client.delete(f"/carts/{cart_id}", headers=auth_headers).status_code == 200
        assert client.delete(f"/carts/{cart_id}", headers=auth_headers).status_code == 404
