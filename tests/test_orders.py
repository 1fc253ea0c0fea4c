from decimal import Decimal

import pytest

from storefront.data.models import OrderStatus
from storefront.domain.errors import NotFound
from storefront.domain.schemas import OrderCreate, OrderUpdate
from storefront.services.order_service import OrderService


class TestOrderService:
    def test_create_defaults_to_pending(self, db, make_user):
        user = make_user()

        order = OrderService(db).create_order(OrderCreate(user_id=user.id, total_amount=Decimal("25.00")))

        assert order.status == OrderStatus.PENDING
        assert order.total_amount == Decimal("25.00")

    def test_create_for_unknown_user(self, db):
        with pytest.raises(NotFound):
            OrderService(db).create_order(OrderCreate(user_id=42, total_amount=Decimal("1.00")))

    def test_status_update_keeps_total(self, db, make_user):
        user = make_user()
        svc = OrderService(db)
        order = svc.create_order(OrderCreate(user_id=user.id, total_amount=Decimal("25.00")))

        updated = svc.update_order(order.id, OrderUpdate(status=OrderStatus.COMPLETED))

        assert updated.status == OrderStatus.COMPLETED
        assert updated.total_amount == Decimal("25.00")

    def test_total_correction_keeps_status(self, db, make_user):
        user = make_user()
        svc = OrderService(db)
        order = svc.create_order(
            OrderCreate(user_id=user.id, total_amount=Decimal("25.00"), status=OrderStatus.PROCESSING)
        )

        updated = svc.update_order(order.id, OrderUpdate(total_amount=Decimal("20.00")))

        assert updated.status == OrderStatus.PROCESSING
        assert updated.total_amount == Decimal("20.00")

    def test_list_filtered_by_user(self, db, make_user):
        alice = make_user()
        bob = make_user(email="bob@example.com")
        svc = OrderService(db)
        svc.create_order(OrderCreate(user_id=alice.id, total_amount=Decimal("1.00")))
        svc.create_order(OrderCreate(user_id=bob.id, total_amount=Decimal("2.00")))

        assert len(svc.list_orders()) == 2
        assert [o.user_id for o in svc.list_orders(bob.id)] == [bob.id]

    def test_delete_missing_order_raises_not_found(self, db):
        with pytest.raises(NotFound):
            OrderService(db).delete_order(999)


class TestOrderEndpoints:
    def test_order_crud(self, client, auth_headers, make_user):
        user = make_user()

        created = client.post("/orders", json={"user_id": user.id, "total_amount": "25.00"}, headers=auth_headers)
        order_id = created.json()["id"]
        fetched = client.get(f"/orders/{order_id}", headers=auth_headers)
        updated = client.put(f"/orders/{order_id}", json={"status": "completed"}, headers=auth_headers)
        deleted = client.delete(f"/orders/{order_id}", headers=auth_headers)

        assert created.status_code == 201
        assert fetched.json()["status"] == "pending"
        assert updated.json()["status"] == "completed"
        assert Decimal(updated.json()["total_amount"]) == Decimal("25.00")
        assert deleted.status_code == 200
        assert client.get(f"/orders/{order_id}", headers=auth_headers).status_code == 404

    def test_unknown_status_rejected(self, client, auth_headers, make_user):
        user = make_user()

        response = client.post(
            "/orders",
            json={"user_id": user.id, "total_amount": "5.00", "status": "shipped-to-mars"},
            headers=auth_headers,
        )

        assert response.status_code == 422

    def test_delete_missing_order_is_404(self, client, auth_headers):
        assert client.delete("/orders/999", headers=auth_headers).status_code == 404
