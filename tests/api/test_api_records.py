"""
客房、客人、预订、付款、员工 API 测试
"""
import pytest
from decimal import Decimal
from fastapi.testclient import TestClient


class TestRoomsApi:

    def test_create_and_list(self, client: TestClient):
        response = client.post("/rooms/", json={"room_type": "Suite", "price": "300.00"})
        assert response.status_code == 200
        room = response.json()
        assert room["is_available"] is True
        assert Decimal(room["price"]) == Decimal("300.00")

        response = client.get("/rooms/")
        assert response.status_code == 200
        assert [r["room_type"] for r in response.json()] == ["Suite"]

    def test_invalid_price(self, client: TestClient):
        response = client.post("/rooms/", json={"room_type": "Suite", "price": "-5"})
        assert response.status_code == 422

    def test_set_availability(self, client: TestClient, sample_room):
        response = client.put(f"/rooms/{sample_room.id}/availability", json={"is_available": False})
        assert response.status_code == 200
        assert response.json()["is_available"] is False

        response = client.get("/rooms/?is_available=false")
        assert [r["id"] for r in response.json()] == [sample_room.id]

    def test_missing_room(self, client: TestClient):
        assert client.get("/rooms/999").status_code == 404
        assert client.put("/rooms/999/availability", json={"is_available": True}).status_code == 404

    def test_delete_referenced_room(self, client: TestClient, sample_booking):
        response = client.delete(f"/rooms/{sample_booking.room_id}")
        assert response.status_code == 400

    def test_delete_room(self, client: TestClient, sample_room):
        assert client.delete(f"/rooms/{sample_room.id}").status_code == 200
        assert client.get(f"/rooms/{sample_room.id}").status_code == 404


class TestGuestsApi:

    def test_register(self, client: TestClient):
        response = client.post("/guests/", json={
            "name": "Paul Adam", "email": "pauladam@example.com", "phone": "1234567890"
        })
        assert response.status_code == 200
        data = response.json()
        assert data["join_date"] is not None

        response = client.get(f"/guests/{data['id']}")
        assert response.json()["email"] == "pauladam@example.com"

    def test_duplicate_email(self, client: TestClient, sample_guest):
        response = client.post("/guests/", json={"name": "Other", "email": sample_guest.email})
        assert response.status_code == 400

    def test_name_too_long(self, client: TestClient):
        response = client.post("/guests/", json={"name": "x" * 26})
        assert response.status_code == 422

    def test_delete_referenced_guest(self, client: TestClient, sample_booking):
        assert client.delete(f"/guests/{sample_booking.guest_id}").status_code == 400

    def test_missing_guest(self, client: TestClient):
        assert client.get("/guests/999").status_code == 404
        assert client.delete("/guests/999").status_code == 404


class TestBookingsApi:

    def test_create(self, client: TestClient, sample_guest, sample_room):
        response = client.post("/bookings/", json={
            "guest_id": sample_guest.id,
            "room_id": sample_room.id,
            "check_in": "2024-11-01",
            "check_out": "2024-11-05",
            "total_amount": "400.00"
        })
        assert response.status_code == 200
        booking_id = response.json()["id"]

        response = client.get(f"/bookings/?guest_id={sample_guest.id}")
        assert [b["id"] for b in response.json()] == [booking_id]

    def test_missing_guest(self, client: TestClient, sample_room):
        response = client.post("/bookings/", json={
            "guest_id": 999,
            "room_id": sample_room.id,
            "check_in": "2024-11-01",
            "check_out": "2024-11-05",
            "total_amount": "400.00"
        })
        assert response.status_code == 400

    def test_check_out_before_check_in(self, client: TestClient, sample_guest, sample_room):
        response = client.post("/bookings/", json={
            "guest_id": sample_guest.id,
            "room_id": sample_room.id,
            "check_in": "2024-11-05",
            "check_out": "2024-11-01",
            "total_amount": "400.00"
        })
        assert response.status_code == 422

    def test_delete(self, client: TestClient, sample_booking):
        assert client.delete(f"/bookings/{sample_booking.id}").status_code == 200
        assert client.get(f"/bookings/{sample_booking.id}").status_code == 404


class TestPaymentsApi:

    def test_record(self, client: TestClient, sample_booking):
        response = client.post("/payments/", json={
            "booking_id": sample_booking.id,
            "amount_paid": "400.00",
            "payment_status": "Paid",
            "payment_date": "2024-11-05"
        })
        assert response.status_code == 200
        assert response.json()["payment_status"] == "Paid"

        response = client.get(f"/payments/?booking_id={sample_booking.id}&payment_status=Paid")
        assert len(response.json()) == 1

    def test_unknown_status(self, client: TestClient, sample_booking):
        response = client.post("/payments/", json={
            "booking_id": sample_booking.id,
            "amount_paid": "10.00",
            "payment_status": "Refunded"
        })
        assert response.status_code == 422

    def test_missing_booking(self, client: TestClient):
        response = client.post("/payments/", json={"booking_id": 999, "amount_paid": "10.00"})
        assert response.status_code == 400


class TestStaffApi:

    def test_create_and_list(self, client: TestClient):
        response = client.post("/staff/", json={"name": "Stain Hill", "role": "Manager"})
        assert response.status_code == 200
        staff_id = response.json()["id"]

        assert client.get(f"/staff/{staff_id}").json()["role"] == "Manager"
        assert len(client.get("/staff/?role=Manager").json()) == 1
        assert client.get("/staff/999").status_code == 404


def test_health(client: TestClient):
    assert client.get("/health").json() == {"status": "healthy"}
