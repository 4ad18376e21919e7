from app.models import Appointment, Salon, Service
from tests.conftest import auth_headers


def salon_payload(**overrides):
    payload = {
        "name": "Glow Studio",
        "slogan": "Shine on",
        "gender": "Female",
        "email": "Glow@Example.com",
        "phone": "+4511112222",
        "address": "5 Market Square",
        "district": "Old Town",
        "city": "Aarhus",
        "postalCode": "8000",
        "services": [
            {"name": "Facial", "category": "Face and Body", "minDuration": 45, "maxDuration": 90, "price": 55},
        ],
    }
    payload.update(overrides)
    return payload


class TestCreateSalon:
    def test_business_creates_salon_with_catalog(self, client, owner):
        response = client.post("/api/salons", json=salon_payload(), headers=auth_headers(owner))

        assert response.status_code == 201
        salon = response.json()["salon"]
        assert salon["ownerId"] == owner.id
        assert salon["rating"] == 0.0
        assert salon["postalCode"] == "8000"
        assert salon["services"][0]["category"] == "Face and Body"
        assert salon["services"][0]["minDuration"] == 45

    def test_customer_cannot_create_salon(self, client, customer):
        response = client.post("/api/salons", json=salon_payload(), headers=auth_headers(customer))

        assert response.status_code == 403

    def test_duplicate_name_for_same_owner(self, client, owner, other_owner):
        client.post("/api/salons", json=salon_payload(), headers=auth_headers(owner))

        duplicate = client.post("/api/salons", json=salon_payload(), headers=auth_headers(owner))
        other = client.post("/api/salons", json=salon_payload(), headers=auth_headers(other_owner))

        assert duplicate.status_code == 409
        assert other.status_code == 201

    def test_missing_fields(self, client, owner):
        payload = salon_payload()
        del payload["district"]

        response = client.post("/api/salons", json=payload, headers=auth_headers(owner))

        assert response.status_code == 400

    def test_service_duration_range_validated(self, client, owner):
        payload = salon_payload(services=[
            {"name": "Facial", "category": "Face and Body", "minDuration": 60, "maxDuration": 30, "price": 55},
        ])

        response = client.post("/api/salons", json=payload, headers=auth_headers(owner))

        assert response.status_code == 400

    def test_unknown_service_category(self, client, owner):
        payload = salon_payload(services=[
            {"name": "Massage", "category": "Spa", "minDuration": 30, "maxDuration": 60, "price": 40},
        ])

        response = client.post("/api/salons", json=payload, headers=auth_headers(owner))

        assert response.status_code == 400


class TestReadSalons:
    def test_get_salon(self, client, salon):
        response = client.get(f"/api/salons/{salon.id}")

        assert response.status_code == 200
        body = response.json()["salon"]
        assert body["name"] == "Shear Bliss"
        assert [s["name"] for s in body["services"]] == ["Haircut", "Manicure"]
        assert body["owner"]["firstName"] == "Olivia"

    def test_get_missing_salon(self, client):
        response = client.get("/api/salons/9999")

        assert response.status_code == 404
        assert response.json() == {"error": "Salon not found"}

    def test_filters(self, client, owner, salon):
        client.post("/api/salons", json=salon_payload(), headers=auth_headers(owner))

        by_category = client.get("/api/salons", params={"category": "Nails"}).json()["salons"]
        by_name = client.get("/api/salons", params={"name": "glow"}).json()["salons"]
        by_city = client.get("/api/salons", params={"city": "Copenhagen"}).json()["salons"]
        by_gender = client.get("/api/salons", params={"gender": "Female"}).json()["salons"]
        by_postal_code = client.get("/api/salons", params={"postalCode": "8000"}).json()["salons"]

        assert [s["name"] for s in by_category] == ["Shear Bliss"]
        assert [s["name"] for s in by_name] == ["Glow Studio"]
        assert [s["name"] for s in by_city] == ["Shear Bliss"]
        assert [s["name"] for s in by_gender] == ["Glow Studio"]
        assert [s["name"] for s in by_postal_code] == ["Glow Studio"]


class TestUpdateSalon:
    def test_owner_updates_fields_and_replaces_catalog(self, client, db, owner, salon):
        response = client.patch(
            f"/api/salons/{salon.id}",
            json={
                "slogan": "Fresh looks",
                "services": [
                    {"name": "Gel Nails", "category": "Nails", "minDuration": 30, "maxDuration": 45, "price": 30},
                ],
            },
            headers=auth_headers(owner),
        )

        assert response.status_code == 200
        body = response.json()["salon"]
        assert body["slogan"] == "Fresh looks"
        assert body["name"] == "Shear Bliss"
        assert [s["name"] for s in body["services"]] == ["Gel Nails"]
        db.expire_all()
        assert db.query(Service).count() == 1

    def test_null_required_field_is_ignored(self, client, owner, salon):
        response = client.patch(f"/api/salons/{salon.id}", json={"name": None}, headers=auth_headers(owner))

        assert response.status_code == 200
        assert response.json()["salon"]["name"] == "Shear Bliss"

    def test_non_owner_cannot_update(self, client, other_owner, salon):
        response = client.patch(f"/api/salons/{salon.id}", json={"slogan": "x"}, headers=auth_headers(other_owner))

        assert response.status_code == 403


class TestDeleteSalon:
    def test_owner_deletes_salon_and_its_appointments(self, client, db, make_appointment, customer, owner, salon):
        make_appointment(customer, salon)

        response = client.delete(f"/api/salons/{salon.id}", headers=auth_headers(owner))

        assert response.status_code == 200
        db.expire_all()
        assert db.query(Salon).count() == 0
        assert db.query(Appointment).count() == 0
        assert db.query(Service).count() == 0

    def test_non_owner_cannot_delete(self, client, other_owner, salon):
        response = client.delete(f"/api/salons/{salon.id}", headers=auth_headers(other_owner))

        assert response.status_code == 403
