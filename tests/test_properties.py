from app.services import properties as property_service
from tests.helpers import make_payment, make_property, make_tenant


def test_created_property_reads_back_identically(client, operator_headers):
    created = make_property(client, operator_headers)

    listed = client.get("/api/properties", headers=operator_headers).json()
    assert len(listed) == 1
    fetched = listed[0]
    for field in (
        "id", "name", "province", "region", "status", "rent_amount",
        "payment_status", "type", "area", "rooms", "description",
    ):
        assert fetched[field] == created[field]
    assert fetched["id"] == "PRP-100001"
    assert fetched["rent_amount"] == 5000


def test_duplicate_property_id_is_400(client, operator_headers):
    make_property(client, operator_headers)
    response = client.post(
        "/api/properties",
        json={"id": "PRP-100001", "name": "Other"},
        headers=operator_headers,
    )
    assert response.status_code == 400
    assert "already exists" in response.json()["error"]


def test_property_id_is_generated_when_omitted(client, operator_headers):
    response = client.post("/api/properties", json={"name": "Shop"}, headers=operator_headers)
    assert response.status_code == 201
    code = response.json()["id"]
    assert code.startswith("PRP-")
    assert len(code) == len("PRP-123456")


def test_invalid_enum_is_rejected(client, operator_headers):
    response = client.post(
        "/api/properties",
        json={"id": "PRP-1", "name": "X", "status": "sold"},
        headers=operator_headers,
    )
    assert response.status_code == 400


def test_list_is_in_insertion_order_and_stable(client, operator_headers):
    for code in ("PRP-300000", "PRP-100000", "PRP-200000"):
        make_property(client, operator_headers, id=code)

    first = client.get("/api/properties", headers=operator_headers).json()
    second = client.get("/api/properties", headers=operator_headers).json()

    assert [p["id"] for p in first] == ["PRP-300000", "PRP-100000", "PRP-200000"]
    assert first == second


def test_list_filters(client, operator_headers):
    make_property(client, operator_headers, id="PRP-1", status="rented", province="Rabat")
    make_property(client, operator_headers, id="PRP-2", status="available", province="Fes")

    rented = client.get("/api/properties?status=rented", headers=operator_headers).json()
    assert [p["id"] for p in rented] == ["PRP-1"]
    fes = client.get("/api/properties?province=Fes", headers=operator_headers).json()
    assert [p["id"] for p in fes] == ["PRP-2"]


def test_partial_update(client, operator_headers):
    make_property(client, operator_headers)
    response = client.put(
        "/api/properties/PRP-100001",
        json={"rent_amount": 6000, "status": "maintenance"},
        headers=operator_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["rent_amount"] == 6000
    assert body["status"] == "maintenance"
    assert body["name"] == "Villa Atlas"


def test_update_missing_property_is_404(client, operator_headers):
    response = client.put("/api/properties/PRP-404", json={"name": "x"}, headers=operator_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Property not found"}


def test_operator_can_delete_property(client, admin_headers, operator_headers):
    make_property(client, admin_headers)

    assert client.delete("/api/properties/PRP-100001").status_code == 401
    assert client.delete("/api/properties/PRP-100001", headers=operator_headers).status_code == 200
    assert client.get("/api/properties/PRP-100001", headers=admin_headers).status_code == 404


def test_delete_missing_property_is_404(client, admin_headers):
    assert client.delete("/api/properties/PRP-404", headers=admin_headers).status_code == 404


def test_delete_referenced_property_is_409(client, admin_headers):
    make_property(client, admin_headers)
    tenant = make_tenant(client, admin_headers)
    make_payment(client, admin_headers, tenant_id=tenant["id"])

    response = client.delete("/api/properties/PRP-100001", headers=admin_headers)
    assert response.status_code == 409
    assert "tenants" in response.json()["error"]
    assert "payments" in response.json()["error"]
    assert client.get("/api/properties/PRP-100001", headers=admin_headers).status_code == 200


def test_null_for_required_property_field_is_400(client, operator_headers):
    make_property(client, operator_headers)

    for field in ("name", "status", "rent_amount", "payment_status"):
        response = client.put("/api/properties/PRP-100001", json={field: None}, headers=operator_headers)
        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"

    response = client.put("/api/properties/PRP-100001", json={"description": None}, headers=operator_headers)
    assert response.status_code == 200
    assert response.json()["description"] is None


def test_exhausted_property_codes_is_503(client, operator_headers, monkeypatch):
    make_property(client, operator_headers, id="PRP-100001")
    monkeypatch.setattr(property_service.random, "randint", lambda a, b: 100001)

    payload = {"name": "No code", "status": "available"}
    response = client.post("/api/properties", json=payload, headers=operator_headers)
    assert response.status_code == 503
    assert response.json() == {"error": "Could not allocate a free property code"}
