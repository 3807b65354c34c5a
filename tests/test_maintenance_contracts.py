from tests.helpers import make_property, make_tenant


def test_maintenance_crud(client, admin_headers, operator_headers):
    make_property(client, operator_headers)

    created = client.post(
        "/api/maintenance",
        json={
            "property_id": "PRP-100001",
            "type": "plumbing",
            "date": "2026-05-02T09:00:00",
            "cost": 850.5,
            "provider": "Hassan Plomberie",
        },
        headers=operator_headers,
    )
    assert created.status_code == 201
    record = created.json()
    assert record["property_name"] == "Villa Atlas"
    assert record["status"] == "pending"

    updated = client.put(
        f"/api/maintenance/{record['id']}", json={"status": "done"}, headers=operator_headers
    )
    assert updated.json()["status"] == "done"
    assert updated.json()["cost"] == 850.5

    listed = client.get("/api/maintenance?status=done", headers=operator_headers).json()
    assert [m["id"] for m in listed] == [record["id"]]

    assert client.delete(f"/api/maintenance/{record['id']}", headers=operator_headers).status_code == 200
    assert client.get(f"/api/maintenance/{record['id']}", headers=admin_headers).status_code == 404


def test_maintenance_requires_existing_property(client, operator_headers):
    response = client.post(
        "/api/maintenance",
        json={"property_id": "PRP-404", "type": "paint"},
        headers=operator_headers,
    )
    assert response.status_code == 400


def test_maintenance_negative_cost_is_400(client, operator_headers):
    make_property(client, operator_headers)
    response = client.post(
        "/api/maintenance",
        json={"property_id": "PRP-100001", "type": "paint", "cost": -1},
        headers=operator_headers,
    )
    assert response.status_code == 400


def test_contract_crud_with_names(client, admin_headers, operator_headers):
    make_property(client, operator_headers)
    tenant = make_tenant(client, operator_headers)

    created = client.post(
        "/api/contracts",
        json={
            "property_id": "PRP-100001",
            "tenant_id": tenant["id"],
            "start_date": "2026-01-01T00:00:00",
            "end_date": "2026-12-31T00:00:00",
            "terms": "12 months, 2 months deposit",
            "document_path": "/uploads/contract.pdf",
        },
        headers=operator_headers,
    )
    assert created.status_code == 201
    contract = created.json()
    assert contract["property_name"] == "Villa Atlas"
    assert contract["tenant_name"] == "Yassine B."
    assert contract["status"] == "active"

    updated = client.put(
        f"/api/contracts/{contract['id']}", json={"status": "terminated"}, headers=operator_headers
    )
    assert updated.status_code == 200
    assert updated.json()["status"] == "terminated"

    by_tenant = client.get(f"/api/contracts?tenant_id={tenant['id']}", headers=operator_headers).json()
    assert len(by_tenant) == 1

    assert client.delete(f"/api/contracts/{contract['id']}", headers=admin_headers).status_code == 200
    assert client.get("/api/contracts", headers=admin_headers).json() == []


def test_contract_end_before_start_is_400(client, operator_headers):
    make_property(client, operator_headers)
    tenant = make_tenant(client, operator_headers)

    response = client.post(
        "/api/contracts",
        json={
            "property_id": "PRP-100001",
            "tenant_id": tenant["id"],
            "start_date": "2026-06-01T00:00:00",
            "end_date": "2026-01-01T00:00:00",
        },
        headers=operator_headers,
    )
    assert response.status_code == 400


def test_contract_update_cannot_end_before_start(client, operator_headers):
    make_property(client, operator_headers)
    tenant = make_tenant(client, operator_headers)
    contract = client.post(
        "/api/contracts",
        json={"property_id": "PRP-100001", "tenant_id": tenant["id"], "start_date": "2026-06-01T00:00:00"},
        headers=operator_headers,
    ).json()

    response = client.put(
        f"/api/contracts/{contract['id']}",
        json={"end_date": "2026-01-01T00:00:00Z"},
        headers=operator_headers,
    )
    assert response.status_code == 400


def test_tenant_with_contract_cannot_be_deleted(client, admin_headers):
    make_property(client, admin_headers)
    tenant = make_tenant(client, admin_headers)
    client.post(
        "/api/contracts",
        json={"property_id": "PRP-100001", "tenant_id": tenant["id"]},
        headers=admin_headers,
    )

    response = client.delete(f"/api/tenants/{tenant['id']}", headers=admin_headers)
    assert response.status_code == 409
    assert "contracts" in response.json()["error"]


def test_missing_records_are_404(client, admin_headers):
    assert client.put("/api/maintenance/9", json={"status": "x"}, headers=admin_headers).status_code == 404
    assert client.delete("/api/contracts/9", headers=admin_headers).status_code == 404


def test_null_for_required_columns_is_400(client, operator_headers):
    make_property(client, operator_headers)
    tenant = make_tenant(client, operator_headers)
    record = client.post(
        "/api/maintenance", json={"property_id": "PRP-100001", "type": "paint"}, headers=operator_headers
    ).json()
    contract = client.post(
        "/api/contracts", json={"property_id": "PRP-100001", "tenant_id": tenant["id"]}, headers=operator_headers
    ).json()

    for field in ("property_id", "type", "cost", "status"):
        response = client.put(f"/api/maintenance/{record['id']}", json={field: None}, headers=operator_headers)
        assert response.status_code == 400
    for field in ("property_id", "tenant_id", "status"):
        response = client.put(f"/api/contracts/{contract['id']}", json={field: None}, headers=operator_headers)
        assert response.status_code == 400

    assert client.put(
        f"/api/maintenance/{record['id']}", json={"provider": None}, headers=operator_headers
    ).status_code == 200
