from tests.helpers import make_property, make_tenant


def test_create_and_list_with_property_name(client, operator_headers):
    make_property(client, operator_headers)
    created = make_tenant(client, operator_headers)

    assert created["property_name"] == "Villa Atlas"
    tenants = client.get("/api/tenants", headers=operator_headers).json()
    assert [t["id"] for t in tenants] == [created["id"]]
    assert tenants[0]["rating"] == "good"


def test_tenant_without_property(client, operator_headers):
    created = make_tenant(client, operator_headers, property_id=None)
    assert created["property_id"] is None
    assert created["property_name"] is None


def test_tenant_for_unknown_property_is_400(client, operator_headers):
    response = client.post(
        "/api/tenants", json={"name": "A", "property_id": "PRP-404"}, headers=operator_headers
    )
    assert response.status_code == 400
    assert "does not exist" in response.json()["error"]


def test_many_tenants_may_share_a_property(client, operator_headers):
    make_property(client, operator_headers)
    make_tenant(client, operator_headers, name="First")
    make_tenant(client, operator_headers, name="Second")

    listed = client.get("/api/tenants?property_id=PRP-100001", headers=operator_headers).json()
    assert [t["name"] for t in listed] == ["First", "Second"]


def test_update_tenant(client, operator_headers):
    make_property(client, operator_headers)
    tenant = make_tenant(client, operator_headers)

    response = client.put(
        f"/api/tenants/{tenant['id']}", json={"rating": "excellent", "notes": "always on time"},
        headers=operator_headers,
    )
    assert response.status_code == 200
    assert response.json()["rating"] == "excellent"
    assert response.json()["name"] == tenant["name"]


def test_update_and_delete_missing_tenant_is_404(client, admin_headers):
    assert client.put("/api/tenants/999", json={"name": "x"}, headers=admin_headers).status_code == 404
    assert client.delete("/api/tenants/999", headers=admin_headers).status_code == 404


def test_delete_tenant(client, admin_headers, operator_headers):
    tenant = make_tenant(client, admin_headers, property_id=None)

    assert client.delete(f"/api/tenants/{tenant['id']}", headers=operator_headers).status_code == 200
    assert client.get("/api/tenants", headers=admin_headers).json() == []


def test_blank_property_reference_on_update_is_400(client, operator_headers):
    make_property(client, operator_headers)
    tenant = make_tenant(client, operator_headers)

    response = client.put(f"/api/tenants/{tenant['id']}", json={"property_id": ""}, headers=operator_headers)
    assert response.status_code == 400

    fetched = client.get(f"/api/tenants/{tenant['id']}", headers=operator_headers).json()
    assert fetched["property_id"] == "PRP-100001"


def test_tenant_can_be_detached_from_property(client, operator_headers):
    make_property(client, operator_headers)
    tenant = make_tenant(client, operator_headers)

    response = client.put(f"/api/tenants/{tenant['id']}", json={"property_id": None}, headers=operator_headers)
    assert response.status_code == 200
    assert response.json()["property_id"] is None
    assert response.json()["property_name"] is None


def test_null_tenant_name_is_400(client, operator_headers):
    tenant = make_tenant(client, operator_headers, property_id=None)
    response = client.put(f"/api/tenants/{tenant['id']}", json={"name": None}, headers=operator_headers)
    assert response.status_code == 400
