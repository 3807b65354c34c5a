import json

from tests.helpers import make_payment, make_property, make_tenant


def test_mutations_leave_an_audit_trail(client, admin_headers, operator, operator_headers):
    make_property(client, operator_headers)
    tenant = make_tenant(client, operator_headers)
    payment = make_payment(client, operator_headers, tenant_id=tenant["id"])
    client.put("/api/properties/PRP-100001", json={"rent_amount": 5200}, headers=operator_headers)

    logs = client.get("/api/operation-logs", headers=admin_headers).json()
    types = [entry["type"] for entry in logs]

    # newest first
    assert types[:4] == ["property.updated", "payment.created", "tenant.created", "property.created"]
    assert "user.created" in types

    payment_log = logs[1]
    assert payment_log["operator_id"] == operator["id"]
    details = json.loads(payment_log["details"])
    assert details["id"] == payment["id"]
    assert details["changes"]["tenants_updated"] == 1

    update_log = json.loads(logs[0]["details"])
    assert update_log["changes"] == {"rent_amount": 5200}


def test_password_never_lands_in_the_trail(client, admin_headers, operator):
    client.put(f"/api/users/{operator['id']}", json={"password": "n3w"}, headers=admin_headers)

    logs = client.get("/api/operation-logs?type=user.updated", headers=admin_headers).json()
    assert len(logs) == 1
    assert "n3w" not in logs[0]["details"]


def test_failed_writes_are_not_logged(client, admin_headers):
    client.post("/api/tenants", json={"name": "A", "property_id": "PRP-404"}, headers=admin_headers)
    logs = client.get("/api/operation-logs?type=tenant.created", headers=admin_headers).json()
    assert logs == []


def test_operation_logs_are_admin_only(client, operator_headers):
    assert client.get("/api/operation-logs", headers=operator_headers).status_code == 403


def test_filter_by_operator(client, admin_headers, operator, operator_headers):
    make_property(client, operator_headers)
    make_property(client, admin_headers, id="PRP-2")

    logs = client.get(f"/api/operation-logs?operator_id={operator['id']}", headers=admin_headers).json()
    assert [entry["type"] for entry in logs] == ["property.created"]
