"""Request helpers shared by the API tests."""


def login(client, username, password):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


def make_property(client, headers, **overrides):
    payload = {
        "id": "PRP-100001",
        "name": "Villa Atlas",
        "province": "Casablanca",
        "region": "Anfa",
        "status": "rented",
        "rent_amount": 5000,
        "payment_status": "unpaid",
        "type": "villa",
        "area": 250.0,
        "rooms": 5,
        "description": "Sea view",
    }
    payload.update(overrides)
    response = client.post("/api/properties", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def make_tenant(client, headers, **overrides):
    payload = {
        "name": "Yassine B.",
        "whatsapp": "+212600000000",
        "property_id": "PRP-100001",
        "payment_status": "unpaid",
        "id_card": "BE123456",
        "rating": "good",
    }
    payload.update(overrides)
    response = client.post("/api/tenants", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def make_payment(client, headers, **overrides):
    payload = {
        "property_id": "PRP-100001",
        "tenant_id": 1,
        "amount": 5000,
        "method": "cash",
        "status": "paid",
    }
    payload.update(overrides)
    response = client.post("/api/payments", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()
