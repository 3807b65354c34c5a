from pathlib import Path

from app.services.uploads import stored_name


def test_upload_stores_file_and_serves_it(client, operator_headers, settings):
    response = client.post(
        "/api/upload",
        files={"file": ("receipt.pdf", b"%PDF-1.4 test", "application/pdf")},
        headers=operator_headers,
    )
    assert response.status_code == 200
    path = response.json()["path"]
    assert path.startswith("/uploads/")
    assert path.endswith("-receipt.pdf")

    stored = Path(settings.UPLOAD_DIR) / path.rsplit("/", 1)[1]
    assert stored.read_bytes() == b"%PDF-1.4 test"

    served = client.get(path)
    assert served.status_code == 200
    assert served.content == b"%PDF-1.4 test"


def test_upload_without_file_is_400(client, operator_headers):
    response = client.post("/api/upload", headers=operator_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "No file uploaded"


def test_upload_requires_token(client):
    response = client.post("/api/upload", files={"file": ("a.txt", b"x", "text/plain")})
    assert response.status_code == 401


def test_stored_name_drops_directories():
    assert stored_name("../../etc/passwd").endswith("-passwd")
    assert stored_name("C:\\docs\\bail.pdf").endswith("-bail.pdf")
