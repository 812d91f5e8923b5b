"""
Tests for patient endpoints.
"""
from datetime import date


def _create(client, **overrides):
    payload = {"name": "John Doe", "age": 45, "phone": "(415) 555-0100", "email": "john@example.com"}
    payload.update(overrides)
    return client.post("/api/v1/patients", json=payload)


# Patient Endpoint Tests
def test_create_patient_success(client):
    """Test successful patient creation."""
    response = _create(client, admission_date="2024-01-15")

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "John Doe"
    assert isinstance(data["patient_id"], int)
    assert data["admission_date"] == "2024-01-15"
    assert data["phone"] == "(415) 555-0100"


def test_create_patient_defaults_admission_date(client):
    response = _create(client)
    assert response.json()["admission_date"] == date.today().isoformat()


def test_create_patient_validation_blank_name(client):
    response = _create(client, name="   ")
    assert response.status_code == 422
    assert "Name is required." in response.text


def test_create_patient_validation_age_out_of_range(client):
    response = _create(client, age=150)
    assert response.status_code == 422
    assert "between 0 and 120" in response.text


def test_create_patient_validation_bad_email(client):
    response = _create(client, email="a@b")
    assert response.status_code == 422
    assert "valid email address" in response.text


def test_create_patient_validation_bad_phone(client):
    response = _create(client, phone="12345")
    assert response.status_code == 422
    assert "valid phone number" in response.text


def test_list_patients_empty(client):
    """Test listing when the database is empty."""
    response = client.get("/api/v1/patients")
    assert response.status_code == 200
    data = response.json()
    assert data["items"] == []
    assert data["total"] == 0
    assert data["total_pages"] == 1
    assert data["page"] == 1


def test_list_patients_paginated(client):
    """Newest first, page_size respected, pager flags set."""
    for i in range(5):
        _create(client, name=f"Patient {i}")

    first = client.get("/api/v1/patients", params={"page": 1, "page_size": 2}).json()
    last = client.get("/api/v1/patients", params={"page": 3, "page_size": 2}).json()

    assert [p["name"] for p in first["items"]] == ["Patient 4", "Patient 3"]
    assert first["total"] == 5
    assert first["total_pages"] == 3
    assert first["has_next"] is True
    assert first["has_previous"] is False
    assert [p["name"] for p in last["items"]] == ["Patient 0"]
    assert last["has_next"] is False


def test_list_patients_rejects_bad_page(client):
    assert client.get("/api/v1/patients", params={"page": 0}).status_code == 422
    assert client.get("/api/v1/patients", params={"page_size": 1000}).status_code == 422


def test_get_patient(client):
    created = _create(client).json()

    response = client.get(f"/api/v1/patients/{created['patient_id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_patient_not_found(client):
    response = client.get("/api/v1/patients/999")
    assert response.status_code == 404
    body = response.json()
    assert body["detail"] == "Patient 999 not found"
    assert body["context"] == {"patient_id": 999}


def test_update_patient(client):
    created = _create(client, admission_date="2024-01-15").json()

    response = client.put(
        f"/api/v1/patients/{created['patient_id']}",
        json={"name": "John Q. Doe", "age": 46, "disease": "Asthma"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "John Q. Doe"
    assert data["disease"] == "Asthma"
    assert data["phone"] is None
    assert data["admission_date"] == "2024-01-15"


def test_update_patient_not_found(client):
    response = client.put("/api/v1/patients/999", json={"name": "X", "age": 1})
    assert response.status_code == 404


def test_delete_patient(client):
    created = _create(client).json()
    url = f"/api/v1/patients/{created['patient_id']}"

    assert client.delete(url).status_code == 204
    assert client.get(url).status_code == 404
    assert client.delete(url).status_code == 404


def test_search_patients(client):
    _create(client, name="Alice Brown", phone="4155550101")
    _create(client, name="Bob Green", phone="4155550202")
    _create(client, name="Carol White", phone="4155550303")

    by_name = client.get("/api/v1/patients/search", params={"q": "GREEN"}).json()
    by_phone = client.get("/api/v1/patients/search", params={"q": "0303"}).json()
    everyone = client.get("/api/v1/patients/search", params={"q": "41555"}).json()

    assert [p["name"] for p in by_name] == ["Bob Green"]
    assert [p["name"] for p in by_phone] == ["Carol White"]
    assert [p["name"] for p in everyone] == ["Alice Brown", "Bob Green", "Carol White"]


def test_search_blank_returns_first_page(client):
    _create(client, name="Alice Brown")
    response = client.get("/api/v1/patients/search", params={"q": ""})
    assert [p["name"] for p in response.json()] == ["Alice Brown"]


def test_patient_id_outside_integer_range_is_rejected(client):
    """Ids SQLite cannot store are refused before reaching the database."""
    huge = "99999999999999999999999"

    assert client.get(f"/api/v1/patients/{huge}").status_code == 422
    assert client.delete(f"/api/v1/patients/{huge}").status_code == 422
    assert client.put(f"/api/v1/patients/{huge}", json={"name": "X", "age": 1}).status_code == 422
    assert client.get("/api/v1/patients/0").status_code == 422


def test_largest_patient_id_is_not_found(client):
    response = client.get(f"/api/v1/patients/{2**63 - 1}")
    assert response.status_code == 404


def test_create_patient_rejects_non_ascii_or_underscored_age(client):
    for age in ["1_0", "４５"]:
        response = _create(client, age=age)
        assert response.status_code == 422
        assert "valid number for age" in response.text
