from __future__ import annotations

from decimal import Decimal


def test_list_employees_empty(client):
    response = client.get("/api/employees")

    assert response.status_code == 200
    assert response.json() == []


def test_create_employee_assigns_business_id(client, employee_payload):
    employee_payload["employeeId"] = "EMP-CALLER"

    response = client.post("/api/employees", json=employee_payload)

    assert response.status_code == 201
    created = response.json()
    assert created["id"] > 0
    assert created["employeeId"].startswith("EMP")
    assert created["employeeId"] != "EMP-CALLER"
    assert created["status"] == "active"
    assert Decimal(created["salary"]) == Decimal("75000")
    assert created["address"] is None
    assert created["createdAt"]


def test_business_ids_are_unique(client, employee_payload):
    first = client.post("/api/employees", json=employee_payload).json()
    employee_payload["email"] = "grace@example.com"
    second = client.post("/api/employees", json=employee_payload).json()

    assert first["employeeId"] != second["employeeId"]
    listed = client.get("/api/employees").json()
    assert [row["id"] for row in listed] == [first["id"], second["id"]]


def test_salary_accepts_numeric_string(client, employee_payload):
    employee_payload["salary"] = "64000.50"

    created = client.post("/api/employees", json=employee_payload).json()

    assert Decimal(created["salary"]) == Decimal("64000.50")


def test_salary_rejects_non_numeric_string(client, employee_payload):
    employee_payload["salary"] = "a lot"

    response = client.post("/api/employees", json=employee_payload)

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid data"
    assert any(error["field"] == "salary" for error in body["errors"])


def test_missing_fields_are_reported(client):
    response = client.post("/api/employees", json={"email": "someone@example.com"})

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert {"firstName", "lastName", "department", "position", "startDate"} <= fields


def test_invalid_status_rejected(client, employee_payload):
    employee_payload["status"] = "retired"

    response = client.post("/api/employees", json=employee_payload)

    assert response.status_code == 400


def test_duplicate_email_rejected(client, employee_payload):
    assert client.post("/api/employees", json=employee_payload).status_code == 201
    employee_payload["email"] = "ADA@example.com"

    response = client.post("/api/employees", json=employee_payload)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "email"


def test_get_employee_not_found(client):
    response = client.get("/api/employees/999")

    assert response.status_code == 404
    assert response.json() == {"message": "Employee not found"}


def test_partial_update_keeps_other_fields(client, employee_payload):
    created = client.post("/api/employees", json=employee_payload).json()

    response = client.put(
        f"/api/employees/{created['id']}",
        json={"position": "Principal Engineer", "status": "on-leave", "employeeId": "HACKED"},
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["position"] == "Principal Engineer"
    assert updated["status"] == "on-leave"
    assert updated["employeeId"] == created["employeeId"]
    assert updated["firstName"] == "Ada"
    assert updated["phone"] == "555-0100"
    assert client.get(f"/api/employees/{created['id']}").json()["position"] == "Principal Engineer"


def test_update_rejects_null_for_required_field(client, employee_payload):
    created = client.post("/api/employees", json=employee_payload).json()

    response = client.put(f"/api/employees/{created['id']}", json={"firstName": None})

    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "firstName", "message": "firstName cannot be null"}]


def test_update_to_taken_email_rejected(client, employee_payload):
    client.post("/api/employees", json=employee_payload)
    employee_payload["email"] = "grace@example.com"
    grace = client.post("/api/employees", json=employee_payload).json()

    response = client.put(f"/api/employees/{grace['id']}", json={"email": "ada@example.com"})

    assert response.status_code == 400
    own = client.put(f"/api/employees/{grace['id']}", json={"email": "grace@example.com"})
    assert own.status_code == 200


def test_update_missing_employee(client):
    response = client.put("/api/employees/42", json={"position": "CTO"})

    assert response.status_code == 404


def test_delete_employee_then_fetch(client, employee_payload):
    created = client.post("/api/employees", json=employee_payload).json()

    response = client.delete(f"/api/employees/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Employee deleted successfully"}
    assert client.get(f"/api/employees/{created['id']}").status_code == 404


def test_delete_missing_employee(client):
    response = client.delete("/api/employees/12345")

    assert response.status_code == 404
    assert response.json()["message"] == "Employee not found"
