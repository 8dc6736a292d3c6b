def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}

def test_debug_schema(client):
    response = client.get("/debug/schema")
    assert response.status_code == 200
    assert response.json() == {
        "employee_columns": ["id", "first_name", "last_name", "age", "position", "department_id"],
        "department_columns": ["id", "name"],
    }

def test_debug_data(client, employee_count):
    response = client.get("/debug/data")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")

    body = response.json()
    assert len(body["employees"]) == employee_count()
    assert {"id", "name"} == set(body["departments"][0])
    assert "department_name" not in body["employees"][0]
