JSONAPI = "application/vnd.api+json"

def test_list_departments(client):
    response = client.get("/api/v1/departments")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith(JSONAPI)

    body = response.json()
    names = [d["attributes"]["name"] for d in body["data"]]
    assert names[:3] == ["Engineering", "Sales", "Marketing"]
    assert all(d["type"] == "departments" for d in body["data"])
    assert body["meta"]["page"] == {"size": 20, "number": 1}
    assert body["meta"]["total"] == len(body["data"])

def test_list_departments_paginated(client):
    body = client.get("/api/v1/departments", params={"page[size]": 2, "page[number]": 2}).json()
    assert [d["attributes"]["name"] for d in body["data"]] == ["Marketing", "Finance"]
    assert body["meta"]["total"] >= 6

def test_find_department(client):
    first = client.get("/api/v1/departments").json()["data"][0]

    response = client.get(f"/api/v1/departments/{first['id']}")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == first["id"]
    assert data["attributes"] == {"name": first["attributes"]["name"]}
    assert data["relationships"]["employees"] == {"meta": {"included": False}}

def test_unknown_department_is_404(client):
    response = client.get("/api/v1/departments/999999")
    assert response.status_code == 404
    assert "error" in response.json()

    assert client.get("/api/v1/departments/abc").status_code == 404

def test_out_of_range_department_id_is_404(client):
    for department_id in ("99999999999999999999", str(2**63), "0"):
        response = client.get(f"/api/v1/departments/{department_id}")
        assert response.status_code == 404, department_id
