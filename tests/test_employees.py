from directory_api.models import Department, Employee

FIELDS = {"first_name", "last_name", "age", "position", "department_id", "department_name"}

def _all_employees(client, **params):
    response = client.get("/api/v1/employees", params=params)
    assert response.status_code == 200, response.json()
    return response.json()

def test_default_page_returns_full_dataset(client, employee_count):
    body = _all_employees(client)
    assert body["meta"]["page"]["size"] == 1000
    assert len(body["data"]) == employee_count() == body["meta"]["total"]

    ids = [e["id"] for e in body["data"]]
    assert len(ids) == len(set(ids))
    assert set(body["data"][0]["attributes"]) == FIELDS

def test_department_name_matches_department(client, db_session):
    names = {d.id: d.name for d in db_session.query(Department)}
    for e in _all_employees(client)["data"]:
        attrs = e["attributes"]
        assert attrs["department_name"] == names.get(attrs["department_id"])

def test_department_name_is_null_when_department_is_missing(client, db_session):
    # sqlite does not enforce the FK, so an orphan row can be stored directly
    orphan = Employee(first_name="Orphan", last_name="Row", age=40, position="Temp", department_id=987654)
    db_session.add(orphan)
    db_session.commit()
    try:
        response = client.get(f"/api/v1/employees/{orphan.id}")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["attributes"]["department_name"] is None
        assert data["relationships"]["department"]["links"]["related"].endswith("/api/v1/departments/987654")
    finally:
        db_session.delete(orphan)
        db_session.commit()

def test_find_matches_list_entry(client):
    listed = _all_employees(client)["data"]
    for entry in listed[:10]:
        response = client.get(f"/api/v1/employees/{entry['id']}")
        assert response.status_code == 200
        assert response.json()["data"]["attributes"] == entry["attributes"]

def test_unknown_employee_is_404(client):
    assert client.get("/api/v1/employees/999999").status_code == 404

def test_page_size_caps_rows(client):
    total = _all_employees(client)["meta"]["total"]
    body = _all_employees(client, **{"page[size]": 5})
    assert len(body["data"]) == 5
    assert body["meta"]["total"] == total

def test_sort_is_stable_across_pages(client):
    # Many seeded employees share an age; the id tie-break keeps pages disjoint
    full = _all_employees(client, sort="age")["data"]
    paged = []
    for number in range(1, len(full) // 7 + 2):
        paged += _all_employees(client, sort="age", **{"page[size]": 7, "page[number]": number})["data"]
    assert [e["id"] for e in paged] == [e["id"] for e in full]

    ages = [e["attributes"]["age"] for e in full]
    assert ages == sorted(ages)
    for a, b in zip(full, full[1:]):
        if a["attributes"]["age"] == b["attributes"]["age"]:
            assert int(a["id"]) < int(b["id"])

def test_repeated_calls_return_same_order(client):
    first = _all_employees(client, sort="-age,last_name")["data"]
    second = _all_employees(client, sort="-age,last_name")["data"]
    assert [e["id"] for e in first] == [e["id"] for e in second]
    ages = [e["attributes"]["age"] for e in first]
    assert ages == sorted(ages, reverse=True)

def test_filter_parameters_are_ignored(client):
    unfiltered = _all_employees(client)
    filtered = _all_employees(client, **{"filter[department_id]": 1})
    assert len(filtered["data"]) == len(unfiltered["data"])

def test_invalid_page_size_is_400(client):
    for size in ("0", "-1", "abc"):
        response = client.get("/api/v1/employees", params={"page[size]": size})
        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/json")
        assert "page[size]" in response.json()["error"]

def test_invalid_sort_field_is_400(client):
    response = client.get("/api/v1/employees", params={"sort": "salary"})
    assert response.status_code == 400

def test_out_of_range_employee_id_is_404(client):
    # Beyond a 64-bit store integer, and non-positive ids
    for employee_id in ("99999999999999999999", str(2**63), "0", "-3"):
        response = client.get(f"/api/v1/employees/{employee_id}")
        assert response.status_code == 404, employee_id
        assert "error" in response.json()

def test_out_of_range_page_number_is_400(client):
    response = client.get(
        "/api/v1/employees",
        params={"page[size]": 5, "page[number]": "99999999999999999999"},
    )
    assert response.status_code == 400
    assert "page[number]" in response.json()["error"]

def test_far_page_within_range_is_empty(client):
    body = _all_employees(client, **{"page[size]": 5, "page[number]": 100000})
    assert body["data"] == []
    assert body["meta"]["total"] > 0
