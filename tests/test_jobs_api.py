def _auth(token):
    return {"Authorization": f"Bearer {token}"}


def test_create_as_admin(client, admin_token):
    body = {"title": "J-new", "salary": 10, "equity": "0.2", "companyHandle": "c1"}
    r = client.post("/jobs", json=body, headers=_auth(admin_token))
    assert r.status_code == 201, r.text
    job = r.json()["job"]
    assert isinstance(job["id"], int)
    assert {k: job[k] for k in body} == body


def test_create_as_non_admin(client, u1_token):
    r = client.post("/jobs", json={"title": "J-new", "companyHandle": "c1"}, headers=_auth(u1_token))
    assert r.status_code == 401


def test_create_invalid(client, admin_token):
    r = client.post("/jobs", json={"title": "J-new", "salary": "lots", "companyHandle": "c1"}, headers=_auth(admin_token))
    assert r.status_code == 400
    r = client.post("/jobs", json={"title": "J-new", "equity": "1.5", "companyHandle": "c1"}, headers=_auth(admin_token))
    assert r.status_code == 400


def test_create_unknown_company(client, admin_token):
    r = client.post("/jobs", json={"title": "J-new", "companyHandle": "nope"}, headers=_auth(admin_token))
    assert r.status_code == 400
    assert "nope" in r.json()["detail"]


def test_list_anonymous(client):
    r = client.get("/jobs")
    assert r.status_code == 200, r.text
    assert [j["title"] for j in r.json()["jobs"]] == ["Conservator, furniture", "Information officer"]


def test_list_filtered(client):
    r = client.get("/jobs", params={"hasEquity": "true"})
    assert r.status_code == 200, r.text
    assert [j["title"] for j in r.json()["jobs"]] == ["Information officer"]

    r = client.get("/jobs", params={"title": "officer", "minSalary": 100000})
    assert [j["title"] for j in r.json()["jobs"]] == ["Information officer"]


def test_list_no_matches_is_bad_request(client):
    r = client.get("/jobs", params={"minSalary": 10_000_000})
    assert r.status_code == 400


def test_get(client, job_ids):
    job_id = job_ids["Conservator, furniture"]
    r = client.get(f"/jobs/{job_id}")
    assert r.status_code == 200, r.text
    assert r.json()["job"]["companyHandle"] == "c1"


def test_get_not_found(client):
    assert client.get("/jobs/0").status_code == 404


def test_update(client, admin_token, job_ids):
    job_id = job_ids["Conservator, furniture"]
    r = client.patch(f"/jobs/{job_id}", json={"salary": 5, "equity": None}, headers=_auth(admin_token))
    assert r.status_code == 200, r.text
    assert r.json()["job"]["salary"] == 5
    assert r.json()["job"]["equity"] is None


def test_update_unauthorized_invalid_missing(client, u1_token, admin_token, job_ids):
    job_id = job_ids["Conservator, furniture"]
    assert client.patch(f"/jobs/{job_id}", json={"salary": 5}, headers=_auth(u1_token)).status_code == 401
    assert client.patch(f"/jobs/{job_id}", json={"id": 9}, headers=_auth(admin_token)).status_code == 400
    assert client.patch(f"/jobs/{job_id}", json={}, headers=_auth(admin_token)).status_code == 400
    assert client.patch("/jobs/0", json={"salary": 5}, headers=_auth(admin_token)).status_code == 404


def test_delete(client, admin_token, job_ids):
    job_id = job_ids["Information officer"]
    r = client.delete(f"/jobs/{job_id}", headers=_auth(admin_token))
    assert r.status_code == 200, r.text
    assert r.json() == {"deleted": "Information officer"}
    assert client.delete(f"/jobs/{job_id}", headers=_auth(admin_token)).status_code == 404


def test_delete_as_non_admin(client, u1_token, job_ids):
    job_id = job_ids["Information officer"]
    assert client.delete(f"/jobs/{job_id}", headers=_auth(u1_token)).status_code == 401


def test_update_rejects_null_for_required_columns(client, admin_token, job_ids):
    job_id = job_ids["Conservator, furniture"]
    for field in ("title", "companyHandle"):
        r = client.patch(f"/jobs/{job_id}", json={field: None}, headers=_auth(admin_token))
        assert r.status_code == 400, (field, r.text)
