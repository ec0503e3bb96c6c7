"""Latest jobs: categories, admin filters, public shortcuts and search."""

import pytest


def _job(category="Results", title="SSC Result", **extra):
    return {
        "category": category,
        "meta_title": title,
        "meta_description": f"{title} description",
        "content_title": title,
        "content_description": f"All about {title}",
        **extra,
    }


@pytest.fixture
def jobs(client, admin_headers):
    created = [
        client.post("/api/latest-jobs/admin/create", headers=admin_headers, json=body).json()["data"]
        for body in (
            _job("Results", "SSC Result"),
            _job("AdmitCards", "UPSC Admit Card", keywords=["civil services"]),
            _job("Syllabus", "Railway Syllabus"),
        )
    ]
    return {job["category"]: job for job in created}


def test_create_rejects_unknown_category(client, admin_headers):
    response = client.post("/api/latest-jobs/admin/create", headers=admin_headers, json=_job("Gossip"))
    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid category")


def test_create_requires_fields(client, admin_headers):
    body = _job()
    del body["content_description"]
    response = client.post("/api/latest-jobs/admin/create", headers=admin_headers, json=body)
    assert response.status_code == 400


def test_admin_filters(client, admin_headers, jobs):
    by_category = client.get("/api/latest-jobs/admin/all", headers=admin_headers, params={"category": "Results"})
    assert [j["id"] for j in by_category.json()["data"]] == [jobs["Results"]["id"]]

    by_search = client.get("/api/latest-jobs/admin/all", headers=admin_headers, params={"search": "railway"})
    assert [j["id"] for j in by_search.json()["data"]] == [jobs["Syllabus"]["id"]]

    listed = client.get("/api/latest-jobs/admin/category/AdmitCards", headers=admin_headers)
    assert listed.json()["pagination"]["total_items"] == 1

    invalid = client.get("/api/latest-jobs/admin/category/Nope", headers=admin_headers)
    assert invalid.status_code == 400


def test_update_validates_category(client, admin_headers, jobs):
    path = f"/api/latest-jobs/admin/{jobs['Results']['id']}"
    assert client.put(path, headers=admin_headers, json={"category": "Nope"}).status_code == 400

    moved = client.put(path, headers=admin_headers, json={"category": "Importance"})
    assert moved.json()["data"]["category"] == "Importance"


def test_null_fields_are_ignored_on_update(client, admin_headers, jobs):
    job = jobs["AdmitCards"]
    path = f"/api/latest-jobs/admin/{job['id']}"
    body = {k: None for k in ("category", "meta_title", "meta_tags", "keywords", "content_title", "is_active")}

    response = client.put(path, headers=admin_headers, json=body)
    assert response.status_code == 200

    public = client.get(f"/api/latest-jobs/public/{job['id']}").json()["data"]
    assert public["category"] == "AdmitCards"
    assert public["keywords"] == ["civil services"]


def test_public_shortcuts(client, jobs):
    results = client.get("/api/latest-jobs/public/results").json()
    assert [j["id"] for j in results["data"]] == [jobs["Results"]["id"]]

    admit = client.get("/api/latest-jobs/public/admitcards").json()
    assert [j["id"] for j in admit["data"]] == [jobs["AdmitCards"]["id"]]

    assert client.get("/api/latest-jobs/public/answerkey").json()["data"] == []


def test_public_all_ignores_unknown_category(client, jobs):
    everything = client.get("/api/latest-jobs/public/all", params={"category": "Nope"}).json()
    assert everything["pagination"]["total_items"] == 3

    filtered = client.get("/api/latest-jobs/public/all", params={"category": "Syllabus"}).json()
    assert filtered["pagination"]["total_items"] == 1


def test_public_by_category_rejects_unknown(client, jobs):
    assert client.get("/api/latest-jobs/public/category/Nope").status_code == 400
    ok = client.get("/api/latest-jobs/public/category/Syllabus")
    assert ok.json()["data"][0]["id"] == jobs["Syllabus"]["id"]


def test_public_search(client, jobs):
    missing = client.get("/api/latest-jobs/public/search")
    assert missing.status_code == 400
    assert missing.json() == {"message": "Search query is required"}

    by_keyword = client.get("/api/latest-jobs/public/search", params={"q": "civil"}).json()
    assert [j["id"] for j in by_keyword["data"]] == [jobs["AdmitCards"]["id"]]


def test_public_get_hides_inactive(client, admin_headers, jobs):
    job_id = jobs["Results"]["id"]
    assert client.get(f"/api/latest-jobs/public/{job_id}").status_code == 200

    client.put(f"/api/latest-jobs/admin/{job_id}", headers=admin_headers, json={"is_active": False})
    assert client.get(f"/api/latest-jobs/public/{job_id}").status_code == 404
    assert client.get("/api/latest-jobs/public/results").json()["data"] == []


def test_hard_delete(client, admin_headers, jobs):
    path = f"/api/latest-jobs/admin/{jobs['Results']['id']}"
    assert client.delete(path, headers=admin_headers).status_code == 200
    assert client.get(path, headers=admin_headers).status_code == 404
