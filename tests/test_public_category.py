"""Public category API: active content only, no token required."""

import pytest

from portal.infrastructure.repositories.content_repository import escape_like


@pytest.fixture
def catalog(client, admin_headers):
    main = client.post("/api/admin/categories/main", headers=admin_headers, json={"title": "Exams"}).json()["data"]
    other = client.post("/api/admin/categories/main", headers=admin_headers, json={"title": "Jobs"}).json()["data"]

    def sub(main_id, meta_title, **extra):
        body = {"main_category_id": main_id, "meta_title": meta_title, "content_title": meta_title, **extra}
        return client.post("/api/admin/categories/sub", headers=admin_headers, json=body).json()["data"]

    railway = sub(main["id"], "Railway NTPC", keywords=["rrb"], tags=["central"])
    banking = sub(main["id"], "IBPS Clerk", keywords=["bank"])
    police = sub(other["id"], "State Police 100% vacancies")

    faq = client.post(
        "/api/admin/faqs",
        headers=admin_headers,
        json={"sub_category_id": railway["id"], "question": "What is NTPC?", "answer": "Non technical"},
    ).json()["data"]
    return {"main": main, "other": other, "railway": railway, "banking": banking, "police": police, "faq": faq}


def test_escape_like():
    assert escape_like("100%_a\\b") == "100\\%\\_a\\\\b"


def test_main_categories(client, catalog):
    listed = client.get("/api/category/main").json()["data"]
    assert {c["title"] for c in listed} == {"Exams", "Jobs"}

    response = client.get(f"/api/category/main/{catalog['main']['id']}")
    assert response.json()["data"]["title"] == "Exams"


def test_sub_categories_by_main(client, catalog):
    data = client.get(f"/api/category/sub/main/{catalog['main']['id']}").json()["data"]
    assert {s["meta_title"] for s in data} == {"Railway NTPC", "IBPS Clerk"}
    assert "created_by" not in data[0]


def test_sub_category_search_matches_titles_and_lists(client, catalog):
    by_title = client.get("/api/category/sub/search", params={"q": "ntpc"}).json()["data"]
    assert [s["id"] for s in by_title] == [catalog["railway"]["id"]]

    by_keyword = client.get("/api/category/sub/search", params={"q": "BANK"}).json()["data"]
    assert [s["id"] for s in by_keyword] == [catalog["banking"]["id"]]

    by_tag = client.get("/api/category/sub/search", params={"q": "central"}).json()["data"]
    assert [s["id"] for s in by_tag] == [catalog["railway"]["id"]]


def test_search_wildcards_are_literal(client, catalog):
    data = client.get("/api/category/sub/search", params={"q": "100%"}).json()["data"]
    assert [s["id"] for s in data] == [catalog["police"]["id"]]

    percent = client.get("/api/category/sub/search", params={"q": "%"}).json()["data"]
    assert [s["id"] for s in percent] == [catalog["police"]["id"]]
    assert client.get("/api/category/sub/search", params={"q": "_"}).json()["data"] == []


def test_search_requires_query(client, catalog):
    response = client.get("/api/category/sub/search")
    assert response.status_code == 400


def test_faqs_public(client, catalog):
    by_sub = client.get(f"/api/category/faqs/subcategory/{catalog['railway']['id']}").json()["data"]
    assert [f["question"] for f in by_sub] == ["What is NTPC?"]

    found = client.get("/api/category/faqs/search", params={"q": "technical"}).json()["data"]
    assert [f["id"] for f in found] == [catalog["faq"]["id"]]

    assert client.get(f"/api/category/faqs/{catalog['faq']['id']}").status_code == 200


def test_top_data_public(client, admin_headers):
    top = client.post(
        "/api/admin/topdata",
        headers=admin_headers,
        json={"meta_title": "Admit card", "content_title": "Download now", "tags": ["urgent"]},
    ).json()["data"]

    assert [t["id"] for t in client.get("/api/category/topdata").json()["data"]] == [top["id"]]
    assert client.get("/api/category/topdata/search", params={"q": "urgent"}).json()["data"][0]["id"] == top["id"]
    assert client.get(f"/api/category/topdata/{top['id']}").status_code == 200


def test_inactive_and_missing_are_404(client, admin_headers, catalog):
    client.delete(f"/api/admin/categories/sub/{catalog['banking']['id']}", headers=admin_headers)

    response = client.get(f"/api/category/sub/{catalog['banking']['id']}")
    assert response.status_code == 404
    assert response.json() == {"message": "Sub category not found"}

    assert client.get("/api/category/main/999").status_code == 404
    assert client.get("/api/category/faqs/999").status_code == 404
    assert client.get("/api/category/topdata/999").status_code == 404

    remaining = client.get("/api/category/sub").json()["data"]
    assert catalog["banking"]["id"] not in [s["id"] for s in remaining]
