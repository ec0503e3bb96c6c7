"""Home content: one-step admin gate, hard delete, public active view."""

import pytest

HOME = {
    "title": "Welcome",
    "description": "Daily exam updates",
    "telegram_link": "https://t.me/portal",
    "whatsapp_link": "https://wa.me/123",
    "faqs": [{"question": "Is it free?", "answer": "Yes"}],
}


@pytest.fixture
def home(client, admin_headers):
    response = client.post("/api/home-content/admin/create", headers=admin_headers, json=HOME)
    assert response.status_code == 201
    return response.json()["data"]


def test_create_stores_faqs(home, admin):
    assert home["faqs"] == [{"question": "Is it free?", "answer": "Yes"}]
    assert home["created_by"] == admin.id


@pytest.mark.parametrize("missing", ["title", "description", "telegram_link", "whatsapp_link"])
def test_create_requires_fields(client, admin_headers, missing):
    body = {k: v for k, v in HOME.items() if k != missing}
    response = client.post("/api/home-content/admin/create", headers=admin_headers, json=body)
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"


def test_embedded_faq_needs_question_and_answer(client, admin_headers):
    body = dict(HOME, faqs=[{"question": "Only a question"}])
    response = client.post("/api/home-content/admin/create", headers=admin_headers, json=body)
    assert response.status_code == 400


def test_admin_list_paginates_and_searches(client, admin_headers):
    for i in range(3):
        client.post("/api/home-content/admin/create", headers=admin_headers, json=dict(HOME, title=f"Page {i}"))

    page = client.get("/api/home-content/admin/all", headers=admin_headers, params={"page": 2, "limit": 2}).json()
    assert len(page["data"]) == 1
    assert page["pagination"] == {"current_page": 2, "total_pages": 2, "total_items": 3, "items_per_page": 2}

    found = client.get("/api/home-content/admin/all", headers=admin_headers, params={"search": "page 1"}).json()
    assert [c["title"] for c in found["data"]] == ["Page 1"]


def test_limit_out_of_range_is_400(client, admin_headers):
    response = client.get("/api/home-content/admin/all", headers=admin_headers, params={"limit": 500})
    assert response.status_code == 400


def test_public_active_and_update(client, admin_headers, home):
    active = client.get("/api/home-content/public/active")
    assert active.status_code == 200
    assert active.json()["data"]["id"] == home["id"]
    assert "created_by" not in active.json()["data"]

    updated = client.put(
        f"/api/home-content/admin/{home['id']}", headers=admin_headers, json={"is_active": False}
    )
    assert updated.status_code == 200
    assert client.get("/api/home-content/public/active").status_code == 404
    assert client.get("/api/home-content/public/all").json()["data"] == []


def test_no_active_content_is_404(client):
    response = client.get("/api/home-content/public/active")
    assert response.status_code == 404
    assert response.json() == {"message": "No active home content found"}


def test_delete_removes_row(client, admin_headers, home):
    path = f"/api/home-content/admin/{home['id']}"
    assert client.delete(path, headers=admin_headers).status_code == 200
    assert client.get(path, headers=admin_headers).status_code == 404


def test_null_fields_are_ignored_on_update(client, admin_headers, home):
    path = f"/api/home-content/admin/{home['id']}"
    body = {k: None for k in ("title", "description", "telegram_link", "whatsapp_link", "faqs", "is_active")}

    response = client.put(path, headers=admin_headers, json=body)
    assert response.status_code == 200

    active = client.get("/api/home-content/public/active")
    assert active.status_code == 200
    assert active.json()["data"]["title"] == HOME["title"]
    assert active.json()["data"]["faqs"] == HOME["faqs"]
