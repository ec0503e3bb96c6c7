"""Admin content routes: categories, top data, FAQs and the system prompt."""

import pytest


@pytest.fixture
def main_category(client, admin_headers):
    response = client.post("/api/admin/categories/main", headers=admin_headers, json={"title": "Exams"})
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def sub_category(client, admin_headers, main_category):
    response = client.post(
        "/api/admin/categories/sub",
        headers=admin_headers,
        json={
            "main_category_id": main_category["id"],
            "meta_title": "SSC CGL",
            "content_title": "SSC Combined Graduate Level",
            "keywords": ["ssc", "graduate"],
            "tags": ["central"],
        },
    )
    assert response.status_code == 201
    return response.json()["data"]


def test_main_category_records_creator(main_category, admin):
    assert main_category["title"] == "Exams"
    assert main_category["created_by"] == admin.id
    assert main_category["creator"]["email"] == "a@x.com"
    assert main_category["is_active"] is True


def test_main_category_title_is_unique(client, admin_headers, main_category):
    response = client.post("/api/admin/categories/main", headers=admin_headers, json={"title": "Exams"})
    assert response.status_code == 400
    assert response.json() == {"message": "Category already exists"}


def test_main_category_rename_and_soft_delete(client, admin, admin_headers, main_category):
    path = f"/api/admin/categories/main/{main_category['id']}"

    renamed = client.put(path, headers=admin_headers, json={"title": "Results"})
    assert renamed.status_code == 200
    assert renamed.json()["data"]["title"] == "Results"
    assert renamed.json()["data"]["updated_by"] == admin.id

    assert client.delete(path, headers=admin_headers).json()["success"] is True
    assert client.get("/api/admin/categories/main", headers=admin_headers).json()["data"] == []

    # the row survives as inactive
    fetched = client.get(path, headers=admin_headers)
    assert fetched.status_code == 200
    assert fetched.json()["data"]["is_active"] is False


def test_missing_main_category_is_404(client, admin_headers):
    response = client.get("/api/admin/categories/main/999", headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"message": "Main category not found"}


def test_sub_category_requires_existing_main(client, admin_headers):
    response = client.post(
        "/api/admin/categories/sub",
        headers=admin_headers,
        json={"main_category_id": 42, "meta_title": "x", "content_title": "y"},
    )
    assert response.status_code == 400
    assert response.json() == {"message": "Main category not found"}


def test_sub_category_embeds_main_category(sub_category, main_category):
    assert sub_category["main_category"] == {"id": main_category["id"], "title": "Exams"}
    assert sub_category["keywords"] == ["ssc", "graduate"]


def test_sub_category_update(client, admin_headers, sub_category):
    response = client.put(
        f"/api/admin/categories/sub/{sub_category['id']}",
        headers=admin_headers,
        json={"tags": [], "meta_description": "Updated"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["tags"] == []
    assert data["meta_description"] == "Updated"
    assert data["meta_title"] == "SSC CGL"


def test_top_data_crud_and_public_listing(client, admin_headers):
    created = client.post(
        "/api/admin/topdata",
        headers=admin_headers,
        json={"meta_title": "Banner", "content_title": "Admit cards out"},
    )
    assert created.status_code == 201
    top = created.json()["data"]
    assert top["color_code"] == "#000000"

    updated = client.put(f"/api/admin/topdata/{top['id']}", headers=admin_headers, json={"color_code": "#ff0000"})
    assert updated.json()["data"]["color_code"] == "#ff0000"

    public = client.get("/api/admin/users/topdata")
    assert public.status_code == 200
    assert [t["id"] for t in public.json()["data"]] == [top["id"]]

    client.delete(f"/api/admin/topdata/{top['id']}", headers=admin_headers)
    assert client.get("/api/admin/users/topdata").json()["data"] == []


def test_faqs_are_ordered_and_filtered_by_sub_category(client, admin_headers, sub_category):
    for question, order in (("Second?", 2), ("First?", 1)):
        response = client.post(
            "/api/admin/faqs",
            headers=admin_headers,
            json={"sub_category_id": sub_category["id"], "question": question, "answer": "Yes", "order": order},
        )
        assert response.status_code == 201

    listed = client.get(f"/api/admin/faqs/subcategory/{sub_category['id']}", headers=admin_headers)
    assert [f["question"] for f in listed.json()["data"]] == ["First?", "Second?"]
    assert listed.json()["data"][0]["sub_category"]["meta_title"] == "SSC CGL"

    assert client.get("/api/admin/faqs/subcategory/999", headers=admin_headers).json()["data"] == []


def test_faq_requires_existing_sub_category(client, admin_headers):
    response = client.post(
        "/api/admin/faqs",
        headers=admin_headers,
        json={"sub_category_id": 7, "question": "Q", "answer": "A"},
    )
    assert response.status_code == 400


def test_faq_update_and_delete(client, admin_headers, sub_category):
    faq = client.post(
        "/api/admin/faqs",
        headers=admin_headers,
        json={"sub_category_id": sub_category["id"], "question": "Q", "answer": "A"},
    ).json()["data"]
    path = f"/api/admin/faqs/{faq['id']}"

    assert client.put(path, headers=admin_headers, json={"answer": "B"}).json()["data"]["answer"] == "B"
    assert client.delete(path, headers=admin_headers).status_code == 200
    assert client.get("/api/admin/faqs", headers=admin_headers).json()["data"] == []


def test_only_one_active_system_prompt(client, admin_headers):
    assert client.get("/api/admin/users/system-prompt").status_code == 404

    first = client.post("/api/admin/system-prompt", headers=admin_headers, json={"system_prompt": "Be brief."})
    assert first.status_code == 201

    second = client.post("/api/admin/system-prompt", headers=admin_headers, json={"system_prompt": "Be long."})
    assert second.status_code == 400

    public = client.get("/api/admin/users/system-prompt")
    assert public.json()["data"]["system_prompt"] == "Be brief."

    prompt_id = first.json()["data"]["id"]
    client.delete(f"/api/admin/system-prompt/{prompt_id}", headers=admin_headers)
    assert client.get("/api/admin/system-prompt", headers=admin_headers).status_code == 404

    again = client.post("/api/admin/system-prompt", headers=admin_headers, json={"system_prompt": "Be long."})
    assert again.status_code == 201


def test_system_prompt_update(client, admin_headers):
    prompt = client.post(
        "/api/admin/system-prompt", headers=admin_headers, json={"system_prompt": "v1"}
    ).json()["data"]

    response = client.put(
        f"/api/admin/system-prompt/{prompt['id']}",
        headers=admin_headers,
        json={"system_prompt": "v2", "description": "second draft"},
    )
    assert response.status_code == 200
    assert client.get("/api/admin/system-prompt", headers=admin_headers).json()["data"]["system_prompt"] == "v2"


# -- explicit nulls ------------------------------------------------------------------

UNSTABLE = ("updated_at", "updated_by")


def _unchanged_by_nulls(client, headers, path, body):
    before = client.get(path, headers=headers).json()["data"]
    response = client.put(path, headers=headers, json=body)
    assert response.status_code == 200
    after = client.get(path, headers=headers).json()["data"]
    for key in UNSTABLE:
        before.pop(key, None)
        after.pop(key, None)
    assert after == before


def test_null_main_category_fields_are_ignored(client, admin_headers, main_category):
    path = f"/api/admin/categories/main/{main_category['id']}"
    _unchanged_by_nulls(client, admin_headers, path, {"title": None, "is_active": None})


def test_null_sub_category_fields_keep_public_listing_readable(client, admin_headers, sub_category):
    path = f"/api/admin/categories/sub/{sub_category['id']}"
    body = {
        "main_category_id": None,
        "meta_title": None,
        "keywords": None,
        "tags": None,
        "content_title": None,
        "is_active": None,
    }
    _unchanged_by_nulls(client, admin_headers, path, body)

    public = client.get("/api/category/sub")
    assert public.status_code == 200
    assert public.json()["data"][0]["keywords"] == ["ssc", "graduate"]


def test_null_clears_optional_sub_category_description(client, admin_headers, sub_category):
    path = f"/api/admin/categories/sub/{sub_category['id']}"
    client.put(path, headers=admin_headers, json={"meta_description": "Exam overview"})

    response = client.put(path, headers=admin_headers, json={"meta_description": None})
    assert response.status_code == 200
    assert response.json()["data"]["meta_description"] is None


def test_null_top_data_fields_are_ignored(client, admin_headers):
    top = client.post(
        "/api/admin/topdata",
        headers=admin_headers,
        json={"meta_title": "Banner", "content_title": "Admit cards out", "keywords": ["admit"]},
    ).json()["data"]
    body = {k: None for k in ("meta_title", "keywords", "tags", "content_title", "color_code", "is_active")}
    _unchanged_by_nulls(client, admin_headers, f"/api/admin/topdata/{top['id']}", body)
    assert client.get("/api/category/topdata").status_code == 200


def test_null_faq_fields_are_ignored(client, admin_headers, sub_category):
    faq = client.post(
        "/api/admin/faqs",
        headers=admin_headers,
        json={"sub_category_id": sub_category["id"], "question": "Q", "answer": "A", "order": 2},
    ).json()["data"]
    body = {"question": None, "answer": None, "order": None, "is_active": None}
    _unchanged_by_nulls(client, admin_headers, f"/api/admin/faqs/{faq['id']}", body)


def test_null_system_prompt_fields_are_ignored(client, admin_headers):
    prompt = client.post(
        "/api/admin/system-prompt", headers=admin_headers, json={"system_prompt": "Be brief."}
    ).json()["data"]
    body = {"system_prompt": None, "is_active": None}
    _unchanged_by_nulls(client, admin_headers, f"/api/admin/system-prompt/{prompt['id']}", body)
