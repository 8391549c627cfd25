"""
Tests for job notes and shopping lists.
"""

from conftest import count_rows


def test_create_note_returns_job_notes(client, job):
    client.post(f"/api/jobs/{job['id']}/notes", json={"content": "First"})
    response = client.post(f"/api/jobs/{job['id']}/notes", json={"content": "Second"})
    assert response.status_code == 201
    assert [note["content"] for note in response.json()] == ["First", "Second"]


def test_note_validation_and_missing_job(client, job):
    response = client.post(f"/api/jobs/{job['id']}/notes", json={"content": "  "})
    assert response.status_code == 400
    assert "content" in response.json()["error"]

    response = client.post("/api/jobs/999/notes", json={"content": "x"})
    assert response.status_code == 404
    assert response.json() == {"error": "Job not found."}


def test_note_keeps_indentation(client, job):
    content = "  - drained oil\n    - 3.2 l out\n"
    [note] = client.post(f"/api/jobs/{job['id']}/notes", json={"content": content}).json()
    assert note["content"] == content

    response = client.put(f"/api/notes/{note['id']}", json={"content": "\tindented"})
    assert response.json()["content"] == "\tindented"


def test_update_and_delete_note(client, settings, job):
    note = client.post(f"/api/jobs/{job['id']}/notes", json={"content": "Draft"}).json()[0]

    response = client.put(f"/api/notes/{note['id']}", json={"content": "Final"})
    assert response.status_code == 200
    assert response.json()["content"] == "Final"

    assert client.delete(f"/api/notes/{note['id']}").status_code == 200
    assert count_rows(settings, "notes") == 0

    assert client.put(f"/api/notes/{note['id']}", json={"content": "x"}).status_code == 404
    assert client.delete(f"/api/notes/{note['id']}").status_code == 404


def test_create_shopping_item_defaults(client, job):
    response = client.post(f"/api/jobs/{job['id']}/shopping", json={"itemName": "Oil filter"})
    assert response.status_code == 201
    [item] = response.json()
    assert item["item_name"] == "Oil filter"
    assert item["quantity"] == 1
    assert item["purchased"] == 0


def test_shopping_item_validation(client, job):
    assert client.post(f"/api/jobs/{job['id']}/shopping", json={}).status_code == 400
    assert client.post(f"/api/jobs/{job['id']}/shopping", json={"itemName": "x", "quantity": 0}).status_code == 400
    assert client.post("/api/jobs/999/shopping", json={"itemName": "x"}).status_code == 404


def test_toggle_shopping_item(client, job):
    [item] = client.post(f"/api/jobs/{job['id']}/shopping", json={"itemName": "Spark plug", "quantity": 2}).json()

    first = client.patch(f"/api/shopping/{item['id']}")
    assert first.status_code == 200
    assert first.json()["purchased"] == 1

    second = client.patch(f"/api/shopping/{item['id']}")
    assert second.json()["purchased"] == 0

    assert client.patch("/api/shopping/999").status_code == 404


def test_update_shopping_item_keeps_omitted_fields(client, job):
    [item] = client.post(f"/api/jobs/{job['id']}/shopping", json={"itemName": "Chain lube", "quantity": 1}).json()
    client.patch(f"/api/shopping/{item['id']}")

    response = client.put(f"/api/shopping/{item['id']}", json={"quantity": 3})
    assert response.status_code == 200
    body = response.json()
    assert body["item_name"] == "Chain lube"
    assert body["quantity"] == 3
    assert body["purchased"] == 1

    response = client.put(f"/api/shopping/{item['id']}", json={"item_name": "Chain wax"})
    assert response.json()["item_name"] == "Chain wax"
    assert response.json()["quantity"] == 3

    assert client.put("/api/shopping/999", json={"quantity": 2}).status_code == 404


def test_delete_shopping_item(client, settings, job):
    [item] = client.post(f"/api/jobs/{job['id']}/shopping", json={"itemName": "Gasket"}).json()
    assert client.delete(f"/api/shopping/{item['id']}").status_code == 200
    assert count_rows(settings, "shopping_items") == 0
    assert client.delete(f"/api/shopping/{item['id']}").status_code == 404
