"""
Tests for job endpoints, including the cascade-and-cleanup delete.
"""

import datetime as dt
from pathlib import Path

from conftest import count_rows, stored_files


def test_example_scenario(client):
    moto = client.post("/api/motorcycles", json={"brand": "Honda", "model": "CB500"})
    assert moto.status_code == 201
    moto_id = moto.json()["id"]
    assert moto.json()["year"] is None

    job = client.post("/api/jobs", json={"motorcycle_id": moto_id, "title": "Oil change", "date": "2024-01-01"})
    assert job.status_code == 201
    job_id = job.json()["id"]
    assert job.json()["completed"] == 0

    first = client.patch(f"/api/jobs/{job_id}/complete")
    assert first.status_code == 200
    assert first.json()["completed"] == 1

    second = client.patch(f"/api/jobs/{job_id}/complete")
    assert second.json()["completed"] == 0

    assert client.delete(f"/api/motorcycles/{moto_id}").status_code == 200
    survivor = client.get(f"/api/jobs/{job_id}")
    assert survivor.status_code == 200
    assert survivor.json()["motorcycle_id"] is None


def test_toggle_only_touches_one_job(client, motorcycle):
    a = client.post("/api/jobs", json={"title": "A", "date": "2024-01-01"}).json()
    b = client.post("/api/jobs", json={"title": "B", "date": "2024-01-01"}).json()

    client.patch(f"/api/jobs/{a['id']}/complete")

    assert client.get(f"/api/jobs/{a['id']}").json()["completed"] == 1
    assert client.get(f"/api/jobs/{b['id']}").json()["completed"] == 0


def test_toggle_unknown_job(client):
    assert client.patch("/api/jobs/999/complete").status_code == 404


def test_list_orders_by_date_desc(client):
    client.post("/api/jobs", json={"title": "Old", "date": "2023-05-01"})
    client.post("/api/jobs", json={"title": "New", "date": "2024-05-01"})
    client.post("/api/jobs", json={"title": "Mid", "date": "2023-12-01"})

    titles = [job["title"] for job in client.get("/api/jobs").json()]
    assert titles == ["New", "Mid", "Old"]


def test_create_job_defaults_and_blank_strings(client):
    response = client.post(
        "/api/jobs",
        json={"motorcycle_id": "", "title": "Brakes", "date": "2024-03-01", "mileage": "", "cost": ""},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["motorcycle_id"] is None
    assert body["mileage"] is None
    assert body["cost"] is None
    assert body["description"] == ""


def test_create_job_validation(client):
    missing_title = client.post("/api/jobs", json={"date": "2024-01-01"})
    assert missing_title.status_code == 400
    assert "title" in missing_title.json()["error"]

    assert client.post("/api/jobs", json={"title": "X"}).status_code == 400
    assert client.post("/api/jobs", json={"title": "X", "date": "not-a-date"}).status_code == 400
    assert client.post("/api/jobs", json={"title": "X", "date": "2024-01-01", "cost": -1}).status_code == 400
    assert client.post("/api/jobs", json={"title": "X", "date": "2024-01-01", "mileage": -1}).status_code == 400

    far_future = (dt.date.today() + dt.timedelta(days=90)).isoformat()
    response = client.post("/api/jobs", json={"title": "X", "date": far_future})
    assert response.status_code == 400
    assert "date" in response.json()["error"]


def test_non_finite_cost_is_rejected(client, settings, motorcycle):
    for raw in ("Infinity", "-Infinity", "NaN"):
        body = f'{{"motorcycle_id": {motorcycle["id"]}, "title": "X", "date": "2024-01-01", "cost": {raw}}}'
        response = client.post("/api/jobs", content=body, headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert "cost" in response.json()["error"]

    assert count_rows(settings, "jobs") == 0
    [listed] = client.get("/api/motorcycles").json()
    assert listed["total_cost"] == 0


def test_create_job_for_unknown_motorcycle(client):
    response = client.post("/api/jobs", json={"motorcycle_id": 999, "title": "X", "date": "2024-01-01"})
    assert response.status_code == 404
    assert response.json() == {"error": "Motorcycle not found."}


def test_update_job(client, job):
    response = client.put(
        f"/api/jobs/{job['id']}",
        json={"motorcycle_id": job["motorcycle_id"], "title": "Oil + filter", "date": "2024-01-02", "cost": 99.5},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Oil + filter"
    assert body["cost"] == 99.5

    assert client.put("/api/jobs/999", json={"title": "X", "date": "2024-01-01"}).status_code == 404


def test_job_detail_includes_children(client, job):
    client.post(f"/api/jobs/{job['id']}/notes", json={"content": "Used 10W-40"})
    client.post(f"/api/jobs/{job['id']}/shopping", json={"itemName": "Oil filter"})
    client.post(f"/api/jobs/{job['id']}/images", files={"image": ("a.jpg", b"img", "image/jpeg")})

    response = client.get(f"/api/jobs/{job['id']}")
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Oil change"
    assert [n["content"] for n in body["notes"]] == ["Used 10W-40"]
    assert [i["item_name"] for i in body["shoppingItems"]] == ["Oil filter"]
    assert [i["original_name"] for i in body["images"]] == ["a.jpg"]


def test_get_unknown_job(client):
    response = client.get("/api/jobs/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Job not found."}


def test_delete_job_removes_children_and_files(client, settings, job):
    job_id = job["id"]
    for name in ("a.jpg", "b.jpg"):
        assert client.post(
            f"/api/jobs/{job_id}/images",
            files={"image": (name, b"img", "image/jpeg")},
        ).status_code == 201
    client.post(f"/api/jobs/{job_id}/notes", json={"content": "note"})
    client.post(f"/api/jobs/{job_id}/shopping", json={"itemName": "Gasket", "quantity": 2})
    assert len(stored_files(settings)) == 2

    response = client.delete(f"/api/jobs/{job_id}")
    assert response.status_code == 200

    assert client.get(f"/api/jobs/{job_id}").status_code == 404
    assert count_rows(settings, "images", "job_id = ?", job_id) == 0
    assert count_rows(settings, "notes", "job_id = ?", job_id) == 0
    assert count_rows(settings, "shopping_items", "job_id = ?", job_id) == 0
    assert stored_files(settings) == []


def test_delete_job_tolerates_missing_file(client, settings, job):
    image = client.post(
        f"/api/jobs/{job['id']}/images",
        files={"image": ("a.jpg", b"img", "image/jpeg")},
    ).json()
    Path(settings.upload_dir, image["filename"]).unlink()

    assert client.delete(f"/api/jobs/{job['id']}").status_code == 200
    assert count_rows(settings, "images") == 0


def test_delete_unknown_job(client):
    assert client.delete("/api/jobs/999").status_code == 404
