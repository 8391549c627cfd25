"""
Tests for the feature backlog endpoints.
"""


def test_feature_lifecycle(client):
    response = client.post("/api/features", json={"title": "Export to CSV"})
    assert response.status_code == 201
    feature = response.json()
    assert feature["status"] == "backlog"
    assert feature["description"] is None

    response = client.put(
        f"/api/features/{feature['id']}",
        json={"title": "Export jobs to CSV", "description": "Per motorcycle"},
    )
    assert response.status_code == 200
    assert response.json()["title"] == "Export jobs to CSV"
    assert response.json()["status"] == "backlog"

    response = client.patch(f"/api/features/{feature['id']}/status", json={"status": "in_progress"})
    assert response.status_code == 200
    assert response.json()["status"] == "in_progress"

    assert [f["id"] for f in client.get("/api/features").json()] == [feature["id"]]

    assert client.delete(f"/api/features/{feature['id']}").status_code == 200
    assert client.get("/api/features").json() == []


def test_feature_validation(client):
    assert client.post("/api/features", json={"title": ""}).status_code == 400
    assert client.post("/api/features", json={"title": "x", "status": "someday"}).status_code == 400

    feature = client.post("/api/features", json={"title": "x"}).json()
    response = client.patch(f"/api/features/{feature['id']}/status", json={"status": "someday"})
    assert response.status_code == 400
    assert "status" in response.json()["error"]


def test_unknown_feature(client):
    assert client.put("/api/features/999", json={"title": "x"}).status_code == 404
    assert client.patch("/api/features/999/status", json={"status": "done"}).status_code == 404
    assert client.delete("/api/features/999").status_code == 404
