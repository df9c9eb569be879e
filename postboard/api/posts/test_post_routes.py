# postboard/api/posts/test_post_routes.py
"""
/posts API 통합 테스트 (Flask 테스트 클라이언트 + 메모리 저장소)
"""

import os
import pytest

from conftest import upload


def create_post(client, user_id="u2", files=None, **fields):
    data = {"userID": user_id, "title": "Trip", "description": "Jeju", "category": "travel"}
    data.update(fields)
    data["mediaFiles"] = files if files is not None else [upload("a.png"), upload("b.jpg", "image/jpeg")]
    return client.post("/posts", data=data, content_type="multipart/form-data")


@pytest.fixture
def created(client):
    return create_post(client).get_json()


def test_create_and_delete_scenario(client, app, post_store):
    response = create_post(client)
    assert response.status_code == 201
    body = response.get_json()
    assert body["userID"] == "u2"
    assert len(body["media"]) == 2
    assert body["likes"] == {} and body["comments"] == []

    storage = app.services['storage']
    paths = [storage.path_for(url) for url in body["media"]]
    assert all(os.path.isfile(p) for p in paths)

    response = client.delete(f"/posts/{body['id']}")
    assert response.status_code == 200
    assert response.get_json() == {"message": "Post deleted successfully!"}
    assert all(not os.path.exists(p) for p in paths)

    response = client.get(f"/posts/{body['id']}")
    assert response.status_code == 404
    assert response.get_json()["error_code"] == "POST_NOT_FOUND"

@pytest.mark.parametrize("count", [0, 4])
def test_create_rejects_media_count(client, post_store, count):
    response = create_post(client, files=[upload(f"{i}.png") for i in range(count)])
    assert response.status_code == 400
    assert response.get_json()["message"] == "You must upload between 1 and 3 media files."
    assert post_store.posts == {}

def test_create_requires_form_fields(client):
    response = client.post("/posts", data={"userID": "u1", "mediaFiles": [upload()]},
                           content_type="multipart/form-data")
    assert response.status_code == 400
    assert set(response.get_json()["details"]) == {"title", "description", "category"}

def test_list_and_filter(client, created):
    create_post(client, user_id="u3", title="Food")

    assert len(client.get("/posts").get_json()) == 2
    by_user = client.get("/posts/user/u3").get_json()
    assert [p["title"] for p in by_user] == ["Food"]
    assert client.get("/posts/user/nobody").get_json() == []

def test_get_post(client, created):
    response = client.get(f"/posts/{created['id']}")
    assert response.status_code == 200
    assert response.get_json() == created

def test_update_post(client, created):
    response = client.put(
        f"/posts/{created['id']}",
        data={"title": "New", "description": "D", "category": "C", "newMediaFiles": [upload("c.png")]},
        content_type="multipart/form-data"
    )
    assert response.status_code == 200
    assert response.get_json() == {"message": "Post updated successfully!"}

    post = client.get(f"/posts/{created['id']}").get_json()
    assert post["title"] == "New"
    assert len(post["media"]) == 3

def test_update_missing_post(client):
    response = client.put("/posts/missing", data={"title": "t", "description": "d", "category": "c"},
                          content_type="multipart/form-data")
    assert response.status_code == 404

def test_delete_media(client, created):
    url = created["media"][0]
    response = client.delete(f"/posts/{created['id']}/media", json={"mediaUrl": url})
    assert response.status_code == 200
    assert response.get_json() == {"message": "Media deleted successfully!"}

    response = client.delete(f"/posts/{created['id']}/media", json={"mediaUrl": url})
    assert response.status_code == 404
    assert response.get_json()["message"] == "Media file not found."

def test_delete_media_requires_url(client, created):
    response = client.delete(f"/posts/{created['id']}/media", json={})
    assert response.status_code == 400

def test_like_scenario(client, created, notification_store):
    response = client.put(f"/posts/{created['id']}/like?userID=u1")
    assert response.status_code == 200
    assert response.get_json()["likes"] == {"u1": True}

    response = client.put(f"/posts/{created['id']}/like?userID=u1")
    assert response.get_json()["likes"] == {"u1": False}
    assert len(notification_store.for_user("u2")) == 2

def test_like_missing_post_returns_empty_404(client):
    response = client.put("/posts/missing/like?userID=u1")
    assert response.status_code == 404
    assert response.data == b""

def test_like_requires_user_id(client, created):
    assert client.put(f"/posts/{created['id']}/like").status_code == 400

def test_media_is_served(client, created):
    response = client.get(created["media"][0])
    assert response.status_code == 200
    assert response.data == b"fake-bytes"
    response.close()

    assert client.get("/media/does-not-exist.png").status_code == 404

def test_payload_too_large(client):
    big = upload("big.png", data=b"x" * (2 * 1024 * 1024))
    response = create_post(client, files=[big])
    assert response.status_code == 413
    assert response.get_json()["message"] == "File size exceeds maximum limit!"

def test_storage_failure_returns_500(client, app, created, monkeypatch):
    storage = app.services['storage']

    def broken_upload_dir():
        raise OSError("disk full")
    monkeypatch.setattr(storage, "_ensure_upload_dir", broken_upload_dir)

    response = client.put(
        f"/posts/{created['id']}",
        data={"title": "New", "description": "D", "category": "C", "newMediaFiles": [upload("c.png")]},
        content_type="multipart/form-data"
    )
    assert response.status_code == 500
    assert response.get_json() == {"error_code": "MEDIA_STORAGE_FAILED", "message": "Failed to store media file."}
    assert client.get(f"/posts/{created['id']}").get_json() == created

def test_delete_media_failure_returns_500(client, app, created, monkeypatch):
    storage = app.services['storage']

    def broken_delete(url):
        raise OSError("read-only file system")
    monkeypatch.setattr(storage, "delete", broken_delete)

    response = client.delete(f"/posts/{created['id']}/media", json={"mediaUrl": created["media"][0]})
    assert response.status_code == 500
    assert response.get_json() == {"error_code": "MEDIA_STORAGE_FAILED", "message": "Failed to delete media file."}

def test_directory_in_upload_filename(client):
    response = create_post(client, files=[upload("holiday.v2/photo")])
    assert response.status_code == 201
    assert "/" not in response.get_json()["media"][0][len("/media/"):]
