import pytest

from moodplaylist.config import settings
from moodplaylist.core.exceptions import StoreError
from moodplaylist.core.security import create_access_token
from moodplaylist.services.song_service import song_service


def _add_song(client, headers, title, mood_ids, media_url=None):
    resp = client.post(
        "/api/v1/songs",
        json={"title": title, "artist": "Band", "media_url": media_url, "mood_ids": mood_ids},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_songs_require_auth(client):
    assert client.get("/api/v1/songs").status_code == 401
    assert client.post("/api/v1/playlist/generate", json={}).status_code == 401


def test_list_moods_is_public(client):
    resp = client.get("/api/v1/moods")
    assert resp.status_code == 200
    assert {m["name"] for m in resp.json()} == {
        "Happy", "Sad", "Relaxed", "Energetic", "Romantic", "Focus"
    }


def test_get_unknown_mood(client):
    assert client.get("/api/v1/moods/999").status_code == 404


def test_signup_login_me(client):
    resp = client.post(
        "/api/v1/user/signup",
        json={"username": "dave", "email": "dave@example.com", "password": "pw123456"},
    )
    assert resp.status_code == 200
    assert resp.json()["username"] == "dave"

    dup = client.post(
        "/api/v1/user/signup",
        json={"username": "dave", "email": "dave2@example.com", "password": "pw"},
    )
    assert dup.status_code == 400

    bad = client.post("/api/v1/user/login", data={"username": "dave", "password": "nope"})
    assert bad.status_code == 401

    login = client.post("/api/v1/user/login", data={"username": "dave", "password": "pw123456"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    me = client.get("/api/v1/user/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "dave@example.com"
    assert me.json()["last_login_at"] is not None


def test_password_reset_request_does_not_leak(client, user, monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", False)
    known = client.post("/api/v1/user/password-reset/request", json={"email": user.email})
    unknown = client.post("/api/v1/user/password-reset/request", json={"email": "x@example.com"})
    assert known.json() == unknown.json()

    bad = client.post(
        "/api/v1/user/password-reset/confirm", json={"token": "nope", "new_password": "x"}
    )
    assert bad.status_code == 400


def test_song_crud(client, auth_headers, moods):
    happy, sad = moods["Happy"].id, moods["Sad"].id
    song = _add_song(client, auth_headers, "Walking", [happy], "https://youtu.be/vid1")
    assert song["video_id"] == "vid1"
    assert [m["name"] for m in song["moods"]] == ["Happy"]

    got = client.get(f"/api/v1/songs/{song['id']}", headers=auth_headers)
    assert got.status_code == 200

    updated = client.put(
        f"/api/v1/songs/{song['id']}",
        json={"title": "Walking", "artist": "Band", "mood_ids": [sad]},
        headers=auth_headers,
    )
    assert updated.status_code == 200
    assert [m["id"] for m in updated.json()["moods"]] == [sad]

    by_mood = client.get(f"/api/v1/songs/by-mood/{happy}", headers=auth_headers)
    assert by_mood.json() == []

    deleted = client.delete(f"/api/v1/songs/{song['id']}", headers=auth_headers)
    assert deleted.status_code == 200
    assert client.get(f"/api/v1/songs/{song['id']}", headers=auth_headers).status_code == 404
    assert client.delete(f"/api/v1/songs/{song['id']}", headers=auth_headers).status_code == 404


def test_song_errors_map_to_status_codes(client, auth_headers, moods):
    blank = client.post(
        "/api/v1/songs", json={"title": " ", "artist": "Band"}, headers=auth_headers
    )
    assert blank.status_code == 422
    assert blank.json()["error"] == "ValidationError"

    bad_mood = client.post(
        "/api/v1/songs", json={"title": "A", "artist": "B", "mood_ids": [777]}, headers=auth_headers
    )
    assert bad_mood.status_code == 409
    assert bad_mood.json()["error"] == "ReferentialIntegrityError"

    missing = client.put(
        "/api/v1/songs/4040", json={"title": "A", "artist": "B"}, headers=auth_headers
    )
    assert missing.status_code == 404


def test_playback_falls_back(client, auth_headers, moods):
    song = _add_song(client, auth_headers, "No link", [moods["Happy"].id])
    resp = client.get(f"/api/v1/songs/{song['id']}/play", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {
        "song_id": song["id"], "url": settings.FALLBACK_VIDEO_URL, "is_fallback": True
    }


def test_generate_playlist_flow(client, auth_headers, moods):
    happy = moods["Happy"].id
    ids = {_add_song(client, auth_headers, t, [happy])["id"] for t in "ABC"}
    _add_song(client, auth_headers, "D", [moods["Sad"].id])

    resp = client.post(
        "/api/v1/playlist/generate",
        json={"mood_id": happy, "count": 10, "name": "My Mix"},
        headers=auth_headers,
    )
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["name"] == "My Mix"
    assert [e["position"] for e in body["entries"]] == [0, 1, 2]
    assert {e["song"]["id"] for e in body["entries"]} == ids

    mine = client.get("/api/v1/playlist/my-playlists", headers=auth_headers).json()
    assert [p["id"] for p in mine] == [body["id"]]

    regen = client.post(
        f"/api/v1/playlist/{body['id']}/regenerate", json={"count": 2}, headers=auth_headers
    )
    assert regen.status_code == 200
    assert len(regen.json()["entries"]) == 2

    renamed = client.put(
        f"/api/v1/playlist/{body['id']}", json={"name": "Renamed"}, headers=auth_headers
    )
    assert renamed.json()["name"] == "Renamed"

    assert client.delete(f"/api/v1/playlist/{body['id']}", headers=auth_headers).status_code == 200
    assert client.get(f"/api/v1/playlist/{body['id']}", headers=auth_headers).status_code == 404


@pytest.mark.parametrize("payload,status", [
    ({"mood_id": 1, "count": 0, "name": "X"}, 422),
    ({"mood_id": 1, "count": 51, "name": "X"}, 422),
    ({"mood_id": 1, "count": 3, "name": ""}, 422),
    ({"mood_id": 999, "count": 3, "name": "X"}, 404),
])
def test_generate_rejects_bad_input(client, auth_headers, payload, status):
    resp = client.post("/api/v1/playlist/generate", json=payload, headers=auth_headers)
    assert resp.status_code == status


def test_generate_empty_pool_conflict(client, auth_headers, moods):
    resp = client.post(
        "/api/v1/playlist/generate",
        json={"mood_id": moods["Focus"].id, "count": 3, "name": "Nothing"},
        headers=auth_headers,
    )
    assert resp.status_code == 409
    assert resp.json()["error"] == "EmptyPoolError"


def test_signup_with_padded_existing_username_is_rejected(client, user):
    resp = client.post(
        "/api/v1/user/signup",
        json={"username": f"{user.username} ", "email": "new@example.com", "password": "pw"},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Username already registered"


@pytest.mark.parametrize("username,password", [("   ", "pw123456"), ("erin", "")])
def test_signup_blank_credentials(client, username, password):
    resp = client.post(
        "/api/v1/user/signup",
        json={"username": username, "email": "erin@example.com", "password": password},
    )
    assert resp.status_code == 422
    assert resp.json()["error"] == "ValidationError"


def test_token_for_missing_user_is_rejected(client):
    token = create_access_token({"sub": "4242"})
    resp = client.get("/api/v1/user/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_token_with_non_numeric_subject_is_rejected(client, user):
    token = create_access_token({"sub": user.username})
    resp = client.get("/api/v1/user/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_store_errors_do_not_leak_details(client, auth_headers, monkeypatch):
    def failing(*args, **kwargs):
        raise StoreError("UNIQUE constraint failed: users.username")

    monkeypatch.setattr(song_service, "list_songs", failing)
    resp = client.get("/api/v1/songs", headers=auth_headers)
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error", "error": "StoreError"}
