"""Recommendation Routes - end-to-end tests through FastAPI and SQLite.

Tests cover:
    - POST creates and returns {data: [record]} with canonical url
    - POST with missing/invalid url returns 400 with the boundary's message
    - PUT edits only supplied fields; explicit null clears
    - PUT/DELETE on unknown ids return 404
    - DELETE returns 204 with no body
    - GET lists everything that was added
    - Unparseable JSON body returns 400
"""

BASE = "/api/v1/recommendations/"


async def _add(client, **fields) -> dict:
    res = await client.post(BASE, json={"recommendations": [fields]})
    assert res.status_code == 201, res.text
    return res.json()["data"][0]


async def test_add_returns_record(client):
    res = await client.post(
        BASE, json={"recommendations": [{"title": "Blog", "url": "https://a.com"}]},
    )

    assert res.status_code == 201
    data = res.json()["data"]
    assert len(data) == 1
    record = data[0]
    assert record["title"] == "Blog"
    assert record["url"] == "https://a.com/"
    assert record["one_click_subscribe"] is False
    assert record["reason"] is None
    assert record["excerpt"] is None
    assert record["featured_image"] is None
    assert record["favicon"] is None
    assert record["id"]
    assert record["created_at"]
    assert record["updated_at"] is None


async def test_add_missing_url_returns_400(client):
    res = await client.post(BASE, json={"recommendations": [{"title": "Blog"}]})

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "BAD_REQUEST"
    assert error["message"] == "url is required"


async def test_add_invalid_url_returns_400(client):
    res = await client.post(BASE, json={"recommendations": [{"url": "not-a-url"}]})

    assert res.status_code == 400
    assert res.json()["error"]["message"] == "url must be a valid URL"


async def test_add_without_body_returns_400(client):
    res = await client.post(BASE)

    assert res.status_code == 400
    assert res.json()["error"]["message"] == "recommendations is required"


async def test_add_with_unparseable_json_returns_400(client):
    res = await client.post(
        BASE, content=b"{not json", headers={"content-type": "application/json"},
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_edit_updates_supplied_fields(client):
    created = await _add(client, title="Blog", url="https://a.com", reason="Why", excerpt="Text")

    res = await client.put(
        f"{BASE}{created['id']}",
        json={"recommendations": [{"title": "Renamed", "reason": None}]},
    )

    assert res.status_code == 200
    record = res.json()["data"][0]
    assert record["id"] == created["id"]
    assert record["title"] == "Renamed"
    assert record["reason"] is None
    assert record["excerpt"] == "Text"
    assert record["url"] == "https://a.com/"
    assert record["updated_at"] is not None


async def test_edit_mistyped_field_returns_400(client):
    created = await _add(client, url="https://a.com")

    res = await client.put(
        f"{BASE}{created['id']}",
        json={"recommendations": [{"one_click_subscribe": "yes"}]},
    )

    assert res.status_code == 400
    assert res.json()["error"]["message"] == "one_click_subscribe must be a boolean"


async def test_edit_unknown_id_returns_404(client):
    res = await client.put(f"{BASE}missing", json={"recommendations": [{}]})

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_delete_returns_204(client):
    created = await _add(client, url="https://a.com")

    res = await client.delete(f"{BASE}{created['id']}")

    assert res.status_code == 204
    assert res.content == b""
    listed = await client.get(BASE)
    assert listed.json() == {"data": []}


async def test_delete_unknown_id_returns_404(client):
    res = await client.delete(f"{BASE}missing")
    assert res.status_code == 404


async def test_list_returns_all(client):
    first = await _add(client, url="https://first.com")
    second = await _add(client, url="https://second.com")

    res = await client.get(BASE)

    assert res.status_code == 200
    ids = {r["id"] for r in res.json()["data"]}
    assert ids == {first["id"], second["id"]}


async def test_list_empty(client):
    res = await client.get(BASE)
    assert res.status_code == 200
    assert res.json() == {"data": []}


async def test_created_at_is_stable_across_add_edit_and_list(client):
    created = await _add(client, url="https://a.com", reason="Why")

    edited = await client.put(
        f"{BASE}{created['id']}", json={"recommendations": [{"reason": None}]},
    )
    listed = await client.get(BASE)

    assert edited.json()["data"][0]["created_at"] == created["created_at"]
    assert listed.json()["data"][0]["created_at"] == created["created_at"]
