"""API tests for /item, /item-broadcasturl and /broadcasturl."""


def _broadcast_url(client, platform="youtube"):
    client.post("/v1/platform/", json={"name": platform})
    response = client.post(
        "/v1/broadcasturl/",
        json={"url": "https://example.com/live", "platform": platform, "language": "en"},
    )
    assert response.status_code == 201
    return response.json()["data"]


def test_create_item(client, make_item):
    item = make_item()

    assert item["name"] == "Opening keynote"
    assert item["duration"] == 45
    assert item["translated"] is False
    assert item["content"] is None


def test_item_requires_all_required_fields(client):
    response = client.post("/v1/item/", json={"name": "Keynote", "duration": 30})

    assert response.status_code == 400
    error = response.json()["error"]
    for field in ("start_date", "original_language", "translated"):
        assert field in error


def test_item_update_keeps_other_fields(client, make_item):
    item = make_item(content="Slides")

    response = client.patch(f"/v1/item/{item['id']}", json={"translated": True, "duration": 60})

    data = response.json()["data"]
    assert response.json()["message"] == "Item updated successfully"
    assert data["translated"] is True
    assert data["duration"] == 60
    assert data["content"] == "Slides"
    assert data["name"] == item["name"]


def test_item_delete(client, make_item):
    item = make_item()

    assert client.delete(f"/v1/item/{item['id']}").json()["message"] == "Item deleted successfully!"
    assert client.get(f"/v1/item/{item['id']}").status_code == 404


def test_broadcast_url_crud(client):
    url = _broadcast_url(client)

    fetched = client.get(f"/v1/broadcasturl/{url['id']}")
    assert fetched.json()["data"]["url"] == "https://example.com/live"

    updated = client.patch(f"/v1/broadcasturl/{url['id']}", json={"language": "fr"})
    assert updated.json()["message"] == "Broadcast url updated successfully"
    assert updated.json()["data"]["language"] == "fr"
    assert updated.json()["data"]["platform"] == "youtube"

    assert client.get("/v1/broadcasturls").json()["data"][0]["id"] == url["id"]
    assert client.delete(f"/v1/broadcasturl/{url['id']}").status_code == 200
    assert client.get(f"/v1/broadcasturl/{url['id']}").status_code == 404


def test_broadcast_url_requires_known_platform(client):
    response = client.post(
        "/v1/broadcasturl/",
        json={"url": "https://example.com/live", "platform": "nowhere", "language": "en"},
    )

    assert response.status_code == 500
    assert response.json()["error"].startswith("problem creating broadcast url:")


def test_item_broadcast_url_links(client, make_item):
    item = make_item()
    url = _broadcast_url(client)

    created = client.post("/v1/item-broadcasturl/", json={"item_id": item["id"], "broadcast_url_id": url["id"]})
    assert created.status_code == 201
    assert created.json()["message"] == "Created new Item BroadcastURL!"
    link = created.json()["data"]

    assert client.get(f"/v1/item-broadcasturl/{link['id']}").json()["data"]["item_id"] == item["id"]
    assert client.patch(f"/v1/item-broadcasturl/{link['id']}", json={}).status_code == 400
    assert client.get("/v1/item-broadcasturls").json()["data"] == [link]

    deleted = client.delete(f"/v1/item-broadcasturl/{link['id']}")
    assert deleted.json() == {"message": "Item BroadcastURL deleted successfully!", "success": True}


def test_item_duration_beyond_integer_range_is_invalid(client, make_item):
    item = make_item()

    response = client.patch(f"/v1/item/{item['id']}", json={"duration": 2**64})

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert client.get(f"/v1/item/{item['id']}").json()["data"]["duration"] == 45
