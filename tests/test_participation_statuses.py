"""API tests for /participation-status."""

import pytest


@pytest.fixture
def registration(client, make_event, make_participant):
    first = make_event(slug="first")
    second = make_event(slug="second")
    participant = make_participant()
    client.post("/v1/participation-option/", json={"name": "onsite"})
    client.post("/v1/participation-option/", json={"name": "online"})

    def _register(event, option="onsite"):
        response = client.post(
            "/v1/participation-status/",
            json={
                "participation_option": option,
                "participant_id": participant["id"],
                "event_id": event["id"],
                "registration_date": "2025-08-15T12:30:00Z",
            },
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return first, second, _register


def test_create_defaults(client, registration):
    first, _, register = registration

    status = register(first)

    assert status["event_id"] == first["id"]
    assert status["confirmed"] is None
    assert status["deleted"] is False


def test_list_filtered_by_event(client, registration):
    first, second, register = registration
    a = register(first)
    register(second)
    c = register(first, option="online")

    response = client.get("/v1/participation-statuses", params={"eventid": first["id"]})

    assert response.status_code == 200
    assert [s["id"] for s in response.json()["data"]] == [a["id"], c["id"]]


def test_list_for_event_without_statuses(client, registration):
    response = client.get("/v1/participation-statuses", params={"eventid": 999})

    assert response.status_code == 200
    assert response.json()["data"] == []


def test_confirm_registration(client, registration):
    first, _, register = registration
    status = register(first)

    response = client.patch(f"/v1/participation-status/{status['id']}", json={"confirmed": True})

    assert response.json()["message"] == "Participation Status updated successfully"
    assert response.json()["data"]["confirmed"] is True
    assert response.json()["data"]["participation_option"] == "onsite"


def test_option_rename_follows_statuses(client, registration):
    first, _, register = registration
    status = register(first)

    client.patch("/v1/participation-option/onsite", json={"name": "in-person"})

    fetched = client.get(f"/v1/participation-status/{status['id']}")
    assert fetched.json()["data"]["participation_option"] == "in-person"


def test_delete_status(client, registration):
    first, _, register = registration
    status = register(first)

    response = client.delete(f"/v1/participation-status/{status['id']}")

    assert response.json() == {"message": "Participation Status deleted successfully!", "success": True}
    assert client.get(f"/v1/participation-status/{status['id']}").status_code == 404


def test_blank_event_filter_lists_everything(client, registration):
    first, second, register = registration
    a = register(first)
    b = register(second)

    response = client.get("/v1/participation-statuses?eventid=")

    assert response.status_code == 200
    assert [s["id"] for s in response.json()["data"]] == [a["id"], b["id"]]
