"""API resource tests."""

from uuid import uuid4

from falcon.testing import TestClient

from resaccess.domain.value_objects import PermissionModifier

from tests.conftest import make_resource


def auth(username: str) -> dict[str, str]:
    """Authorization header accepted by the fake token provider."""
    return {"Authorization": f"Bearer token-{username}"}


def _create(client: TestClient, user: str = "bob", **body) -> dict:
    body.setdefault("name", "report")
    r = client.simulate_post("/v1/resources", json=body, headers=auth(user))
    assert r.status_code == 201, r.json
    return r.json


class TestAuth:
    def test_invalid_token_is_unauthorized(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/resources", headers={"Authorization": "Bearer nope"})
        assert r.status_code == 401

    def test_non_bearer_header_is_unauthorized(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/resources", headers={"Authorization": "Basic Ym9iOg=="})
        assert r.status_code == 401

    def test_no_header_is_anonymous(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/resources")
        assert r.status_code == 200
        assert r.json["items"] == []


class TestCreate:
    def test_create_defaults(self, client: TestClient) -> None:
        data = _create(client)
        assert data["owner_id"] == "bob"
        assert data["group_id"] == "user"
        assert data["modifiers"] == "ARN"
        assert data["mode"] == "620"

    def test_create_with_letter_modifiers(self, client: TestClient) -> None:
        data = _create(client, modifiers="AAR", group_id="staff")
        assert data["group_id"] == "staff"
        assert data["group_modifier"] == "read_write"
        assert data["all_modifier"] == "read"

    def test_create_with_numeric_mode(self, client: TestClient) -> None:
        data = _create(client, mode="666")
        assert data["modifiers"] == "AAA"

    def test_tier_field_overrides_notation(self, client: TestClient) -> None:
        data = _create(client, modifiers="ARN", all_modifier="read")
        assert data["all_modifier"] == "read"

    def test_invalid_modifier_rejected(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/resources", json={"name": "x", "modifiers": "AZN"}, headers=auth("bob")
        )
        assert r.status_code == 400

    def test_anonymous_cannot_create(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/resources", json={"name": "x"})
        assert r.status_code == 403

    def test_missing_name_rejected(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/resources", json={}, headers=auth("bob"))
        assert r.status_code == 400

    def test_non_string_fields_rejected(self, client: TestClient) -> None:
        for body in ({"name": ["x"]}, {"name": "x", "group_id": 7}, {"name": "x", "content": {"a": 1}}):
            r = client.simulate_post("/v1/resources", json=body, headers=auth("bob"))
            assert r.status_code == 400, body
        r = client.simulate_get("/v1/resources", headers=auth("bob"))
        assert r.json["items"] == []


class TestReadAndList:
    def test_scenario_read_access(self, client: TestClient) -> None:
        rid = _create(client, group_id="staff")["id"]

        assert client.simulate_get(f"/v1/resources/{rid}").status_code == 403
        assert client.simulate_get(f"/v1/resources/{rid}", headers=auth("bob")).status_code == 200
        assert client.simulate_get(f"/v1/resources/{rid}", headers=auth("carol")).status_code == 200
        assert client.simulate_get(f"/v1/resources/{rid}", headers=auth("dave")).status_code == 403

    def test_superuser_reads_everything(self, client: TestClient) -> None:
        rid = _create(client, modifiers="ANN")["id"]
        r = client.simulate_get(f"/v1/resources/{rid}", headers=auth("root"))
        assert r.status_code == 200

    def test_list_filters_by_identity(self, client: TestClient) -> None:
        _create(client, name="private", modifiers="ANN")
        _create(client, name="staff", group_id="staff")
        _create(client, name="public", modifiers="ARR")

        def names(user: str | None) -> list[str]:
            headers = auth(user) if user else None
            r = client.simulate_get("/v1/resources", headers=headers)
            assert r.status_code == 200
            return sorted(item["name"] for item in r.json["items"])

        assert names(None) == ["public"]
        assert names("carol") == ["public", "staff"]
        assert names("dave") == ["public"]
        assert names("bob") == ["private", "public", "staff"]
        assert names("root") == ["private", "public", "staff"]

    def test_list_with_group_condition(self, client: TestClient) -> None:
        _create(client, name="staff", group_id="staff")
        _create(client, name="public", modifiers="ARR")
        r = client.simulate_get("/v1/resources", params={"group": "staff"}, headers=auth("carol"))
        assert [item["name"] for item in r.json["items"]] == ["staff"]
        assert r.json["total"] == 1

    def test_invalid_cursor_rejected(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/resources", params={"cursor": "abc"})
        assert r.status_code == 400

    def test_get_unknown_resource(self, client: TestClient) -> None:
        r = client.simulate_get(f"/v1/resources/{uuid4()}", headers=auth("bob"))
        assert r.status_code == 404

    def test_get_invalid_id(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/resources/not-a-uuid", headers=auth("bob"))
        assert r.status_code == 400


class TestAccessEndpoint:
    def test_access_decisions(self, client: TestClient) -> None:
        rid = _create(client, group_id="staff")["id"]
        url = f"/v1/resources/{rid}/access"

        r = client.simulate_get(url, params={"operation": "write"}, headers=auth("carol"))
        assert r.json == {"operation": "write", "allowed": False}
        r = client.simulate_get(url, params={"operation": "read"}, headers=auth("carol"))
        assert r.json == {"operation": "read", "allowed": True}
        r = client.simulate_get(url)
        assert r.json == {"operation": "read", "allowed": False}

    def test_unknown_operation_rejected(self, client: TestClient) -> None:
        rid = _create(client)["id"]
        r = client.simulate_get(
            f"/v1/resources/{rid}/access", params={"operation": "execute"}, headers=auth("bob")
        )
        assert r.status_code == 400


class TestUpdateAndDelete:
    def test_owner_updates_policy(self, client: TestClient) -> None:
        rid = _create(client)["id"]
        r = client.simulate_patch(
            f"/v1/resources/{rid}", json={"mode": "664", "content": "v2"}, headers=auth("bob")
        )
        assert r.status_code == 200
        assert r.json["content"] == "v2"
        assert r.json["all_modifier"] == PermissionModifier.READ.value

        assert client.simulate_get(f"/v1/resources/{rid}").status_code == 200

    def test_reader_cannot_update(self, client: TestClient) -> None:
        rid = _create(client, group_id="staff")["id"]
        r = client.simulate_patch(f"/v1/resources/{rid}", json={"content": "x"}, headers=auth("carol"))
        assert r.status_code == 403

    def test_non_string_field_rejected(self, client: TestClient) -> None:
        rid = _create(client)["id"]
        r = client.simulate_patch(f"/v1/resources/{rid}", json={"name": 5}, headers=auth("bob"))
        assert r.status_code == 400

    def test_delete(self, client: TestClient) -> None:
        rid = _create(client, group_id="staff")["id"]
        assert client.simulate_delete(f"/v1/resources/{rid}", headers=auth("carol")).status_code == 403
        assert client.simulate_delete(f"/v1/resources/{rid}", headers=auth("bob")).status_code == 204
        assert client.simulate_get(f"/v1/resources/{rid}", headers=auth("bob")).status_code == 404


class TestSeededStore:
    def test_group_writer_can_edit_seeded_resource(self, client: TestClient, api_uow) -> None:
        resource = api_uow.resources.add(
            make_resource(owner_id="erin", group_id="staff", group_modifier=PermissionModifier.READ_WRITE)
        )
        r = client.simulate_patch(
            f"/v1/resources/{resource.id}", json={"content": "team edit"}, headers=auth("carol")
        )
        assert r.status_code == 200
        r = client.simulate_patch(
            f"/v1/resources/{resource.id}", json={"group_id": "user"}, headers=auth("carol")
        )
        assert r.status_code == 403
