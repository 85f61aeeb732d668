# tests/test_api.py
"""
API SMOKE TESTS
===============

Drive the REST API the way the frontend does: create components,
connect them, resolve.
"""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client():
    with TestClient(app) as client:
        client.post("/api/reset")
        yield client


def create(client, kind, **buffer):
    response = client.post("/api/components", json={"kind": kind, "buffer": buffer})
    assert response.status_code == 201, response.text
    return response.json()["component_id"]


def connect(client, from_id, to_id):
    return client.post("/api/connections", json={"from_id": from_id, "to_id": to_id})


class TestComponents:

    def test_health(self, client):
        assert client.get("/").json()["status"] == "ok"

    def test_create_body_with_defaults(self, client):
        response = client.post(
            "/api/components",
            json={"kind": "body", "buffer": {"name": "arm", "mass": "2.5", "ixx": "oops"}},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["kind"] == "body"
        assert data["name"] == "arm"
        assert float(data["fields"]["mass"]) == 2.5
        assert float(data["fields"]["ixx"]) == 1.0

    def test_numeric_json_values_are_accepted(self, client):
        body = create(client, "body", mass=3)
        listed = client.get("/api/components").json()
        assert [c["component_id"] for c in listed] == [body]
        assert float(listed[0]["fields"]["mass"]) == 3.0

    def test_null_and_boolean_fields_take_defaults(self, client):
        response = client.post(
            "/api/components",
            json={"kind": "body", "buffer": {"mass": None, "ixx": True, "name": None}},
        )
        assert response.status_code == 201, response.text
        data = response.json()
        assert data["name"] == "Body"
        assert float(data["fields"]["mass"]) == 1.0
        assert float(data["fields"]["ixx"]) == 1.0

    def test_update_with_null_field(self, client):
        joint = create(client, "revolute", theta="0.5")
        response = client.put(f"/api/components/{joint}", json={"buffer": {"theta": None}})
        assert response.status_code == 200, response.text
        assert float(response.json()["fields"]["theta"]) == 0.0

    def test_non_positive_mass_is_rejected(self, client):
        response = client.post("/api/components", json={"kind": "body", "buffer": {"mass": "0"}})
        assert response.status_code == 400
        assert response.json()["error"] == "MassLessThanOrEqualToZero"
        assert client.get("/api/components").json() == []

    def test_update_component(self, client):
        joint = create(client, "revolute")
        response = client.put(
            f"/api/components/{joint}",
            json={"buffer": {"name": "hinge", "theta": "0.25"}},
        )
        assert response.status_code == 200
        assert response.json()["name"] == "hinge"
        assert float(response.json()["fields"]["theta"]) == 0.25

    def test_delete_component(self, client):
        body = create(client, "body")
        assert client.delete(f"/api/components/{body}").status_code == 204
        assert client.get("/api/components").json() == []

    def test_delete_unknown_component(self, client):
        response = client.delete(f"/api/components/{uuid4()}")
        assert response.status_code == 404


class TestConnectionsAndResolution:

    def test_pendulum(self, client):
        base = create(client, "base")
        joint = create(client, "revolute", theta="0.1")
        body = create(client, "body", mass="2")

        assert connect(client, base, joint).status_code == 201
        assert connect(client, joint, body).status_code == 201

        response = client.get("/api/system")
        assert response.status_code == 200
        system = response.json()
        assert system["n_bodies"] == 2
        assert system["n_joints"] == 1
        assert [b["component_id"] for b in system["bodies"]] == [base, body]
        assert system["joints"][0]["component_id"] == joint
        assert system["state_vector"] == pytest.approx([0.1, 0.0])

    def test_invalid_connection(self, client):
        b1 = create(client, "body")
        b2 = create(client, "body")
        response = connect(client, b1, b2)
        assert response.status_code == 422
        assert response.json()["error"] == "InvalidConnection"

    def test_connect_unknown_component(self, client):
        base = create(client, "base")
        assert connect(client, base, str(uuid4())).status_code == 404

    def test_resolve_without_base(self, client):
        create(client, "body")
        response = client.get("/api/system")
        assert response.status_code == 422
        assert response.json()["error"] == "NoBase"

    def test_resolve_with_loose_joint(self, client):
        base = create(client, "base")
        joint = create(client, "revolute")
        connect(client, base, joint)
        response = client.get("/api/system")
        assert response.status_code == 422
        assert response.json()["error"] == "JointMissingTo"
