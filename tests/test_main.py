"""Tests for application-level endpoints and error rendering."""

from fastapi.testclient import TestClient


def test_health_check(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "haven"


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    """Unknown paths answer 404 in the failure envelope."""
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}


def test_validation_errors_are_400(client: TestClient) -> None:
    """Malformed bodies are rejected with 400 rather than 422."""
    response = client.post("/api/properties", json={})
    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert "name" in data["error"]


class TestPropertyAndApartmentEndpoints:
    """Thin CRUD used to label meters."""

    def test_property_crud(self, client: TestClient) -> None:
        """Create, read, update and delete a property."""
        response = client.post(
            "/api/properties", json={"name": "Riverside Court", "address": "12 River Road"}
        )
        assert response.status_code == 201
        property_id = response.json()["property_id"]

        response = client.put(f"/api/properties/{property_id}", json={"name": "Riverside"})
        assert response.status_code == 200
        assert response.json()["name"] == "Riverside"
        assert response.json()["address"] == "12 River Road"

        assert len(client.get("/api/properties").json()) == 1

        response = client.delete(f"/api/properties/{property_id}")
        assert response.status_code == 200
        assert client.get(f"/api/properties/{property_id}").status_code == 404

    def test_apartment_crud_and_count(self, client: TestClient) -> None:
        """Apartments belong to a property and can be counted."""
        property_id = client.post("/api/properties", json={"name": "Hillside"}).json()[
            "property_id"
        ]
        for number in ("1A", "1B"):
            response = client.post(
                "/api/apartments",
                json={"property_id": property_id, "apartment_number": number},
            )
            assert response.status_code == 201

        assert client.get("/api/apartments/count").json() == {"total": 2}

        apartment_id = client.get("/api/apartments").json()[0]["apartment_id"]
        response = client.put(
            f"/api/apartments/{apartment_id}", json={"apartment_type": "studio"}
        )
        assert response.status_code == 200
        assert response.json()["apartment_number"] == "1A"
        assert response.json()["apartment_type"] == "studio"

        assert client.delete(f"/api/apartments/{apartment_id}").status_code == 200
        assert client.get("/api/apartments/count").json() == {"total": 1}

    def test_apartment_not_found(self, client: TestClient) -> None:
        """Missing apartments answer 404."""
        response = client.get("/api/apartments/999")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Apartment not found"}
