"""HTTP tests for the contacts router."""

from collections.abc import Callable
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from src.phonebook.entities.contact import ContactRepository

PayloadFactory = Callable[..., dict[str, Any]]

ERROR_KEYS = {"status", "message", "detailedMessage"}
CONTACT_KEYS = {"id", "name", "phoneNumber", "email", "createdAt", "updatedAt"}


@pytest.fixture(params=["/api/contacts", "/contacts"])
def base(request: pytest.FixtureRequest) -> str:
    """Routes are served both under /api/contacts and /contacts."""
    return request.param


class TestCreateContact:
    def test_create_returns_201_with_location(
        self, client: TestClient, base: str, contact_payload: PayloadFactory
    ):
        response = client.post(base, json=contact_payload())

        assert response.status_code == 201
        body = response.json()
        assert set(body) == CONTACT_KEYS
        assert body["name"] == "John Doe"
        assert body["phoneNumber"] == "+11234567890"
        assert body["email"] == "john@example.com"
        assert body["createdAt"]
        assert body["updatedAt"] is None
        assert response.headers["Location"] == f"{base}/{body['id']}"

    def test_round_trip_through_get(
        self, client: TestClient, base: str, contact_payload: PayloadFactory
    ):
        created = client.post(base, json=contact_payload()).json()

        response = client.get(f"{base}/{created['id']}")

        assert response.status_code == 200
        fetched = response.json()
        assert fetched == created
        assert fetched["updatedAt"] is None

    def test_email_is_optional(
        self, client: TestClient, base: str, contact_payload: PayloadFactory
    ):
        response = client.post(base, json=contact_payload(email=None))

        assert response.status_code == 201
        assert response.json()["email"] is None

    def test_email_is_stored_as_submitted(
        self, client: TestClient, base: str, contact_payload: PayloadFactory
    ):
        created = client.post(base, json=contact_payload(email="John@Example.COM"))

        assert created.status_code == 201
        assert created.json()["email"] == "John@Example.COM"
        fetched = client.get(f"{base}/{created.json()['id']}").json()
        assert fetched["email"] == "John@Example.COM"

    def test_snake_case_body_is_accepted(self, client: TestClient, base: str):
        response = client.post(
            base, json={"name": "Snake Case", "phone_number": "+15550001111"}
        )

        assert response.status_code == 201
        assert response.json()["phoneNumber"] == "+15550001111"

    def test_duplicate_phone_is_rejected(
        self, client: TestClient, base: str, contact_payload: PayloadFactory
    ):
        assert client.post(base, json=contact_payload()).status_code == 201

        response = client.post(base, json=contact_payload(name="Other Person"))

        assert response.status_code == 400
        body = response.json()
        assert set(body) == ERROR_KEYS
        assert body["status"] == 400
        assert body["message"] == "Phone number already exists"

        listed = client.get(base).json()
        assert [c["phoneNumber"] for c in listed] == ["+11234567890"]

    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"name": ""}, "name"),
            ({"name": "x" * 101}, "name"),
            ({"phone_number": "0123"}, "phoneNumber"),
            ({"phone_number": "+1-555-0100"}, "phoneNumber"),
            ({"email": "not-an-email"}, "email"),
        ],
    )
    def test_validation_errors_return_400(
        self,
        client: TestClient,
        base: str,
        contact_payload: PayloadFactory,
        overrides: dict[str, str],
        field: str,
    ):
        response = client.post(base, json=contact_payload(**overrides))

        assert response.status_code == 400
        body = response.json()
        assert set(body) == ERROR_KEYS
        assert body["message"] == "Validation failed"
        assert field in body["detailedMessage"]
        assert client.get(base).json() == []

    def test_missing_required_fields(self, client: TestClient, base: str):
        response = client.post(base, json={"email": "john@example.com"})

        assert response.status_code == 400
        detail = response.json()["detailedMessage"]
        assert "name" in detail
        assert "phoneNumber" in detail

    def test_distinct_creates_are_all_listed(self, client: TestClient, base: str):
        ids = set()
        for index in range(4):
            response = client.post(
                base, json={"name": f"Person {index}", "phoneNumber": f"+1555000{index:04d}"}
            )
            assert response.status_code == 201
            ids.add(response.json()["id"])

        listed = client.get(base).json()
        assert {c["id"] for c in listed} == ids
        for contact_id in ids:
            assert client.get(f"{base}/{contact_id}").status_code == 200


class TestGetContact:
    def test_list_empty(self, client: TestClient, base: str):
        response = client.get(base)

        assert response.status_code == 200
        assert response.json() == []

    def test_get_missing_returns_404(self, client: TestClient, base: str):
        response = client.get(f"{base}/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {
            "status": 404,
            "message": "Contact with ID does-not-exist not found",
            "detailedMessage": "No contact is stored under the identifier 'does-not-exist'.",
        }


class TestUpdateContact:
    def test_update_contact(
        self, client: TestClient, base: str, contact_payload: PayloadFactory
    ):
        created = client.post(base, json=contact_payload()).json()

        response = client.put(
            f"{base}/{created['id']}",
            json=contact_payload(
                name="Updated", phone_number="+10987654321", email="updated@test.com"
            ),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["name"] == "Updated"
        assert body["phoneNumber"] == "+10987654321"
        assert body["email"] == "updated@test.com"
        assert body["createdAt"] == created["createdAt"]
        assert body["updatedAt"] is not None
        assert client.get(f"{base}/{created['id']}").json() == body

    def test_update_keeping_own_phone(
        self, client: TestClient, base: str, contact_payload: PayloadFactory
    ):
        created = client.post(base, json=contact_payload()).json()

        response = client.put(
            f"{base}/{created['id']}", json=contact_payload(name="Johnny")
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Johnny"

    def test_update_to_phone_of_another_contact(
        self, client: TestClient, base: str, contact_payload: PayloadFactory
    ):
        client.post(base, json=contact_payload())
        jane = client.post(
            base, json=contact_payload(name="Jane Doe", phone_number="+19876543210")
        ).json()

        response = client.put(
            f"{base}/{jane['id']}", json=contact_payload(name="Jane Doe")
        )

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Phone number already exists for another contact"
        )
        assert client.get(f"{base}/{jane['id']}").json() == jane

    def test_update_missing_returns_404_without_mutation(
        self, client: TestClient, base: str, contact_payload: PayloadFactory
    ):
        created = client.post(base, json=contact_payload()).json()

        response = client.put(
            f"{base}/missing", json=contact_payload(phone_number="+15550001111")
        )

        assert response.status_code == 404
        assert client.get(base).json() == [created]

    def test_update_validation_error(
        self, client: TestClient, base: str, contact_payload: PayloadFactory
    ):
        created = client.post(base, json=contact_payload()).json()

        response = client.put(
            f"{base}/{created['id']}", json=contact_payload(email="broken")
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Validation failed"


class TestDeleteContact:
    def test_delete_contact(
        self, client: TestClient, base: str, contact_payload: PayloadFactory
    ):
        created = client.post(base, json=contact_payload()).json()

        response = client.delete(f"{base}/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{base}/{created['id']}").status_code == 404
        assert client.get(base).json() == []
        assert client.get(f"{base}/search", params={"searchTerm": "John"}).json() == []

    def test_delete_missing_returns_404_without_mutation(
        self, client: TestClient, base: str, contact_payload: PayloadFactory
    ):
        created = client.post(base, json=contact_payload()).json()

        response = client.delete(f"{base}/missing")

        assert response.status_code == 404
        assert set(response.json()) == ERROR_KEYS
        assert client.get(base).json() == [created]


class TestSearchContacts:
    @pytest.fixture
    def people(
        self, client: TestClient, base: str, contact_payload: PayloadFactory
    ) -> dict[str, dict[str, Any]]:
        john = client.post(base, json=contact_payload()).json()
        jane = client.post(
            base,
            json=contact_payload(
                name="Jane Doe", phone_number="+19876543210", email="jane@example.com"
            ),
        ).json()
        return {"john": john, "jane": jane}

    def test_search_by_name(
        self, client: TestClient, base: str, people: dict[str, dict[str, Any]]
    ):
        response = client.get(f"{base}/search", params={"searchTerm": "John"})

        assert response.status_code == 200
        assert response.json() == [people["john"]]

    def test_search_by_phone(
        self, client: TestClient, base: str, people: dict[str, dict[str, Any]]
    ):
        response = client.get(f"{base}/search", params={"searchTerm": "98765"})

        assert response.json() == [people["jane"]]

    def test_search_is_case_sensitive(
        self, client: TestClient, base: str, people: dict[str, dict[str, Any]]
    ):
        lower = client.get(f"{base}/search", params={"searchTerm": "john"})
        upper = client.get(f"{base}/search", params={"searchTerm": "DOE"})

        assert lower.status_code == 200
        assert lower.json() == []
        assert upper.json() == []

    def test_empty_term_returns_all(
        self, client: TestClient, base: str, people: dict[str, dict[str, Any]]
    ):
        empty = client.get(f"{base}/search", params={"searchTerm": ""}).json()
        absent = client.get(f"{base}/search").json()

        assert len(empty) == 2
        assert {c["id"] for c in absent} == {p["id"] for p in people.values()}


class TestErrorBoundary:
    def test_storage_failure_returns_generic_500(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ):
        def broken_get_all(self):
            raise OperationalError("SELECT", {}, Exception("secret table detail"))

        monkeypatch.setattr(ContactRepository, "get_all", broken_get_all)

        response = client.get("/api/contacts")

        assert response.status_code == 500
        body = response.json()
        assert body["status"] == 500
        assert body["message"] == "An error occurred while retrieving contacts"
        assert "secret table detail" not in response.text

    def test_unexpected_failure_returns_uniform_500(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ):
        def exploding_search(self, query):
            raise RuntimeError("unexpected internal state")

        monkeypatch.setattr(ContactRepository, "search", exploding_search)

        response = client.get(
            "/api/contacts/search",
            params={"searchTerm": "x"},
            headers={"X-Request-ID": "req-123"},
        )

        assert response.status_code == 500
        body = response.json()
        assert set(body) == ERROR_KEYS
        assert body["message"] == "An unexpected error occurred"
        assert "req-123" in body["detailedMessage"]
        assert "unexpected internal state" not in response.text
        assert response.headers["X-Request-ID"] == "req-123"

    def test_unknown_route_uses_error_body(self, client: TestClient):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert set(response.json()) == ERROR_KEYS

    def test_responses_carry_request_id(self, client: TestClient):
        response = client.get("/api/contacts")

        assert response.headers["X-Request-ID"]
        assert response.headers["X-Content-Type-Options"] == "nosniff"
