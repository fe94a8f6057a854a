"""Organization endpoints: CRUD, validation errors and cascading delete."""

from httpx import AsyncClient


async def test_create_organization_returns_201_with_generated_id(client: AsyncClient) -> None:
    response = await client.post(
        "/organizations",
        json={
            "name": "Arts Collective",
            "description": "Supporting local artists",
            "contactEmail": "info@artscollective.org",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["org_id"]
    assert data["name"] == "Arts Collective"
    assert data["contactEmail"] == "info@artscollective.org"
    assert "createdAt" in data and "updatedAt" in data
    assert "contact_email" not in data


async def test_create_organization_ignores_client_supplied_id(client: AsyncClient) -> None:
    response = await client.post(
        "/organizations",
        json={
            "org_id": "chosen-by-client",
            "name": "Tech United",
            "description": "Promotes technology innovation",
            "contactEmail": "info@techunited.com",
        },
    )

    assert response.status_code == 201
    assert response.json()["org_id"] != "chosen-by-client"


async def test_create_organization_invalid_email(client: AsyncClient) -> None:
    response = await client.post(
        "/organizations",
        json={"name": "X", "description": "Y", "contactEmail": "not-an-email"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["errors"] == [{"field": "contactEmail", "message": "Invalid email format"}]


async def test_create_organization_missing_fields_lists_each(client: AsyncClient) -> None:
    response = await client.post("/organizations", json={"name": "Only a name"})

    assert response.status_code == 400
    fields = {e["field"] for e in response.json()["errors"]}
    assert fields == {"description", "contactEmail"}


async def test_create_organization_blank_name(client: AsyncClient) -> None:
    response = await client.post(
        "/organizations",
        json={"name": "   ", "description": "Y", "contactEmail": "a@b.co"},
    )

    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "name", "message": "Name cannot be empty"}]


async def test_list_organizations(client: AsyncClient, factory) -> None:
    first = await factory.organization()
    second = await factory.organization(name="Arts Collective")

    response = await client.get("/organizations")

    assert response.status_code == 200
    assert {o["org_id"] for o in response.json()} == {first["org_id"], second["org_id"]}


async def test_get_organization_includes_events(client: AsyncClient, factory) -> None:
    org = await factory.organization()
    event = await factory.event(org["org_id"])

    response = await client.get(f"/organizations/{org['org_id']}")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Tech United"
    assert [e["event_id"] for e in data["events"]] == [event["event_id"]]


async def test_get_organization_not_found(client: AsyncClient) -> None:
    response = await client.get("/organizations/does-not-exist")

    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Organization not found"


async def test_update_organization_keeps_omitted_fields(client: AsyncClient, factory) -> None:
    org = await factory.organization()

    response = await client.put(
        f"/organizations/{org['org_id']}", json={"description": "New description"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["description"] == "New description"
    assert data["name"] == org["name"]
    assert data["contactEmail"] == org["contactEmail"]


async def test_update_organization_empty_body_returns_current(client: AsyncClient, factory) -> None:
    org = await factory.organization()

    response = await client.put(f"/organizations/{org['org_id']}", json={})

    assert response.status_code == 200
    assert response.json()["name"] == org["name"]


async def test_update_organization_explicit_null_rejected(client: AsyncClient, factory) -> None:
    org = await factory.organization()

    response = await client.put(f"/organizations/{org['org_id']}", json={"name": None})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "name"


async def test_update_organization_invalid_email(client: AsyncClient, factory) -> None:
    org = await factory.organization()

    response = await client.put(
        f"/organizations/{org['org_id']}", json={"contactEmail": "bad@"}
    )

    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"field": "contactEmail", "message": "Invalid email format"}
    ]
    unchanged = await client.get(f"/organizations/{org['org_id']}")
    assert unchanged.json()["contactEmail"] == org["contactEmail"]


async def test_update_organization_not_found(client: AsyncClient) -> None:
    response = await client.put("/organizations/missing", json={"name": "X"})
    assert response.status_code == 404


async def test_delete_organization_cascades(client: AsyncClient, factory) -> None:
    """Deleting an organization removes its events and their tickets, and nothing else."""
    org = await factory.organization()
    other = await factory.organization(name="Arts Collective")
    event = await factory.event(org["org_id"])
    ticket = await factory.ticket(event["event_id"])
    kept_event = await factory.event(other["org_id"], category="Arts")
    kept_ticket = await factory.ticket(kept_event["event_id"])

    response = await client.delete(f"/organizations/{org['org_id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert (await client.get(f"/organizations/{org['org_id']}")).status_code == 404
    assert (await client.get(f"/events/{event['event_id']}")).status_code == 404
    assert (await client.get(f"/tickets/{ticket['ticket_id']}")).status_code == 404
    assert (await client.get(f"/events/{kept_event['event_id']}")).status_code == 200
    assert (await client.get(f"/tickets/{kept_ticket['ticket_id']}")).status_code == 200


async def test_delete_organization_not_found(client: AsyncClient) -> None:
    response = await client.delete("/organizations/missing")
    assert response.status_code == 404
