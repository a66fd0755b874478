"""
Medicine endpoints: CRUD, ordering, reorder and page ownership.
"""

import uuid

from fastapi.testclient import TestClient
from sqlmodel import Session, select

from medilink.core.config import get_settings
from medilink.models.medical import Medicine

from conftest import make_token

URL = "/api/page/medicines"


def _create(client: TestClient, headers: dict, name: str, **fields) -> dict:
    response = client.post(URL, json={"name": name, **fields}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_then_reorder_scenario(client: TestClient, owner, auth_headers):
    headers = auth_headers(owner)

    aspirin = _create(client, headers, "Aspirin")
    assert aspirin["display_order"] == 0

    ibuprofen = _create(client, headers, "Ibuprofen", dosage="200mg")
    assert ibuprofen["display_order"] == 1

    response = client.put(
        f"{URL}/reorder",
        json={"medicineIds": [ibuprofen["id"], aspirin["id"]]},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json() == {"success": True}

    names = [m["name"] for m in client.get(URL, headers=headers).json()]
    assert names == ["Ibuprofen", "Aspirin"]


def test_create_places_new_item_last(client: TestClient, owner, auth_headers):
    headers = auth_headers(owner)
    for name in ("A", "B", "C"):
        _create(client, headers, name)

    first_id = client.get(URL, headers=headers).json()[0]["id"]
    client.delete(f"{URL}/{first_id}", headers=headers)

    created = _create(client, headers, "D")
    listed = client.get(URL, headers=headers).json()

    assert listed[-1]["id"] == created["id"]
    assert created["display_order"] == 3


def test_create_trims_fields(client: TestClient, owner, auth_headers):
    created = _create(
        client,
        auth_headers(owner),
        "  Metformin  ",
        dosage="  500mg ",
        frequency="   ",
    )
    assert created["name"] == "Metformin"
    assert created["dosage"] == "500mg"
    assert created["frequency"] is None


def test_create_rejects_blank_name(client: TestClient, owner, auth_headers, session: Session):
    response = client.post(URL, json={"name": "   "}, headers=auth_headers(owner))

    assert response.status_code == 400
    assert "error" in response.json()
    assert session.exec(select(Medicine)).all() == []


def test_create_without_page_is_404(client: TestClient, make_user, auth_headers):
    user = make_user(username="nopage")
    response = client.post(URL, json={"name": "Aspirin"}, headers=auth_headers(user))

    assert response.status_code == 404
    assert response.json()["error"].startswith("Page not found")


def test_list_without_page_is_404(client: TestClient, make_user, auth_headers):
    user = make_user()
    response = client.get(URL, headers=auth_headers(user))
    assert response.status_code == 404


def test_list_empty_page(client: TestClient, owner, auth_headers):
    response = client.get(URL, headers=auth_headers(owner))
    assert response.status_code == 200
    assert response.json() == []


def test_update_medicine(client: TestClient, owner, auth_headers):
    headers = auth_headers(owner)
    created = _create(client, headers, "Aspirin")

    response = client.put(
        f"{URL}/{created['id']}",
        json={"name": "Aspirin 81", "dosage": "81mg", "display_order": 99},
        headers=headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Aspirin 81"
    assert body["dosage"] == "81mg"
    assert body["display_order"] == created["display_order"]


def test_update_other_users_medicine_is_404(
    client: TestClient,
    owner,
    make_user,
    make_page,
    auth_headers,
    session: Session,
):
    created = _create(client, auth_headers(owner), "Aspirin")

    intruder = make_user(username="intruder")
    make_page(intruder)

    response = client.put(
        f"{URL}/{created['id']}",
        json={"name": "Hacked"},
        headers=auth_headers(intruder),
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Medicine not found"}

    row = session.get(Medicine, uuid.UUID(created["id"]))
    session.refresh(row)
    assert row.name == "Aspirin"


def test_update_and_delete_unknown_id_look_the_same(client: TestClient, owner, auth_headers):
    headers = auth_headers(owner)
    missing = uuid.uuid4()

    put = client.put(f"{URL}/{missing}", json={"name": "X"}, headers=headers)
    delete = client.delete(f"{URL}/{missing}", headers=headers)

    assert put.status_code == delete.status_code == 404
    assert put.json() == delete.json() == {"error": "Medicine not found"}


def test_delete_medicine(client: TestClient, owner, auth_headers):
    headers = auth_headers(owner)
    created = _create(client, headers, "Aspirin")

    response = client.delete(f"{URL}/{created['id']}", headers=headers)

    assert response.status_code == 200
    assert client.get(URL, headers=headers).json() == []


def test_delete_other_users_medicine_is_404(
    client: TestClient, owner, make_user, make_page, auth_headers
):
    created = _create(client, auth_headers(owner), "Aspirin")
    intruder = make_user()
    make_page(intruder)

    response = client.delete(f"{URL}/{created['id']}", headers=auth_headers(intruder))

    assert response.status_code == 404
    assert len(client.get(URL, headers=auth_headers(owner)).json()) == 1


def test_reorder_with_foreign_id_changes_nothing(
    client: TestClient, owner, make_user, make_page, auth_headers
):
    headers = auth_headers(owner)
    a = _create(client, headers, "A")
    b = _create(client, headers, "B")

    other = make_user()
    make_page(other)
    foreign = _create(client, auth_headers(other), "Foreign")

    response = client.put(
        f"{URL}/reorder",
        json={"medicineIds": [b["id"], foreign["id"], a["id"]]},
        headers=headers,
    )

    assert response.status_code == 404
    listed = client.get(URL, headers=headers).json()
    assert [m["id"] for m in listed] == [a["id"], b["id"]]
    assert [m["display_order"] for m in listed] == [0, 1]


def test_reorder_with_unknown_id_is_404(client: TestClient, owner, auth_headers):
    headers = auth_headers(owner)
    a = _create(client, headers, "A")

    response = client.put(
        f"{URL}/reorder",
        json={"medicineIds": [a["id"], str(uuid.uuid4())]},
        headers=headers,
    )
    assert response.status_code == 404


def test_reorder_rejects_duplicates(client: TestClient, owner, auth_headers):
    headers = auth_headers(owner)
    a = _create(client, headers, "A")
    b = _create(client, headers, "B")

    response = client.put(
        f"{URL}/reorder",
        json={"medicineIds": [b["id"], b["id"], a["id"]]},
        headers=headers,
    )

    assert response.status_code == 400
    assert [m["id"] for m in client.get(URL, headers=headers).json()] == [a["id"], b["id"]]


def test_reorder_rejects_empty_or_malformed_list(client: TestClient, owner, auth_headers):
    headers = auth_headers(owner)

    for body in ({"medicineIds": []}, {"medicineIds": "abc"}, {}, {"medicineIds": ["nope"]}):
        response = client.put(f"{URL}/reorder", json=body, headers=headers)
        assert response.status_code == 400, body
        assert "error" in response.json()


def test_unauthenticated_requests_are_401(client: TestClient):
    assert client.get(URL).status_code == 401
    assert client.post(URL, json={"name": "Aspirin"}).status_code == 401


def test_invalid_token_is_401(client: TestClient):
    response = client.get(URL, headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid or expired session"}


def test_session_cookie_authenticates(client: TestClient, owner):
    cookie_name = get_settings().SESSION_COOKIE_NAME
    client.cookies.set(cookie_name, make_token(owner.id, owner.email))

    response = client.get(URL)

    assert response.status_code == 200
