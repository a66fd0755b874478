import uuid
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from medilink.models.notification import Notification
from medilink.models.user import User

URL = "/api/notifications"


@pytest.fixture
def notify(session: Session):
    def _notify(user: User, title: str, minutes_ago: int = 0, is_read: bool = False):
        notification = Notification(
            user_id=user.id,
            type="system",
            title=title,
            message=f"{title} body",
            is_read=is_read,
            created_at=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
        )
        session.add(notification)
        session.commit()
        session.refresh(notification)
        return notification

    return _notify


def test_requires_auth(client: TestClient):
    assert client.get(URL).status_code == 401
    assert client.patch(URL, json={"markAll": True}).status_code == 401


def test_list_newest_first_with_unread_count(
    client: TestClient, make_user, auth_headers, notify
):
    user = make_user()
    notify(user, "old", minutes_ago=10, is_read=True)
    notify(user, "middle", minutes_ago=5)
    notify(user, "new", minutes_ago=0)
    notify(make_user(), "someone else")

    body = client.get(URL, headers=auth_headers(user)).json()

    assert [n["title"] for n in body["notifications"]] == ["new", "middle", "old"]
    assert body["unread_count"] == 2


def test_mark_one_read_is_idempotent(client: TestClient, make_user, auth_headers, notify):
    user = make_user()
    target = notify(user, "one")
    notify(user, "two")
    headers = auth_headers(user)

    for _ in range(2):
        response = client.patch(URL, json={"notificationId": str(target.id)}, headers=headers)
        assert response.status_code == 200
        assert response.json() == {"success": True}

    body = client.get(URL, headers=headers).json()
    assert body["unread_count"] == 1


def test_cannot_mark_someone_elses_notification(
    client: TestClient, make_user, auth_headers, notify, session: Session
):
    owner = make_user()
    target = notify(owner, "private")
    intruder = make_user()

    response = client.patch(
        URL, json={"notificationId": str(target.id)}, headers=auth_headers(intruder)
    )

    assert response.status_code == 404
    session.refresh(target)
    assert target.is_read is False


def test_unknown_notification_is_404(client: TestClient, make_user, auth_headers):
    response = client.patch(
        URL, json={"notificationId": str(uuid.uuid4())}, headers=auth_headers(make_user())
    )
    assert response.status_code == 404


def test_mark_all_read(client: TestClient, make_user, auth_headers, notify):
    user = make_user()
    other = make_user()
    for title in ("a", "b", "c"):
        notify(user, title)
    notify(other, "untouched")

    response = client.patch(URL, json={"markAll": True}, headers=auth_headers(user))

    assert response.status_code == 200
    assert client.get(URL, headers=auth_headers(user)).json()["unread_count"] == 0
    assert client.get(URL, headers=auth_headers(other)).json()["unread_count"] == 1


def test_patch_without_target_is_400(client: TestClient, make_user, auth_headers):
    response = client.patch(URL, json={}, headers=auth_headers(make_user()))
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}
