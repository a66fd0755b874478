from fastapi.testclient import TestClient
from sqlmodel import Session, select

from medilink.models.medical import Allergy, Diagnosis

ALLERGIES = "/api/page/allergies"
DIAGNOSES = "/api/page/diagnoses"


# -------- Diagnoses --------


def test_diagnosis_blank_name_is_rejected_without_insert(
    client: TestClient, owner, auth_headers, session: Session
):
    response = client.post(
        DIAGNOSES,
        json={"name": "", "severity": "invalid"},
        headers=auth_headers(owner),
    )

    assert response.status_code == 400
    assert session.exec(select(Diagnosis)).all() == []


def test_diagnosis_unknown_severity_is_stored_as_null(client: TestClient, owner, auth_headers):
    response = client.post(
        DIAGNOSES,
        json={"name": "Asthma", "severity": "invalid"},
        headers=auth_headers(owner),
    )

    assert response.status_code == 201
    assert response.json()["severity"] is None


def test_diagnosis_fields_round_trip(client: TestClient, owner, auth_headers):
    headers = auth_headers(owner)
    response = client.post(
        DIAGNOSES,
        json={
            "name": "Type 2 diabetes",
            "severity": "moderate",
            "diagnosis_date": "2021-03-04",
            "description": "  Diet controlled  ",
        },
        headers=headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["severity"] == "moderate"
    assert body["diagnosis_date"] == "2021-03-04"
    assert body["description"] == "Diet controlled"
    assert body["display_order"] == 0


def test_diagnosis_update_can_clear_severity(client: TestClient, owner, auth_headers):
    headers = auth_headers(owner)
    created = client.post(
        DIAGNOSES, json={"name": "Asthma", "severity": "mild"}, headers=headers
    ).json()

    response = client.put(
        f"{DIAGNOSES}/{created['id']}",
        json={"name": "Asthma", "severity": "unknown"},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["severity"] is None


def test_diagnosis_reorder(client: TestClient, owner, auth_headers):
    headers = auth_headers(owner)
    ids = [
        client.post(DIAGNOSES, json={"name": name}, headers=headers).json()["id"]
        for name in ("First", "Second", "Third")
    ]

    response = client.put(
        f"{DIAGNOSES}/reorder",
        json={"diagnosisIds": [ids[2], ids[0], ids[1]]},
        headers=headers,
    )
    assert response.status_code == 200

    listed = client.get(DIAGNOSES, headers=headers).json()
    assert [d["name"] for d in listed] == ["Third", "First", "Second"]
    assert [d["display_order"] for d in listed] == [0, 1, 2]


# -------- Allergies --------


def test_allergy_defaults(client: TestClient, owner, auth_headers):
    response = client.post(
        ALLERGIES,
        json={"name": "Penicillin", "severity": "extreme", "is_medicine": "yes"},
        headers=auth_headers(owner),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["severity"] == "mild"
    assert body["is_medicine"] is False


def test_allergy_valid_values_are_kept(client: TestClient, owner, auth_headers):
    response = client.post(
        ALLERGIES,
        json={
            "name": "Peanuts",
            "reaction": "Anaphylaxis",
            "severity": "life-threatening",
            "is_medicine": True,
        },
        headers=auth_headers(owner),
    )

    body = response.json()
    assert body["severity"] == "life-threatening"
    assert body["is_medicine"] is True
    assert body["reaction"] == "Anaphylaxis"


def test_allergy_created_last(client: TestClient, owner, auth_headers):
    headers = auth_headers(owner)
    first = client.post(ALLERGIES, json={"name": "Latex"}, headers=headers).json()
    second = client.post(ALLERGIES, json={"name": "Pollen"}, headers=headers).json()

    assert first["display_order"] == 0
    assert second["display_order"] == 1


def test_allergy_reorder_and_foreign_id(
    client: TestClient, owner, make_user, make_page, auth_headers, session: Session
):
    headers = auth_headers(owner)
    latex = client.post(ALLERGIES, json={"name": "Latex"}, headers=headers).json()
    pollen = client.post(ALLERGIES, json={"name": "Pollen"}, headers=headers).json()

    response = client.put(
        f"{ALLERGIES}/reorder",
        json={"allergyIds": [pollen["id"], latex["id"]]},
        headers=headers,
    )
    assert response.status_code == 200
    assert [a["name"] for a in client.get(ALLERGIES, headers=headers).json()] == [
        "Pollen",
        "Latex",
    ]

    other = make_user()
    make_page(other)
    response = client.put(
        f"{ALLERGIES}/reorder",
        json={"allergyIds": [latex["id"], pollen["id"]]},
        headers=auth_headers(other),
    )
    assert response.status_code == 404

    rows = session.exec(select(Allergy).order_by(Allergy.display_order)).all()
    assert [row.name for row in rows] == ["Pollen", "Latex"]


# -------- Dashboard (camelCase) keys --------


def test_allergy_accepts_camel_case_is_medicine(
    client: TestClient, owner, auth_headers, session: Session
):
    response = client.post(
        ALLERGIES,
        json={"name": "Penicillin", "isMedicine": True, "severity": "severe"},
        headers=auth_headers(owner),
    )

    assert response.status_code == 201
    assert response.json()["is_medicine"] is True
    row = session.exec(select(Allergy)).one()
    assert row.is_medicine is True


def test_diagnosis_accepts_camel_case_date(
    client: TestClient, owner, auth_headers, session: Session
):
    response = client.post(
        DIAGNOSES,
        json={"name": "Asthma", "diagnosisDate": "2019-11-30"},
        headers=auth_headers(owner),
    )

    assert response.status_code == 201
    assert response.json()["diagnosis_date"] == "2019-11-30"
    row = session.exec(select(Diagnosis)).one()
    assert row.diagnosis_date.isoformat() == "2019-11-30"


def test_diagnosis_date_can_be_cleared(client: TestClient, owner, auth_headers):
    headers = auth_headers(owner)
    created = client.post(
        DIAGNOSES, json={"name": "Asthma", "diagnosisDate": "2019-11-30"}, headers=headers
    ).json()

    response = client.put(
        f"{DIAGNOSES}/{created['id']}",
        json={"name": "Asthma", "diagnosisDate": ""},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["diagnosis_date"] is None
