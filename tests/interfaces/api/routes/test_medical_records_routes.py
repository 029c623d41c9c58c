"""Tests for medical records and the object endpoints guarding their files."""

from __future__ import annotations


def _onboard(client, user, role: str) -> dict:
    if role == "provider":
        response = client.post(
            "/api/provider/onboarding",
            json={"specialty": "Dermatology"},
            headers=user.headers,
        )
    else:
        response = client.post("/api/patient/onboarding", json={}, headers=user.headers)
    assert response.status_code == 201, response.text
    return response.json()


def _record_payload(**overrides) -> dict:
    return {
        "title": "Blood panel",
        "recordType": "lab_result",
        "recordDate": "2024-02-01T09:00:00Z",
        "fileUrl": "/objects/uploads/panel",
        "fileName": "panel.pdf",
        **overrides,
    }


def test_patient_files_and_lists_own_records(client, signup):
    patient = signup("pat@example.com")
    _onboard(client, patient, "patient")

    for date in ("2024-01-01T09:00:00Z", "2024-02-01T09:00:00Z"):
        response = client.post(
            "/api/medical-records",
            json=_record_payload(recordDate=date),
            headers=patient.headers,
        )
        assert response.status_code == 201, response.text
        assert response.json()["providerId"] is None

    records = client.get("/api/medical-records", headers=patient.headers).json()
    assert [record["recordDate"][:10] for record in records] == ["2024-02-01", "2024-01-01"]
    assert records[0]["provider"] is None


def test_provider_must_name_patient(client, signup):
    patient = signup("pat@example.com")
    provider = signup("doc@example.com", role="provider")
    patient_profile = _onboard(client, patient, "patient")
    provider_profile = _onboard(client, provider, "provider")

    missing = client.post(
        "/api/medical-records", json=_record_payload(), headers=provider.headers
    )
    assert missing.status_code == 400

    unknown = client.post(
        "/api/medical-records",
        json=_record_payload(patientId="nobody"),
        headers=provider.headers,
    )
    assert unknown.status_code == 404

    created = client.post(
        "/api/medical-records",
        json=_record_payload(patientId=patient_profile["id"]),
        headers=provider.headers,
    )
    assert created.status_code == 201
    assert created.json()["providerId"] == provider_profile["id"]

    assert client.get("/api/medical-records", headers=provider.headers).status_code == 400
    listed = client.get(
        "/api/medical-records",
        params={"patientId": patient_profile["id"]},
        headers=provider.headers,
    ).json()
    assert listed[0]["provider"]["specialty"] == "Dermatology"
    assert listed[0]["provider"]["user"]["id"] == provider.id


def test_provider_only_sees_records_they_filed(client, signup):
    patient = signup("pat@example.com")
    treating = signup("doc@example.com", role="provider")
    unrelated = signup("other-doc@example.com", role="provider")
    patient_profile = _onboard(client, patient, "patient")
    _onboard(client, treating, "provider")
    _onboard(client, unrelated, "provider")

    client.post(
        "/api/medical-records",
        json=_record_payload(description="HIV panel"),
        headers=patient.headers,
    )
    client.post(
        "/api/medical-records",
        json=_record_payload(title="Follow-up", patientId=patient_profile["id"]),
        headers=treating.headers,
    )

    unrelated_view = client.get(
        "/api/medical-records",
        params={"patientId": patient_profile["id"]},
        headers=unrelated.headers,
    )
    assert unrelated_view.status_code == 200
    assert unrelated_view.json() == []

    treating_view = client.get(
        "/api/medical-records",
        params={"patientId": patient_profile["id"]},
        headers=treating.headers,
    ).json()
    assert [record["title"] for record in treating_view] == ["Follow-up"]

    own_view = client.get("/api/medical-records", headers=patient.headers).json()
    assert {record["title"] for record in own_view} == {"Blood panel", "Follow-up"}


def test_invalid_record_type_is_rejected(client, signup):
    patient = signup("pat@example.com")
    _onboard(client, patient, "patient")

    response = client.post(
        "/api/medical-records",
        json=_record_payload(recordType="horoscope"),
        headers=patient.headers,
    )

    assert response.status_code == 400


def test_object_access_is_limited_to_record_readers(client, signup):
    owner = signup("pat@example.com")
    stranger = signup("other@example.com")
    _onboard(client, owner, "patient")
    _onboard(client, stranger, "patient")
    client.post("/api/medical-records", json=_record_payload(), headers=owner.headers)

    assert client.get("/objects/uploads/panel", headers=stranger.headers).status_code == 404
    assert client.get("/objects/uploads/unknown", headers=owner.headers).status_code == 404
    # Storage is not configured in tests, so an authorised read stops there.
    assert client.get("/objects/uploads/panel", headers=owner.headers).status_code == 503


def test_medical_record_file_normalization(client, signup):
    patient = signup("pat@example.com")

    missing = client.put("/api/medical-record-files", json={}, headers=patient.headers)
    assert missing.status_code == 400

    response = client.put(
        "/api/medical-record-files",
        json={"fileURL": "/objects/uploads/panel"},
        headers=patient.headers,
    )
    assert response.status_code == 200
    assert response.json() == {"objectPath": "/objects/uploads/panel"}


def test_upload_url_requires_configured_storage(client, signup):
    patient = signup("pat@example.com")

    assert client.post("/api/objects/upload", headers=patient.headers).status_code == 503
    client.cookies.clear()
    assert client.post("/api/objects/upload").status_code == 401
