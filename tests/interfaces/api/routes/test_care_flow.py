"""Integration tests for profiles, discovery, appointments and reviews."""

from __future__ import annotations

from sqlalchemy import update

from harmonia.infrastructure.models import ProviderProfileModel, UserModel


def _onboard_patient(client, user, **overrides):
    payload = {
        "culturalBackground": "Mexican",
        "primaryLanguage": "Spanish",
        "secondaryLanguages": ["English"],
        **overrides,
    }
    response = client.post("/api/patient/onboarding", json=payload, headers=user.headers)
    assert response.status_code == 201, response.text
    return response.json()


def _onboard_provider(client, user, **overrides):
    payload = {
        "specialty": "Family Medicine",
        "culturalBackgrounds": ["Mexican", "Puerto Rican"],
        "languagesSpoken": ["English", "Spanish"],
        "location": "Austin, TX",
        "telehealth": True,
        **overrides,
    }
    response = client.post("/api/provider/onboarding", json=payload, headers=user.headers)
    assert response.status_code == 201, response.text
    return response.json()


def _verify(db_session, profile_id: str) -> None:
    db_session.execute(
        update(ProviderProfileModel)
        .where(ProviderProfileModel.id == profile_id)
        .values(is_verified=True)
    )
    db_session.commit()


def test_patient_onboarding_marks_user_onboarded(client, signup):
    patient = signup("pat@example.com")

    profile = _onboard_patient(client, patient)

    assert profile["userId"] == patient.id
    assert profile["secondaryLanguages"] == ["English"]
    me = client.get("/api/auth/user", headers=patient.headers).json()
    assert me["isOnboarded"] is True
    assert me["role"] == "patient"

    again = client.post("/api/patient/onboarding", json={}, headers=patient.headers)
    assert again.status_code == 400


def test_patient_profile_partial_update(client, signup):
    patient = signup("pat@example.com")
    _onboard_patient(client, patient)

    response = client.put(
        "/api/patient/profile", json={"allergies": ["penicillin"]}, headers=patient.headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["allergies"] == ["penicillin"]
    assert body["culturalBackground"] == "Mexican"


def test_profile_update_without_profile_is_not_found(client, signup):
    patient = signup("pat@example.com")

    response = client.put(
        "/api/patient/profile", json={"gender": "female"}, headers=patient.headers
    )

    assert response.status_code == 404


def test_provider_search_filters_and_orders(client, signup, db_session):
    searcher = signup("pat@example.com")
    first = signup("doc1@example.com", role="provider")
    second = signup("doc2@example.com", role="provider")
    hidden = signup("doc3@example.com", role="provider")

    first_profile = _onboard_provider(client, first)
    second_profile = _onboard_provider(
        client,
        second,
        specialty="Cardiology",
        culturalBackgrounds=["Korean"],
        languagesSpoken=["Korean", "English"],
        location="Seattle, WA",
    )
    _onboard_provider(client, hidden)
    _verify(db_session, first_profile["id"])
    _verify(db_session, second_profile["id"])

    everyone = client.get("/api/providers/search", headers=searcher.headers).json()
    assert {item["id"] for item in everyone} == {first_profile["id"], second_profile["id"]}

    by_specialty = client.get(
        "/api/providers/search", params={"specialty": "cardio"}, headers=searcher.headers
    ).json()
    assert [item["id"] for item in by_specialty] == [second_profile["id"]]
    assert by_specialty[0]["user"]["id"] == second.id

    by_language = client.get(
        "/api/providers/search", params={"language": "spanish"}, headers=searcher.headers
    ).json()
    assert [item["id"] for item in by_language] == [first_profile["id"]]

    by_background = client.get(
        "/api/providers/search",
        params={"culturalBackground": "Korean", "location": "seattle"},
        headers=searcher.headers,
    ).json()
    assert [item["id"] for item in by_background] == [second_profile["id"]]

    partial_language = client.get(
        "/api/providers/search", params={"language": "Span"}, headers=searcher.headers
    ).json()
    assert partial_language == []


def test_appointment_booking_and_participant_updates(client, signup):
    patient = signup("pat@example.com")
    provider = signup("doc@example.com", role="provider")
    outsider = signup("other@example.com")
    _onboard_patient(client, patient)
    provider_profile = _onboard_provider(client, provider)
    _onboard_patient(client, outsider)

    missing = client.post(
        "/api/appointments",
        json={
            "providerId": "does-not-exist",
            "appointmentDate": "2030-01-10T15:00:00Z",
            "type": "consultation",
        },
        headers=patient.headers,
    )
    assert missing.status_code == 404

    created = client.post(
        "/api/appointments",
        json={
            "providerId": provider_profile["id"],
            "appointmentDate": "2030-01-10T15:00:00Z",
            "type": "consultation",
            "isVirtual": True,
        },
        headers=patient.headers,
    )
    assert created.status_code == 201, created.text
    appointment = created.json()
    assert appointment["status"] == "scheduled"
    assert appointment["duration"] == 30

    provider_view = client.get("/api/appointments", headers=provider.headers).json()
    assert [item["id"] for item in provider_view] == [appointment["id"]]
    assert provider_view[0]["patient"]["user"]["id"] == patient.id
    assert provider_view[0]["provider"]["specialty"] == "Family Medicine"

    forbidden = client.put(
        f"/api/appointments/{appointment['id']}",
        json={"status": "cancelled"},
        headers=outsider.headers,
    )
    assert forbidden.status_code == 403

    invalid = client.put(
        f"/api/appointments/{appointment['id']}",
        json={"status": "postponed"},
        headers=provider.headers,
    )
    assert invalid.status_code == 400

    confirmed = client.put(
        f"/api/appointments/{appointment['id']}",
        json={"status": "confirmed", "meetingLink": "https://meet.example.com/abc"},
        headers=provider.headers,
    )
    assert confirmed.status_code == 200
    assert confirmed.json()["status"] == "confirmed"
    assert confirmed.json()["meetingLink"] == "https://meet.example.com/abc"

    unknown = client.put(
        "/api/appointments/nope", json={"status": "confirmed"}, headers=provider.headers
    )
    assert unknown.status_code == 404


def test_reviews_update_provider_rating(client, signup):
    first_patient = signup("p1@example.com", first_name="Maria", last_name="Garcia")
    second_patient = signup("p2@example.com", first_name="Kim", last_name="Lee")
    provider = signup("doc@example.com", role="provider")
    _onboard_patient(client, first_patient)
    _onboard_patient(client, second_patient)
    provider_profile = _onboard_provider(client, provider)

    for user, rating, anonymous in ((first_patient, 5, False), (second_patient, 4, True)):
        response = client.post(
            "/api/reviews",
            json={
                "providerId": provider_profile["id"],
                "rating": rating,
                "culturalCompetencyRating": 5,
                "comment": "Great care",
                "isAnonymous": anonymous,
            },
            headers=user.headers,
        )
        assert response.status_code == 201, response.text

    profile = client.get("/api/provider/profile", headers=provider.headers).json()
    assert profile["reviewCount"] == 2
    assert float(profile["rating"]) == 4.5

    reviews = client.get(f"/api/reviews/{provider_profile['id']}").json()
    names = {review["reviewerName"] for review in reviews}
    assert names == {"Maria Garcia", None}

    out_of_range = client.post(
        "/api/reviews",
        json={
            "providerId": provider_profile["id"],
            "rating": 6,
            "culturalCompetencyRating": 5,
        },
        headers=first_patient.headers,
    )
    assert out_of_range.status_code == 422


def test_provider_analytics_covers_twelve_months(client, signup):
    patient = signup("pat@example.com")
    provider = signup("doc@example.com", role="provider")
    _onboard_patient(client, patient)
    provider_profile = _onboard_provider(client, provider)
    client.post(
        "/api/appointments",
        json={
            "providerId": provider_profile["id"],
            "appointmentDate": "2000-01-10T15:00:00Z",
            "type": "consultation",
        },
        headers=patient.headers,
    )

    response = client.get("/api/provider/analytics", headers=provider.headers)

    assert response.status_code == 200
    body = response.json()
    assert body["totalPatients"] == 1
    assert body["totalAppointments"] == 1
    assert body["reviewCount"] == 0
    months = [entry["month"] for entry in body["monthlyAppointments"]]
    assert len(months) == 12
    assert months == sorted(months)
    assert all(entry["count"] == 0 for entry in body["monthlyAppointments"])

    assert client.get("/api/provider/analytics", headers=patient.headers).status_code == 403


def test_admin_routes_require_admin(client, signup, db_session):
    patient = signup("pat@example.com")
    admin = signup("admin@example.com")
    _onboard_patient(client, patient)
    db_session.execute(update(UserModel).where(UserModel.id == admin.id).values(role="admin"))
    db_session.commit()

    assert client.get("/api/admin/users", headers=patient.headers).status_code == 403

    users = client.get("/api/admin/users", headers=admin.headers)
    assert users.status_code == 200
    by_id = {item["id"]: item for item in users.json()}
    assert by_id[patient.id]["hasPatientProfile"] is True
    assert by_id[admin.id]["hasPatientProfile"] is False

    stats = client.get("/api/admin/stats", headers=admin.headers).json()
    assert stats == {
        "totalUsers": 2,
        "totalPatients": 1,
        "totalProviders": 0,
        "totalAppointments": 0,
    }


def test_health_journal_requires_patient_profile(client, signup):
    patient = signup("pat@example.com")

    missing = client.get("/api/health-journal", headers=patient.headers)
    assert missing.status_code == 404

    _onboard_patient(client, patient)
    for day in ("2024-03-01T08:00:00Z", "2024-03-02T08:00:00Z"):
        response = client.post(
            "/api/health-journal",
            json={"entryDate": day, "mood": "good", "sleepHours": "7.5"},
            headers=patient.headers,
        )
        assert response.status_code == 201, response.text

    entries = client.get("/api/health-journal", headers=patient.headers).json()
    assert [entry["entryDate"][:10] for entry in entries] == ["2024-03-02", "2024-03-01"]
