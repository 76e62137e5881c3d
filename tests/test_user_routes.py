"""
Tests for /me, profile and psychometric submission.
"""

import pytest

from conftest import ANSWERS, PROFILE


def answers(n: int) -> dict:
    return {f"q{i}": "b" for i in range(1, n + 1)}


def test_me_before_any_data(client, auth_headers):
    response = client.get("/me", headers=auth_headers)

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["email"] == "a@example.com"
    assert user["profile"] is None
    assert user["psychometric"] is None
    assert "passwordHash" not in user


class TestProfile:

    def test_save_and_read_back(self, client, auth_headers):
        response = client.post("/user/profile", json=PROFILE, headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert client.get("/me", headers=auth_headers).json()["user"]["profile"] == PROFILE

    def test_strings_are_trimmed(self, client, auth_headers):
        data = dict(PROFILE, fullName="  Asha Rao ", interests=[" coding ", "music"])

        client.post("/user/profile", json=data, headers=auth_headers)
        profile = client.get("/me", headers=auth_headers).json()["user"]["profile"]

        assert profile["fullName"] == "Asha Rao"
        assert profile["interests"] == ["coding", "music"]

    def test_profile_is_replaced_wholesale(self, client, auth_headers):
        client.post("/user/profile", json=PROFILE, headers=auth_headers)
        second = {"fullName": "Ravi K", "age": 25, "educationLevel": "Postgraduate", "interests": ["finance"]}

        client.post("/user/profile", json=second, headers=auth_headers)

        assert client.get("/me", headers=auth_headers).json()["user"]["profile"] == second

    def test_touches_updated_at(self, client, db, auth_headers):
        before = db.users.find_one({})["updatedAt"]

        client.post("/user/profile", json=PROFILE, headers=auth_headers)

        assert db.users.find_one({})["updatedAt"] >= before

    @pytest.mark.parametrize("field,value", [
        ("fullName", "A"),
        ("fullName", "  A  "),
        ("age", 11),
        ("age", 101),
        ("age", 19.5),
        ("age", "19"),
        ("age", True),
        ("age", None),
        ("educationLevel", "PhD"),
        ("interests", []),
        ("interests", ["coding", "   "]),
    ])
    def test_invalid_field(self, client, auth_headers, field, value):
        data = dict(PROFILE, **{field: value})

        response = client.post("/user/profile", json=data, headers=auth_headers)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid input"
        assert field in body["details"]["fieldErrors"]

    def test_integral_float_age_accepted(self, client, auth_headers):
        response = client.post("/user/profile", json=dict(PROFILE, age=19.0), headers=auth_headers)

        assert response.status_code == 200
        assert client.get("/me", headers=auth_headers).json()["user"]["profile"]["age"] == 19

    @pytest.mark.parametrize("age", [12, 100])
    def test_age_bounds_inclusive(self, client, auth_headers, age):
        response = client.post("/user/profile", json=dict(PROFILE, age=age), headers=auth_headers)

        assert response.status_code == 200

    @pytest.mark.parametrize("level", ["Middle School", "High School", "Diploma", "Undergraduate", "Postgraduate"])
    def test_every_education_level_accepted(self, client, auth_headers, level):
        response = client.post("/user/profile", json=dict(PROFILE, educationLevel=level), headers=auth_headers)

        assert response.status_code == 200

    def test_missing_field(self, client, auth_headers):
        data = {k: v for k, v in PROFILE.items() if k != "interests"}

        response = client.post("/user/profile", json=data, headers=auth_headers)

        assert response.status_code == 400
        assert "interests" in response.json()["details"]["fieldErrors"]


class TestPsychometric:

    @pytest.mark.parametrize("count", [8, 9, 10])
    def test_accepts_eight_to_ten_answers(self, client, auth_headers, count):
        response = client.post("/user/psychometric", json={"answers": answers(count)}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"ok": True}

    @pytest.mark.parametrize("count", [0, 7, 11])
    def test_rejects_other_counts(self, client, auth_headers, count):
        response = client.post("/user/psychometric", json={"answers": answers(count)}, headers=auth_headers)

        assert response.status_code == 400
        assert "answers" in response.json()["details"]["fieldErrors"]

    def test_rejects_empty_answer(self, client, auth_headers):
        data = dict(ANSWERS, q1="")

        response = client.post("/user/psychometric", json={"answers": data}, headers=auth_headers)

        assert response.status_code == 400

    def test_stored_with_timestamp(self, client, db, auth_headers):
        client.post("/user/psychometric", json={"answers": ANSWERS}, headers=auth_headers)

        doc = db.users.find_one({})
        assert doc["psychometric"]["answers"] == ANSWERS
        assert doc["psychometric"]["submittedAt"] == doc["updatedAt"]

        me = client.get("/me", headers=auth_headers).json()["user"]
        assert set(me["psychometric"]) == {"submittedAt"}

    def test_resubmission_replaces_answers(self, client, db, auth_headers):
        client.post("/user/psychometric", json={"answers": answers(10)}, headers=auth_headers)
        client.post("/user/psychometric", json={"answers": ANSWERS}, headers=auth_headers)

        assert db.users.find_one({})["psychometric"]["answers"] == ANSWERS

    def test_unknown_user_is_not_found(self, client, db, auth_headers):
        db.users.delete_many({})

        response = client.post("/user/psychometric", json={"answers": ANSWERS}, headers=auth_headers)

        assert response.status_code == 404
