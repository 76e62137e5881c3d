"""
Test Configuration

The app runs against mongomock (no MongoDB server needed) and an
OpenAIClient wrapping FakeSDK, which replays queued replies instead
of calling the API.
"""

import json
import os
from types import SimpleNamespace

# Settings are read once (lru_cache) - set env before importing the app.
os.environ["JWT_SECRET"] = "test-secret-key-0123456789"
os.environ["MONGODB_DB"] = "careercraft_test"

import mongomock
import pytest
from fastapi.testclient import TestClient

from careercraft.main import create_app
from careercraft.services.openai_client import OpenAIClient

TEST_MODEL = "test-model"

ANSWERS = {f"q{i}": "a" for i in range(1, 9)}

PROFILE = {
    "fullName": "Asha Rao",
    "age": 19,
    "educationLevel": "Undergraduate",
    "interests": ["coding"]
}

ANALYSIS = {
    "primaryDomain": "Engineering",
    "recommendedCourses": [
        {"course": "Mechanical", "confidence": 82, "reason": "Enjoys hands-on building"},
        {"course": "Civil", "confidence": 71, "reason": "Likes planning structures"}
    ],
    "traits": {
        "logicalThinking": 80,
        "creativity": 55,
        "practicalSkills": 85,
        "communicationLeadership": 40
    },
    "summary": "A practical problem solver who likes building things."
}

PORTFOLIO = {
    "strengthSummary": "Strong logical thinker with a practical streak.",
    "recommendedSkills": ["CAD", "Python", "Statics", "Teamwork", "Technical drawing"],
    "learningFocusAreas": ["Mechanics", "Materials", "Design thinking", "Programming"],
    "suggestedProjects": ["Build a line-following robot", "Design a bridge model", "3D print a gearbox"]
}


def roadmap_stage(name: str) -> dict:
    return {
        "stage": name,
        "whatToStudy": ["Engineering mathematics"],
        "skillsToLearn": ["CAD basics"],
        "certifications": [],
        "projects": ["Small mechanism model"],
        "internships": []
    }


ROADMAP = {
    "primaryDomain": "Engineering",
    "stages": [roadmap_stage(s) for s in ("0-3 months", "3-6 months", "6-12 months", "Year 2")],
    "notes": "Adjust the pace to your semester schedule."
}


# ============================================================
# FAKE OPENAI SDK
# ============================================================

class FakeCompletions:
    def __init__(self):
        self.replies = []
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if not self.replies:
            raise AssertionError("Unexpected AI call")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        message = SimpleNamespace(content=reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeSDK:
    """Mimics OpenAI().chat.completions.create."""

    def __init__(self):
        self.completions = FakeCompletions()
        self.chat = SimpleNamespace(completions=self.completions)

    def queue(self, reply) -> None:
        """dict -> JSON reply, str/None -> raw content, Exception -> raised."""
        if isinstance(reply, dict):
            reply = json.dumps(reply)
        self.completions.replies.append(reply)

    @property
    def calls(self) -> list:
        return self.completions.calls


# ============================================================
# FIXTURES
# ============================================================

@pytest.fixture
def fake_sdk() -> FakeSDK:
    return FakeSDK()


@pytest.fixture
def ai_client(fake_sdk) -> OpenAIClient:
    return OpenAIClient(model=TEST_MODEL, sdk=fake_sdk)


@pytest.fixture
def app(ai_client):
    return create_app(mongo_client=mongomock.MongoClient(), ai_client=ai_client)


@pytest.fixture
def client(app):
    # Context manager runs the lifespan (indexes, app.state.mongo_db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(client, app):
    return app.state.mongo_db


def signup(client, email: str = "a@example.com", password: str = "secret1") -> dict:
    """Create an account, return Authorization headers."""
    response = client.post("/auth/signup", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def auth_headers(client) -> dict:
    return signup(client)


@pytest.fixture
def ready_user(client, auth_headers) -> dict:
    """Account with profile and psychometric answers saved."""
    assert client.post("/user/profile", json=PROFILE, headers=auth_headers).status_code == 200
    assert client.post("/user/psychometric", json={"answers": ANSWERS}, headers=auth_headers).status_code == 200
    return auth_headers


@pytest.fixture
def analysed_user(client, ready_user, fake_sdk) -> dict:
    """ready_user plus a cached analysis."""
    fake_sdk.queue(ANALYSIS)
    assert client.post("/ai/analyze", headers=ready_user).status_code == 200
    return ready_user
