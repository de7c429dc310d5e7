import json

import pytest

from agents.test_case_generator import TestCaseGeneratorAgent
from models.seed_data import seed_cases
from models.test_library import TestLibrary
from orchestrator import Orchestrator


class FakeResponse:
    def __init__(self, text):
        self._text = text

    @property
    def text(self):
        if isinstance(self._text, Exception):
            raise self._text
        return self._text


class FakeModel:
    """Stands in for genai.GenerativeModel; records every prompt."""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate_content(self, prompt, request_options=None):
        self.calls.append({"prompt": prompt, "request_options": request_options})
        if self.error is not None:
            raise self.error
        return FakeResponse(self.reply)


def make_case(title="Session timeout logs user out", steps=None, **overrides):
    case = {
        "title": title,
        "description": "Verify automatic logout after inactivity.",
        "preconditions": "User is logged in.",
        "priority": "High",
        "complianceTags": ["HIPAA"],
        "steps": steps if steps is not None else [
            {"stepNumber": 1, "action": "Log in", "expectedResult": "Dashboard shown"},
            {"stepNumber": 2, "action": "Wait 15 minutes", "expectedResult": "User is logged out"},
        ],
    }
    case.update(overrides)
    return case


def payload(*cases):
    return json.dumps({"testCases": list(cases)})


@pytest.fixture
def fake_model():
    return FakeModel(reply=payload(
        make_case("Timeout after 15 minutes"),
        make_case("No timeout while active", priority="Medium"),
        make_case("Timeout warning dialog", priority="Low", complianceTags=[]),
    ))


@pytest.fixture
def generator(fake_model):
    return TestCaseGeneratorAgent(api_key="test-key", model=fake_model)


@pytest.fixture
def library():
    return TestLibrary(seed_cases())


@pytest.fixture
def orchestrator(generator, library):
    return Orchestrator(generator=generator, library=library)
