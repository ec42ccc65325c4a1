import random

import pytest

from excuse_engine.errors import InvalidInputError
from excuse_engine.generator import generate_excuse
from excuse_engine.schema import Excuse, ExcuseContext

from conftest import make_excuse


def test_excuse_dict_round_trip(now):
    context = ExcuseContext("transport", urgency="high", audience="authority", relationship="distant")
    excuse = generate_excuse(context, "es", rng=random.Random(3), now=now)
    payload = excuse.to_dict()
    assert payload["timestamp"] == "2025-01-15T14:30:00"
    assert payload["context"]["audience"] == "authority"
    assert Excuse.from_dict(payload) == excuse


def test_excuse_from_dict_optional_fields():
    payload = make_excuse("a").to_dict()
    del payload["title"]
    del payload["language"]
    excuse = Excuse.from_dict(payload)
    assert excuse.title == ""
    assert excuse.language == "en"
    assert excuse.context.situation == "work"


def test_excuse_from_dict_missing_fields():
    payload = make_excuse("a").to_dict()
    del payload["content"]
    payload["timestamp"] = ""
    with pytest.raises(InvalidInputError, match=r"\['content', 'timestamp'\]"):
        Excuse.from_dict(payload)


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"believability_score": 19}, "outside"),
        ({"believability_score": "high"}, "believability_score"),
        ({"timestamp": "yesterday"}, "timestamp"),
        ({"category": "space"}, "category"),
        ({"category": "medical"}, "does not match"),
        ({"language": "xx"}, "language"),
        ({"context": "work"}, "context"),
    ],
)
def test_excuse_from_dict_rejects_invalid_values(changes, message):
    payload = dict(make_excuse("a").to_dict(), **changes)
    with pytest.raises(InvalidInputError, match=message):
        Excuse.from_dict(payload)


def test_context_from_dict_defaults_and_validation():
    context = ExcuseContext.from_dict({"situation": "weather"})
    assert context == ExcuseContext("weather", "medium", "work", "immediate", "professional")
    with pytest.raises(ValueError):
        ExcuseContext.from_dict({"urgency": "high"})
