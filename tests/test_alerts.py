import pytest

from excuse_engine.alerts import alert_counts, create_alert
from excuse_engine.errors import InvalidInputError


def test_create_alert(now):
    alert = create_alert("call", " Mom ", "Come home now", scheduled_time=now)
    assert alert.type == "call"
    assert alert.sender == "Mom"
    assert alert.is_active is True
    assert alert.scheduled_time == now


def test_create_alert_rejects_unknown_type():
    with pytest.raises(InvalidInputError):
        create_alert("pager", "Boss", "Call me")


def test_alert_counts_zero_filled():
    alerts = [create_alert("text", "A", "x"), create_alert("text", "B", "y"), create_alert("email", "C", "z")]
    assert alert_counts(alerts) == {"call": 0, "text": 2, "email": 1}
    assert alert_counts([]) == {"call": 0, "text": 0, "email": 0}
