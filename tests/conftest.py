from datetime import datetime, timedelta

import pytest
import structlog

from excuse_engine.schema import Excuse, ExcuseContext

FIXED_NOW = datetime(2025, 1, 15, 14, 30, 0)


def make_excuse(
    excuse_id: str,
    score: int = 80,
    urgency: str = "medium",
    category: str = "work",
    minutes: int = 0,
    language: str = "en",
    title: str = "Work Emergency",
    content: str = "My laptop crashed",
) -> Excuse:
    return Excuse(
        id=excuse_id,
        title=title,
        content=content,
        category=category,
        believability_score=score,
        context=ExcuseContext(situation=category, urgency=urgency),
        timestamp=FIXED_NOW + timedelta(minutes=minutes),
        language=language,
    )


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture(autouse=True)
def reset_structlog():
    # setup_logging binds structlog to the current sys.stderr, which pytest's
    # capture closes after each test; restore defaults so later tests don't crash.
    yield
    structlog.reset_defaults()
