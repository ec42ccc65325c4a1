"""Fixed-offset believability scoring and excuse ranking."""

from __future__ import annotations

from excuse_engine.schema import MAX_SCORE, MIN_SCORE, Excuse, ExcuseContext

BASE_SCORE = 70

URGENCY_POINTS = {"critical": 20, "high": 10, "medium": 5, "low": -5}
AUDIENCE_POINTS = {"authority": 15, "work": 10, "family": 5, "friends": -5, "romantic": -10}
RELATIONSHIP_POINTS = {"distant": 15, "professional": 10, "casual": 5, "close": -5}

_URGENCY_ORDER = {"critical": 4, "high": 3, "medium": 2, "low": 1}


def believability_score(context: ExcuseContext, return_components: bool = False):
    """Compute a bounded believability score between 20 and 95.

    Timeframe is part of the context but does not move the score. Unknown
    enumeration values contribute nothing.
    """

    urgency = URGENCY_POINTS.get(context.urgency, 0)
    audience = AUDIENCE_POINTS.get(context.audience, 0)
    relationship = RELATIONSHIP_POINTS.get(context.relationship, 0)

    raw = BASE_SCORE + urgency + audience + relationship
    bounded = max(MIN_SCORE, min(MAX_SCORE, raw))

    if return_components:
        return {
            "score": bounded,
            "raw_score": raw,
            "base": BASE_SCORE,
            "urgency": urgency,
            "audience": audience,
            "relationship": relationship,
            "clipped": bounded != raw,
        }

    return bounded


def _rank_key(excuse: Excuse) -> tuple:
    urgency = _URGENCY_ORDER.get(excuse.context.urgency, 0)
    return (-excuse.believability_score, -urgency, -excuse.timestamp.timestamp())


def rank_excuses(excuses: list[Excuse]) -> list[Excuse]:
    """Order by score, then urgency, then newest first."""

    return sorted(excuses, key=_rank_key)
