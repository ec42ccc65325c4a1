"""Collection-level excuse metrics."""

from __future__ import annotations

from collections import Counter

import numpy as np

from excuse_engine.schema import Excuse
from excuse_engine.scoring import MAX_SCORE, MIN_SCORE


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


def compute_metrics(excuses: list[Excuse]) -> dict:
    """Compute count, average believability and category/language breakdowns."""

    if not excuses:
        return {
            "total": 0,
            "avg_believability": 0,
            "categories": 0,
            "by_category": {},
            "by_language": {},
            "recent_ids": [],
        }

    scores = np.asarray([excuse.believability_score for excuse in excuses], dtype=float)
    by_category = Counter(excuse.category for excuse in excuses)
    by_language = Counter(excuse.language for excuse in excuses)
    recent = sorted(excuses, key=lambda e: e.timestamp, reverse=True)[:3]

    return {
        "total": len(excuses),
        "avg_believability": _round_half_up(float(np.mean(scores))),
        "categories": len(by_category),
        "by_category": dict(by_category),
        "by_language": dict(by_language),
        "recent_ids": [excuse.id for excuse in recent],
    }


def score_distribution(excuses: list[Excuse], bins: int = 5) -> list[dict]:
    """Histogram of believability scores over the valid score range."""

    if bins <= 0:
        raise ValueError("bins must be > 0")
    scores = np.asarray([excuse.believability_score for excuse in excuses], dtype=float)
    counts, edges = np.histogram(scores, bins=bins, range=(MIN_SCORE, MAX_SCORE))
    return [
        {"low": float(edges[i]), "high": float(edges[i + 1]), "count": int(counts[i])}
        for i in range(bins)
    ]
