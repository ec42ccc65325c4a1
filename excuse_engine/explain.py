"""Believability score explanations."""

from __future__ import annotations

import numpy as np

from excuse_engine.schema import ExcuseContext
from excuse_engine.scoring import believability_score

_FACTORS = ("urgency", "audience", "relationship")


def explain_score(context: ExcuseContext) -> dict:
    """Return the score with its adjustments ordered by absolute weight."""

    components = believability_score(context, return_components=True)
    values = np.asarray([components[name] for name in _FACTORS], dtype=float)
    order = np.argsort(-np.abs(values), kind="stable")

    return {
        "score": components["score"],
        "base": components["base"],
        "raw_score": components["raw_score"],
        "clipped": components["clipped"],
        "adjustments": [
            {
                "factor": _FACTORS[i],
                "value": getattr(context, _FACTORS[i]),
                "points": int(values[i]),
            }
            for i in order
        ],
    }
