"""Template-based excuse generation."""

from __future__ import annotations

from datetime import datetime
import random
from typing import Optional
import uuid

import structlog

from excuse_engine.errors import InvalidInputError
from excuse_engine.schema import Excuse, ExcuseContext
from excuse_engine.scoring import believability_score, rank_excuses
from excuse_engine.templates import EXCUSE_TEMPLATES, excuse_templates, excuse_title
from excuse_engine.translations import translate

logger = structlog.get_logger(__name__)


def enhance_excuse(text: str, context: ExcuseContext, language: str) -> str:
    """Wrap a base excuse with urgency and relationship phrases."""

    enhanced = text
    if context.urgency == "critical":
        enhanced = (
            f"{translate('urgent', language)}: {enhanced}. "
            f"{translate('requiresImmediateAttention', language)}."
        )
    elif context.urgency == "high":
        enhanced = f"{enhanced}. {translate('quiteSerious', language)}."

    if context.relationship == "professional":
        enhanced = f"{enhanced} {translate('sincerelyApologize', language)}."
    elif context.relationship == "close":
        enhanced = f"{enhanced} {translate('reallySorry', language)}."

    return enhanced


def generate_excuse(
    context: ExcuseContext,
    language: str = "en",
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> Excuse:
    """Pick a template for the context and turn it into a scored excuse."""

    rng = rng or random.Random()
    category = context.situation
    if category not in EXCUSE_TEMPLATES:
        logger.warning("excuse.unknown_category", category=category, fallback="personal")

    base = rng.choice(excuse_templates(category, language))
    excuse = Excuse(
        id=uuid.uuid4().hex,
        title=excuse_title(category, language),
        content=enhance_excuse(base, context, language),
        category=category,
        believability_score=believability_score(context),
        context=context,
        timestamp=now or datetime.now(),
        language=language,
    )
    logger.debug(
        "excuse.generated",
        excuse_id=excuse.id,
        category=category,
        language=language,
        score=excuse.believability_score,
    )
    return excuse


def generate_batch(
    context: ExcuseContext,
    count: int,
    language: str = "en",
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> list[Excuse]:
    """Generate ``count`` excuses for one context, best ranked first."""

    if count <= 0:
        raise InvalidInputError("count must be > 0", details={"field": "count", "value": count})

    rng = rng or random.Random()
    excuses = [generate_excuse(context, language, rng=rng, now=now) for _ in range(count)]
    return rank_excuses(excuses)
