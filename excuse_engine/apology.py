"""Apology generation from translated tone/length templates."""

from __future__ import annotations

from datetime import datetime
import random
from typing import Optional
import uuid

import structlog

from excuse_engine.errors import require_choice
from excuse_engine.schema import APOLOGY_LENGTHS, APOLOGY_TONES, Apology
from excuse_engine.translations import translate

logger = structlog.get_logger(__name__)

_TONE_PREFIX = {
    "sincere": "sincere",
    "casual": "casual",
    "formal": "formal",
    "guilt-inducing": "guilt",
}
_LENGTH_COUNT = {"short": 3, "medium": 2, "long": 1}


def apology_template_keys(tone: str, length: str) -> list[str]:
    prefix = _TONE_PREFIX[tone]
    suffix = length.capitalize()
    return [f"{prefix}{suffix}{index}" for index in range(1, _LENGTH_COUNT[length] + 1)]


def generate_apology(
    tone: str,
    length: str,
    follow_up: bool = False,
    language: str = "en",
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> Apology:
    """Pick one apology template for tone and length in ``language``."""

    tone = require_choice(tone, APOLOGY_TONES, "tone")
    length = require_choice(length, APOLOGY_LENGTHS, "length")
    rng = rng or random.Random()

    key = rng.choice(apology_template_keys(tone, length))
    apology = Apology(
        id=uuid.uuid4().hex,
        content=translate(key, language),
        tone=tone,
        length=length,
        follow_up=follow_up,
        timestamp=now or datetime.now(),
        language=language,
    )
    logger.debug("apology.generated", apology_id=apology.id, tone=tone, length=length, template=key)
    return apology
