import random

import pytest

from excuse_engine.apology import apology_template_keys, generate_apology
from excuse_engine.errors import InvalidInputError
from excuse_engine.translations import translate


def test_template_counts_per_length():
    assert apology_template_keys("sincere", "short") == ["sincereShort1", "sincereShort2", "sincereShort3"]
    assert apology_template_keys("guilt-inducing", "medium") == ["guiltMedium1", "guiltMedium2"]
    assert apology_template_keys("formal", "long") == ["formalLong1"]


def test_long_apology_has_single_template(now):
    apology = generate_apology("casual", "long", follow_up=True, rng=random.Random(0), now=now)
    assert apology.content == translate("casualLong1", "en")
    assert apology.follow_up is True
    assert apology.timestamp == now


def test_short_apology_in_spanish():
    apology = generate_apology("formal", "short", language="es", rng=random.Random(2))
    options = {translate(key, "es") for key in apology_template_keys("formal", "short")}
    assert apology.content in options
    assert apology.language == "es"


def test_every_template_has_english_text():
    for tone in ("sincere", "casual", "formal", "guilt-inducing"):
        for length in ("short", "medium", "long"):
            for key in apology_template_keys(tone, length):
                assert translate(key, "en") != key


def test_invalid_tone_and_length():
    with pytest.raises(InvalidInputError):
        generate_apology("sarcastic", "short")
    with pytest.raises(ValueError):
        generate_apology("sincere", "epic")
