"""In-memory application state for generated and saved items."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
import random
from typing import Optional

import structlog

from excuse_engine.errors import InvalidInputError, require_choice
from excuse_engine.generator import generate_excuse
from excuse_engine.proof import generate_proof
from excuse_engine.schema import (
    CATEGORIES,
    SUPPORTED_LANGUAGES,
    THEMES,
    Apology,
    EmergencyAlert,
    Excuse,
    ExcuseContext,
    Proof,
    UserPreferences,
)

logger = structlog.get_logger(__name__)

SORT_KEYS = ("timestamp", "believability", "category")
_PREFERENCE_KEYS = {f.name for f in fields(UserPreferences)}


@dataclass
class AppState:
    """Lists are kept newest first."""

    excuses: list[Excuse] = field(default_factory=list)
    saved_excuses: list[Excuse] = field(default_factory=list)
    emergency_alerts: list[EmergencyAlert] = field(default_factory=list)
    apologies: list[Apology] = field(default_factory=list)
    preferences: UserPreferences = field(default_factory=UserPreferences)


def _validate_preferences(changes: dict) -> dict:
    unknown = sorted(set(changes) - _PREFERENCE_KEYS)
    if unknown:
        raise InvalidInputError(f"Unknown preference keys {unknown}", details={"keys": unknown})

    validated = dict(changes)
    if "default_language" in validated:
        validated["default_language"] = require_choice(
            validated["default_language"], SUPPORTED_LANGUAGES, "default_language"
        )
    if "theme" in validated:
        validated["theme"] = require_choice(validated["theme"], THEMES, "theme")
    if "preferred_categories" in validated:
        validated["preferred_categories"] = [
            require_choice(category, CATEGORIES, "preferred category")
            for category in validated["preferred_categories"]
        ]
    for key in ("voice_enabled", "auto_proof_generation", "emergency_contacts_enabled"):
        if key in validated and not isinstance(validated[key], bool):
            raise InvalidInputError(f"{key} must be a boolean", details={"field": key})
    return validated


class AppStore:
    """Process-lifetime store for excuses, alerts, apologies and preferences."""

    def __init__(self, preferences: Optional[UserPreferences] = None) -> None:
        self.state = AppState(preferences=preferences or UserPreferences())

    @property
    def preferences(self) -> UserPreferences:
        return self.state.preferences

    def add_excuse(self, excuse: Excuse) -> None:
        self.state.excuses.insert(0, excuse)

    def save_excuse(self, excuse: Excuse) -> bool:
        """Save once per id. Returns False when it was already saved."""

        if any(saved.id == excuse.id for saved in self.state.saved_excuses):
            return False
        self.state.saved_excuses.insert(0, excuse)
        return True

    def remove_excuse(self, excuse_id: str) -> None:
        self.state.saved_excuses = [e for e in self.state.saved_excuses if e.id != excuse_id]

    def add_emergency_alert(self, alert: EmergencyAlert) -> None:
        self.state.emergency_alerts.insert(0, alert)

    def add_apology(self, apology: Apology) -> None:
        self.state.apologies.insert(0, apology)

    def update_preferences(self, **changes) -> UserPreferences:
        validated = _validate_preferences(changes)
        self.state.preferences = replace(self.state.preferences, **validated)
        logger.info("preferences.updated", keys=sorted(validated))
        return self.state.preferences

    def clear_all(self) -> None:
        """Drop every generated item but keep preferences."""

        self.state = AppState(preferences=self.state.preferences)
        logger.info("store.cleared")

    def search_saved(self, term: str = "", category: str = "all", sort_by: str = "timestamp") -> list[Excuse]:
        """Filter saved excuses by text and category, then sort."""

        sort_by = require_choice(sort_by, SORT_KEYS, "sort_by")
        needle = term.lower()
        matches = [
            excuse
            for excuse in self.state.saved_excuses
            if (needle in excuse.title.lower() or needle in excuse.content.lower())
            and (category == "all" or excuse.category == category)
        ]

        if sort_by == "believability":
            return sorted(matches, key=lambda e: e.believability_score, reverse=True)
        if sort_by == "category":
            return sorted(matches, key=lambda e: e.category)
        return sorted(matches, key=lambda e: e.timestamp, reverse=True)

    def generate(
        self,
        context: ExcuseContext,
        language: Optional[str] = None,
        rng: Optional[random.Random] = None,
        now: Optional[datetime] = None,
    ) -> tuple[Excuse, Optional[Proof]]:
        """Generate, record and optionally attach a proof per preferences."""

        rng = rng or random.Random()
        excuse = generate_excuse(context, language or self.preferences.default_language, rng=rng, now=now)
        self.add_excuse(excuse)

        proof = None
        if self.preferences.auto_proof_generation:
            proof = generate_proof(excuse.category, excuse.content, rng=rng, now=now)
        return excuse, proof
