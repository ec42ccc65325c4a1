"""Core data schema for excuses, proofs, apologies and alerts."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Optional

from excuse_engine.errors import InvalidInputError, require_choice

CATEGORIES = (
    "medical",
    "family",
    "work",
    "transport",
    "technology",
    "weather",
    "emergency",
    "personal",
)
URGENCIES = ("low", "medium", "high", "critical")
AUDIENCES = ("family", "work", "friends", "romantic", "authority")
RELATIONSHIPS = ("close", "professional", "casual", "distant")
TIMEFRAMES = ("immediate", "today", "tomorrow", "this_week")

PROOF_TYPES = ("document", "email", "photo", "screenshot", "receipt", "message")
APOLOGY_TONES = ("sincere", "casual", "formal", "guilt-inducing")
APOLOGY_LENGTHS = ("short", "medium", "long")
ALERT_TYPES = ("call", "text", "email")
THEMES = ("dark", "light")

MIN_SCORE = 20
MAX_SCORE = 95

_EXCUSE_REQUIRED = ("id", "content", "category", "believability_score", "context", "timestamp")

CONTENT_LANGUAGES = ("en", "es", "fr", "hi")
SUPPORTED_LANGUAGES = (
    "en", "es", "fr", "hi", "ml", "te", "ta", "de",
    "it", "pt", "ru", "ja", "ko", "zh", "ar",
)


@dataclass
class ExcuseContext:
    """Situation an excuse is generated for."""

    situation: str
    urgency: str = "medium"
    audience: str = "work"
    timeframe: str = "immediate"
    relationship: str = "professional"

    @classmethod
    def from_dict(cls, data: dict) -> "ExcuseContext":
        return cls(
            situation=require_choice(data.get("situation"), CATEGORIES, "situation"),
            urgency=require_choice(data.get("urgency", "medium"), URGENCIES, "urgency"),
            audience=require_choice(data.get("audience", "work"), AUDIENCES, "audience"),
            timeframe=require_choice(data.get("timeframe", "immediate"), TIMEFRAMES, "timeframe"),
            relationship=require_choice(
                data.get("relationship", "professional"), RELATIONSHIPS, "relationship"
            ),
        )


@dataclass
class Excuse:
    """Generated excuse record."""

    id: str
    title: str
    content: str
    category: str
    believability_score: int
    context: ExcuseContext
    timestamp: datetime
    language: str = "en"

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["timestamp"] = self.timestamp.isoformat()
        return payload

    @classmethod
    def from_dict(cls, data: dict) -> "Excuse":
        """Build a validated excuse from :meth:`to_dict` output.

        ``title`` and ``language`` are optional. Raises ``InvalidInputError``
        for missing fields, out-of-range scores, unknown enumerations, or a
        category that disagrees with ``context.situation``.
        """
        missing = sorted(key for key in _EXCUSE_REQUIRED if data.get(key) in (None, ""))
        if missing:
            raise InvalidInputError(f"missing required fields {missing}", details={"fields": missing})

        try:
            timestamp = datetime.fromisoformat(str(data["timestamp"]))
        except ValueError as exc:
            raise InvalidInputError("malformed timestamp", details={"field": "timestamp"}) from exc

        try:
            score = int(data["believability_score"])
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(
                "invalid believability_score", details={"field": "believability_score"}
            ) from exc
        if not MIN_SCORE <= score <= MAX_SCORE:
            raise InvalidInputError(
                f"believability_score {score} outside [{MIN_SCORE}, {MAX_SCORE}]",
                details={"field": "believability_score"},
            )

        if not isinstance(data["context"], dict):
            raise InvalidInputError("context must be an object", details={"field": "context"})
        context = ExcuseContext.from_dict(data["context"])
        category = require_choice(data["category"], CATEGORIES, "category")
        if category != context.situation:
            raise InvalidInputError(
                f"category '{category}' does not match situation '{context.situation}'",
                details={"field": "category"},
            )

        return cls(
            id=str(data["id"]).strip(),
            title=str(data.get("title") or "").strip(),
            content=str(data["content"]),
            category=category,
            believability_score=score,
            context=context,
            timestamp=timestamp,
            language=require_choice(data.get("language") or "en", SUPPORTED_LANGUAGES, "language"),
        )


@dataclass
class Proof:
    """Fabricated supporting artifact. Optional fields depend on ``type``."""

    type: str
    content: str
    description: str
    filename: str
    full_content: Optional[str] = None
    sender: Optional[str] = None
    subject: Optional[str] = None
    document_title: Optional[str] = None
    document_id: Optional[str] = None
    authority: Optional[str] = None
    photo_details: Optional[str] = None
    preview_content: Optional[str] = None


@dataclass
class Apology:
    id: str
    content: str
    tone: str
    length: str
    follow_up: bool
    timestamp: datetime
    language: str = "en"


@dataclass
class EmergencyAlert:
    id: str
    type: str
    sender: str
    content: str
    scheduled_time: Optional[datetime] = None
    is_active: bool = True


@dataclass
class UserPreferences:
    """User-level defaults applied to generation."""

    default_language: str = "en"
    preferred_categories: list[str] = field(default_factory=lambda: ["work", "transport", "medical"])
    voice_enabled: bool = False
    auto_proof_generation: bool = True
    emergency_contacts_enabled: bool = False
    theme: str = "dark"
