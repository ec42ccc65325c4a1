"""Scheduled fake emergency alerts."""

from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Optional
import uuid

from excuse_engine.errors import require_choice
from excuse_engine.schema import ALERT_TYPES, EmergencyAlert


def create_alert(
    alert_type: str,
    sender: str,
    content: str,
    scheduled_time: Optional[datetime] = None,
) -> EmergencyAlert:
    """Build an active alert of type call, text or email."""

    return EmergencyAlert(
        id=uuid.uuid4().hex,
        type=require_choice(alert_type, ALERT_TYPES, "alert type"),
        sender=sender.strip(),
        content=content.strip(),
        scheduled_time=scheduled_time,
        is_active=True,
    )


def alert_counts(alerts: list[EmergencyAlert]) -> dict[str, int]:
    counts = Counter(alert.type for alert in alerts)
    return {alert_type: counts.get(alert_type, 0) for alert_type in ALERT_TYPES}
