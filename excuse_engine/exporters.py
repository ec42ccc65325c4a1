"""Plain-text documents and share payloads for generated items."""

from __future__ import annotations

import base64
from datetime import datetime
import json
from typing import Optional
from urllib.parse import quote

from excuse_engine.schema import Apology, Excuse
from excuse_engine.translations import translate

BRAND = "ExcuseAI"
SHARE_PATH = "/shared-excuse/"


def _stamp(now: datetime) -> str:
    return now.strftime("%m/%d/%Y, %I:%M:%S %p")


def render_excuse_document(excuse: Excuse, now: Optional[datetime] = None) -> str:
    """Render the downloadable text document for an excuse."""

    lang = excuse.language
    now = now or datetime.now()
    lines = [
        translate("excuseDocument", lang),
        "",
        f"{translate('believabilityScore', lang)}: {excuse.believability_score}%",
        f"{translate('category', lang)}: {translate(excuse.category, lang)}",
        f"{translate('urgency', lang)}: {translate(excuse.context.urgency, lang)}",
        f"{translate('audience', lang)}: {translate(excuse.context.audience, lang)}",
        f"{translate('generated', lang)}: {_stamp(now)}",
        "",
        "---",
        "",
        excuse.title,
        "",
        excuse.content,
        "",
        "---",
        f"{translate('generatedBy', lang)} {BRAND}",
        translate("forPersonalUse", lang),
    ]
    return "\n".join(lines)


def render_apology_document(apology: Apology, now: Optional[datetime] = None) -> str:
    """Render the downloadable apology letter."""

    lang = apology.language
    now = now or datetime.now()
    lines = [
        translate("apologyLetter", lang),
        "",
        f"{translate('tone', lang)}: {translate(apology.tone, lang)}",
        f"{translate('length', lang)}: {translate(apology.length, lang)}",
        f"{translate('generated', lang)}: {_stamp(now)}",
        "",
        "---",
        "",
        apology.content,
    ]
    if apology.follow_up:
        lines += [
            "",
            f"--- {translate('followUpReminder', lang)} ---",
            translate("considerFollowUp", lang),
        ]
    lines += [
        "",
        "---",
        f"{translate('generatedBy', lang)} {BRAND} - {translate('apologyGenerator', lang)}",
        translate("forPersonalUse", lang),
    ]
    return "\n".join(lines)


def download_filename(kind: str, label: str, now: Optional[datetime] = None) -> str:
    """Return ``<kind>_<label>_<epoch ms>.txt``."""

    now = now or datetime.now()
    return f"{kind}_{label}_{int(now.timestamp() * 1000)}.txt"


def share_text(excuse: Excuse) -> str:
    lang = excuse.language
    return (
        f'{translate("checkOutExcuse", lang)}: "{excuse.content}" - '
        f"{translate('believabilityScore', lang)}: {excuse.believability_score}%"
    )


def share_link(excuse: Excuse, base_url: str) -> str:
    """Encode title, content and score into a shareable URL."""

    payload = {"title": excuse.title, "content": excuse.content, "score": excuse.believability_score}
    encoded = base64.urlsafe_b64encode(json.dumps(payload, ensure_ascii=False).encode("utf-8")).decode("ascii")
    return f"{base_url.rstrip('/')}{SHARE_PATH}{encoded}"


def decode_share_link(link: str) -> dict:
    """Inverse of :func:`share_link`; raises ``ValueError`` on a foreign link."""

    if SHARE_PATH not in link:
        raise ValueError("Not a shared excuse link")
    encoded = link.rsplit(SHARE_PATH, maxsplit=1)[1]
    try:
        return json.loads(base64.urlsafe_b64decode(encoded.encode("ascii")).decode("utf-8"))
    except ValueError as exc:
        raise ValueError("Malformed shared excuse payload") from exc


def share_urls(excuse: Excuse, base_url: str) -> dict[str, str]:
    """Per-platform share intents for an excuse."""

    text = share_text(excuse)
    link = share_link(excuse, base_url)
    return {
        "whatsapp": f"https://wa.me/?text={quote(text + chr(10) + chr(10) + link, safe='')}",
        "twitter": f"https://twitter.com/intent/tweet?text={quote(text, safe='')}&url={quote(link, safe='')}",
        "facebook": f"https://www.facebook.com/sharer/sharer.php?u={quote(link, safe='')}&quote={quote(text, safe='')}",
        "linkedin": f"https://www.linkedin.com/sharing/share-offsite/?url={quote(link, safe='')}",
        "copy": link,
    }
