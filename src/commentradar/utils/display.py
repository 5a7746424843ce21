"""Formatting helpers shared by the dashboard and the CLI."""

import math
from typing import List, Dict, Any, Sequence

from ..core.constants import EmotionConstants, UIConstants
from ..core.models import Emotion, EMOTIONS


def format_percent(value: float) -> int:
    """0.347 -> 35 (halves round up)."""
    return int(math.floor(value * 100 + 0.5))


def excerpt(s: str, n: int = UIConstants.EXCERPT_LENGTH) -> str:
    s = (s or "").strip().replace("\n", " ")
    return s if len(s) <= n else s[:n-1] + "…"


def emotion_label(emotion: Emotion) -> str:
    label, _, emoji = EmotionConstants.DISPLAY[emotion.value]
    return f"{emoji} {label}"


def emotion_rows(scores: Dict[str, float]) -> List[Dict[str, Any]]:
    """One row per emotion, in category order, ready for charting."""
    rows = []
    for emotion in EMOTIONS:
        label, accent, emoji = EmotionConstants.DISPLAY[emotion.value]
        value = max(0.0, scores.get(emotion.value, 0.0))
        rows.append({
            "key": emotion.value,
            "label": label,
            "emoji": emoji,
            "accent": accent,
            "value": value,
            "percent": format_percent(value),
            "show_label": value >= UIConstants.MIN_LABEL_VALUE,
        })
    return rows


def total_pages(count: int, page_size: int = UIConstants.PAGE_SIZE) -> int:
    """Number of pages for the comment list; always at least one."""
    total = min(count, UIConstants.MAX_DISPLAY_COMMENTS)
    return max(1, math.ceil(total / page_size))


def paginate(items: Sequence, page: int, page_size: int = UIConstants.PAGE_SIZE) -> list:
    """Zero-based page slice of ``items``."""
    start = max(0, page) * page_size
    return list(items[start:start + page_size])
