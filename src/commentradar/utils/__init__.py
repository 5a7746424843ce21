"""Utility modules for CommentRadar."""

from .data_prep import export_to_json, prepare_export, load_comments_payload
from .display import format_percent, paginate, total_pages, emotion_rows

__all__ = [
    "export_to_json",
    "prepare_export",
    "load_comments_payload",
    "format_percent",
    "paginate",
    "total_pages",
    "emotion_rows",
]
