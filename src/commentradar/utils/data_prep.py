"""Data preparation for export."""

import json
from typing import Dict, Any, List

from ..core.constants import FileConstants
from ..core.models import AnalysisSummary, Comment, CommentInsight


def _comment_to_dict(comment: CommentInsight) -> Dict[str, Any]:
    return {
        "id": comment.id,
        "author": comment.author,
        "text": comment.text,
        "likes": comment.likes,
        "publishedAt": comment.published_at,
        "emotions": dict(comment.emotions),
        "dominantEmotion": comment.dominant_emotion.value,
    }


def prepare_export(summary: AnalysisSummary) -> Dict[str, Any]:
    """Prepare an analysis summary for JSON export."""
    return {
        "videoTitle": summary.video_title,
        "channelName": summary.channel_name,
        "summary": dict(summary.summary),
        "totalComments": summary.total_comments,
        "topComments": [_comment_to_dict(c) for c in summary.top_comments],
        "metadata": {
            "export_timestamp": None,  # Will be set by caller
            "version": FileConstants.EXPORT_VERSION
        }
    }


def load_comments_payload(data: Dict[str, Any]) -> tuple:
    """
    Read a comments endpoint payload.

    Returns (video_title, channel_title, comments).
    """
    if not isinstance(data, dict):
        raise ValueError("Comments payload must be a JSON object")
    comments: List[Comment] = [
        Comment.from_dict(c) for c in data.get("comments") or [] if isinstance(c, dict)
    ]
    return (
        data.get("videoTitle", ""),
        data.get("channelTitle") or data.get("channelName", ""),
        comments,
    )


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    import datetime

    # Add timestamp
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
