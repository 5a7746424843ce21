"""Core modules for CommentRadar."""

from .models import *
from .config import settings
from .scoring import *

__all__ = [
    "settings",
    "Emotion",
    "EMOTIONS",
    "Comment",
    "CommentInsight",
    "AnalysisSummary",
    "VideoMeta",
    "SentimentBalance",
    "score_comment",
    "ensure_scores",
    "complete_comment",
    "summarize",
    "dominant_emotion",
    "sentiment_balance",
]
