"""CommentRadar - emotion dashboard for YouTube comments."""

__version__ = "1.0.0"
__author__ = "CommentRadar Team"

from .core.models import *
from .core.config import settings
from .core.scoring import score_comment, summarize, dominant_emotion

__all__ = [
    "settings",
    "score_comment",
    "summarize",
    "dominant_emotion",
]
