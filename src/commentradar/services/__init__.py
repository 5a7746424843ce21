"""Services for CommentRadar."""

from .youtube_client import YouTubeService, extract_video_id
from .analysis_service import AnalysisService

__all__ = [
    "YouTubeService",
    "AnalysisService",
    "extract_video_id",
]
