"""Fetch-and-analyze pipeline for a single video."""

import logging

from ..core.exceptions import InvalidVideoURLError
from ..core.models import AnalysisSummary
from ..core.scoring import summarize
from .youtube_client import YouTubeService, extract_video_id

logger = logging.getLogger(__name__)


class AnalysisService:
    """Turns a YouTube link into an AnalysisSummary."""

    def __init__(self, youtube: YouTubeService = None):
        self.youtube = youtube or YouTubeService()

    def analyze(self, video_url: str) -> AnalysisSummary:
        url = (video_url or "").strip()
        if not url:
            raise InvalidVideoURLError("Please provide a YouTube video URL.")

        video_id = extract_video_id(url)
        if not video_id:
            raise InvalidVideoURLError(f"Not a valid YouTube URL: {url}")

        logger.info(f"Analyzing video {video_id}")
        meta = self.youtube.get_video_meta(video_id)
        comments = self.youtube.get_top_comments(video_id)

        result = summarize(meta.title, meta.channel, comments)
        logger.info(f"Analyzed {result.total_comments} comments for '{meta.title}'")
        return result
