"""YouTube data collection service for CommentRadar."""

import json
import logging
import re
from typing import List, Dict, Any, Optional
from urllib.parse import urlparse, parse_qs

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from ..core.config import settings
from ..core.constants import YouTubeConstants
from ..core.exceptions import MissingAPIKeyError, YouTubeAPIError
from ..core.models import Comment, VideoMeta

logger = logging.getLogger(__name__)

_VIDEO_ID_RE = re.compile(YouTubeConstants.VIDEO_ID_PATTERN)


def extract_video_id(raw: str) -> Optional[str]:
    """
    Resolve a YouTube URL (or bare id) to its video id.

    Handles watch?v=, youtu.be/, /embed/ and /shorts/ links. Anything else
    falls back to the first 11-character id-like run in the input.
    """
    normalized = raw if raw.startswith("http") else f"https://{raw}"

    try:
        parsed = urlparse(normalized)
        segments = [s for s in parsed.path.split("/") if s]
        hostname = parsed.hostname or ""

        if "youtu.be" in hostname:
            return segments[0] if segments else None

        v = parse_qs(parsed.query).get("v")
        if v and v[0]:
            return v[0]

        if len(segments) > 1 and segments[0] in ("embed", "shorts"):
            return segments[1]
    except ValueError as e:
        logger.warning(f"URL parse error for '{raw}': {e}")

    match = _VIDEO_ID_RE.search(raw)
    return match.group(1) if match else None


def _error_reason(error: HttpError) -> Optional[str]:
    """First machine-readable reason from an API error body."""
    try:
        data = json.loads(error.content.decode("utf-8"))
        return data["error"]["errors"][0]["reason"]
    except (ValueError, KeyError, IndexError, TypeError, AttributeError):
        return None


def _to_api_error(error: HttpError) -> YouTubeAPIError:
    reason = _error_reason(error)
    status = getattr(error.resp, "status", None)
    message = YouTubeConstants.ERROR_MESSAGES.get(reason)
    if message is None:
        body = error.content.decode("utf-8", errors="replace") if error.content else ""
        message = f"YouTube API error: {status} {body}".strip()
    return YouTubeAPIError(message, reason=reason, status=status)


def _is_transient(exc: BaseException) -> bool:
    """Server-side and transport failures are worth another attempt."""
    if isinstance(exc, (httplib2.HttpLib2Error, OSError)):
        return True
    if not isinstance(exc, HttpError):
        return False
    try:
        return int(exc.resp.status) >= 500
    except (TypeError, ValueError, AttributeError):
        return False


class YouTubeService:
    """YouTube data collection service using YouTube Data API v3."""

    def __init__(self, api_key: str = None):
        self.api_key = api_key or settings.youtube_api_key
        if not self.api_key:
            raise MissingAPIKeyError("YOUTUBE_API_KEY is not configured.")
        self.youtube = build(
            YouTubeConstants.API_SERVICE_NAME,
            YouTubeConstants.API_VERSION,
            developerKey=self.api_key,
            cache_discovery=False,
        )
        logger.info("YouTube client initialized successfully")

    @retry(
        retry=retry_if_exception(_is_transient),
        stop=stop_after_attempt(settings.max_retries),
        wait=wait_exponential(multiplier=settings.retry_delay, max=settings.retry_backoff * 10),
        reraise=True,
    )
    def _execute(self, request) -> Dict[str, Any]:
        return request.execute()

    def _fetch(self, request, what: str) -> Dict[str, Any]:
        """Run a request, turning API and transport failures into YouTubeAPIError."""
        try:
            return self._execute(request)
        except HttpError as e:
            logger.error(f"YouTube {what} fetch failed: {e}")
            raise _to_api_error(e) from e
        except (httplib2.HttpLib2Error, OSError) as e:
            logger.error(f"YouTube {what} fetch failed: {e}")
            raise YouTubeAPIError(f"Could not reach the YouTube API: {e}") from e

    def get_video_meta(self, video_id: str) -> VideoMeta:
        """Fetch title and channel name for a video."""
        request = self.youtube.videos().list(part="snippet", id=video_id)
        response = self._fetch(request, f"videos for {video_id}")

        items = response.get("items") or [{}]
        snippet = items[0].get("snippet") or {}
        return VideoMeta(
            video_id=video_id,
            title=snippet.get("title") or YouTubeConstants.TITLE_PLACEHOLDER,
            channel=snippet.get("channelTitle") or YouTubeConstants.CHANNEL_PLACEHOLDER,
        )

    def get_top_comments(self, video_id: str, limit: int = None) -> List[Comment]:
        """
        Get the most-liked top-level comments for a video.

        One page of comment threads is requested in relevance order, then
        sorted by like count and truncated to ``limit``.

        Args:
            video_id: YouTube video id
            limit: Number of comments to keep (settings.top_comment_limit by default)

        Returns:
            List of Comment objects, most liked first
        """
        limit = settings.top_comment_limit if limit is None else limit
        request = self.youtube.commentThreads().list(
            part="snippet",
            videoId=video_id,
            maxResults=settings.max_fetch_comments,
            order="relevance",
            textFormat="plainText",
        )
        response = self._fetch(request, f"comments for {video_id}")

        comments = []
        for item in response.get("items", []):
            top = ((item.get("snippet") or {}).get("topLevelComment") or {}).get("snippet")
            if not top:
                continue
            comments.append(Comment(
                id=item["id"],
                author=top.get("authorDisplayName", ""),
                text=top.get("textOriginal", ""),
                likes=top.get("likeCount") or 0,
                published_at=top.get("publishedAt", ""),
            ))

        comments.sort(key=lambda c: c.likes, reverse=True)
        logger.info(f"Retrieved {len(comments)} comments for video {video_id}")
        return comments[:limit]
