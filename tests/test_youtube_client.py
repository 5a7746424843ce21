"""Test YouTube client URL handling, comment mapping and error reporting."""

import json

import pytest
from unittest.mock import Mock, patch
import httplib2
from googleapiclient.errors import HttpError
from tenacity import wait_none

from commentradar.core.config import settings
from commentradar.core.exceptions import MissingAPIKeyError, YouTubeAPIError
from commentradar.services.youtube_client import YouTubeService, extract_video_id


def _thread(thread_id, likes, text="hello", author="someone"):
    return {
        "id": thread_id,
        "snippet": {
            "topLevelComment": {
                "id": f"{thread_id}-top",
                "snippet": {
                    "authorDisplayName": author,
                    "textOriginal": text,
                    "likeCount": likes,
                    "publishedAt": "2024-05-01T12:00:00Z",
                },
            }
        },
    }


def _http_error(status, reason=None):
    body = {"error": {"code": status, "message": "failed"}}
    if reason:
        body["error"]["errors"] = [{"reason": reason, "message": "failed"}]
    return HttpError(Mock(status=status, reason="Error"), json.dumps(body).encode("utf-8"))


class TestExtractVideoId:
    """Test video id extraction from the link formats people paste."""

    @pytest.mark.parametrize("raw", [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
        "www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ",
        "youtu.be/dQw4w9WgXcQ?si=abc",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/shorts/dQw4w9WgXcQ",
        "https://m.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "dQw4w9WgXcQ",
    ])
    def test_known_formats(self, raw):
        assert extract_video_id(raw) == "dQw4w9WgXcQ"

    def test_short_link_without_id(self):
        assert extract_video_id("https://youtu.be/") is None

    def test_garbage(self):
        assert extract_video_id("not a url") is None


class TestYouTubeService:
    """Test the Data API wrapper with a mocked client."""

    @pytest.fixture(autouse=True)
    def no_retry_wait(self, monkeypatch):
        monkeypatch.setattr(YouTubeService._execute.retry, "wait", wait_none())

    def setup_method(self):
        self.patcher = patch("commentradar.services.youtube_client.build")
        self.build = self.patcher.start()
        self.youtube = self.build.return_value
        self.service = YouTubeService(api_key="test-key")

    def teardown_method(self):
        self.patcher.stop()

    def test_requires_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "youtube_api_key", "")
        with pytest.raises(MissingAPIKeyError):
            YouTubeService()

    def test_client_built_with_key(self):
        args, kwargs = self.build.call_args
        assert args == ("youtube", "v3")
        assert kwargs["developerKey"] == "test-key"

    def test_top_comments_sorted_by_likes_and_truncated(self):
        items = [_thread(f"t{i}", likes=i % 7) for i in range(40)]
        items.append({"id": "broken", "snippet": {}})
        self.youtube.commentThreads.return_value.list.return_value.execute.return_value = {
            "items": items
        }

        comments = self.service.get_top_comments("dQw4w9WgXcQ")

        assert len(comments) == 30
        likes = [c.likes for c in comments]
        assert likes == sorted(likes, reverse=True)
        assert all(c.id != "broken" for c in comments)
        assert comments[0].published_at == "2024-05-01T12:00:00Z"
        assert comments[0].emotions is None

        _, kwargs = self.youtube.commentThreads.return_value.list.call_args
        assert kwargs["videoId"] == "dQw4w9WgXcQ"
        assert kwargs["maxResults"] == 100
        assert kwargs["order"] == "relevance"
        assert kwargs["textFormat"] == "plainText"

    def test_equal_likes_keep_api_order(self):
        self.youtube.commentThreads.return_value.list.return_value.execute.return_value = {
            "items": [_thread("a", 5), _thread("b", 9), _thread("c", 5)]
        }
        comments = self.service.get_top_comments("dQw4w9WgXcQ")
        assert [c.id for c in comments] == ["b", "a", "c"]

    def test_video_meta(self):
        self.youtube.videos.return_value.list.return_value.execute.return_value = {
            "items": [{"snippet": {"title": "My Video", "channelTitle": "My Channel"}}]
        }
        meta = self.service.get_video_meta("dQw4w9WgXcQ")
        assert meta.title == "My Video"
        assert meta.channel == "My Channel"

    def test_video_meta_placeholders(self):
        self.youtube.videos.return_value.list.return_value.execute.return_value = {"items": []}
        meta = self.service.get_video_meta("dQw4w9WgXcQ")
        assert meta.title == "Title unavailable"
        assert meta.channel == "Channel unavailable"

    @pytest.mark.parametrize("reason, fragment", [
        ("commentsDisabled", "disabled"),
        ("quotaExceeded", "quota"),
        ("forbidden", "forbidden"),
    ])
    def test_friendly_error_messages(self, reason, fragment):
        self.youtube.commentThreads.return_value.list.return_value.execute.side_effect = (
            _http_error(403, reason)
        )
        with pytest.raises(YouTubeAPIError) as exc_info:
            self.service.get_top_comments("dQw4w9WgXcQ")
        assert fragment in str(exc_info.value)
        assert exc_info.value.reason == reason
        assert exc_info.value.status == 403

    def test_unknown_error_reports_status(self):
        self.youtube.videos.return_value.list.return_value.execute.side_effect = (
            _http_error(404, "videoNotFound")
        )
        with pytest.raises(YouTubeAPIError) as exc_info:
            self.service.get_video_meta("dQw4w9WgXcQ")
        assert str(exc_info.value).startswith("YouTube API error: 404")

    def test_server_error_is_retried(self):
        execute = self.youtube.videos.return_value.list.return_value.execute
        execute.side_effect = [
            _http_error(503),
            {"items": [{"snippet": {"title": "Back", "channelTitle": "Up"}}]},
        ]
        meta = self.service.get_video_meta("dQw4w9WgXcQ")
        assert meta.title == "Back"
        assert execute.call_count == 2

    def test_client_error_is_not_retried(self):
        execute = self.youtube.commentThreads.return_value.list.return_value.execute
        execute.side_effect = _http_error(403, "quotaExceeded")
        with pytest.raises(YouTubeAPIError):
            self.service.get_top_comments("dQw4w9WgXcQ")
        assert execute.call_count == 1

    def test_persistent_server_error_gives_up(self):
        execute = self.youtube.commentThreads.return_value.list.return_value.execute
        execute.side_effect = _http_error(500)
        with pytest.raises(YouTubeAPIError) as exc_info:
            self.service.get_top_comments("dQw4w9WgXcQ")
        assert exc_info.value.status == 500
        assert execute.call_count == settings.max_retries

    @pytest.mark.parametrize("error", [
        httplib2.ServerNotFoundError("dns lookup failed"),
        TimeoutError("timed out"),
        ConnectionResetError("reset by peer"),
    ])
    def test_transport_errors_become_api_errors(self, error):
        execute = self.youtube.videos.return_value.list.return_value.execute
        execute.side_effect = error
        with pytest.raises(YouTubeAPIError) as exc_info:
            self.service.get_video_meta("dQw4w9WgXcQ")
        assert "Could not reach the YouTube API" in str(exc_info.value)
        assert execute.call_count == settings.max_retries

    def test_transport_error_then_success(self):
        execute = self.youtube.commentThreads.return_value.list.return_value.execute
        execute.side_effect = [TimeoutError("timed out"), {"items": [_thread("a", 1)]}]
        comments = self.service.get_top_comments("dQw4w9WgXcQ")
        assert [c.id for c in comments] == ["a"]
