"""Test the fetch-and-analyze pipeline with a stubbed YouTube service."""

import pytest
from unittest.mock import Mock

from commentradar.core.exceptions import InvalidVideoURLError, YouTubeAPIError
from commentradar.core.models import Comment, Emotion, VideoMeta
from commentradar.services.analysis_service import AnalysisService


@pytest.fixture
def youtube():
    service = Mock()
    service.get_video_meta.return_value = VideoMeta(
        video_id="dQw4w9WgXcQ", title="Never Gonna", channel="Rick"
    )
    service.get_top_comments.return_value = [
        Comment(id="1", author="a", text="최고 ㅋㅋ", likes=10),
        Comment(id="2", author="b", text="대박!!", likes=5),
        Comment(id="3", author="c", text="좀 별로", likes=1),
    ]
    return service


def test_analyze_summarizes_fetched_comments(youtube):
    result = AnalysisService(youtube=youtube).analyze("  https://youtu.be/dQw4w9WgXcQ  ")

    youtube.get_video_meta.assert_called_once_with("dQw4w9WgXcQ")
    youtube.get_top_comments.assert_called_once_with("dQw4w9WgXcQ")
    assert result.video_title == "Never Gonna"
    assert result.channel_name == "Rick"
    assert result.total_comments == 3
    assert [c.id for c in result.top_comments] == ["1", "2", "3"]
    assert result.top_comments[0].dominant_emotion == Emotion.JOY
    assert result.top_comments[2].dominant_emotion == Emotion.DISGUST
    assert sum(result.summary.values()) == pytest.approx(1.0)


@pytest.mark.parametrize("url", ["", "   ", "not a url", "https://youtu.be/"])
def test_invalid_urls_are_rejected(youtube, url):
    with pytest.raises(InvalidVideoURLError):
        AnalysisService(youtube=youtube).analyze(url)
    youtube.get_top_comments.assert_not_called()


def test_api_errors_propagate(youtube):
    youtube.get_top_comments.side_effect = YouTubeAPIError("quota", reason="quotaExceeded")
    with pytest.raises(YouTubeAPIError):
        AnalysisService(youtube=youtube).analyze("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
