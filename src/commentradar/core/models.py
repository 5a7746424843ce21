"""Data models for CommentRadar."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any


class Emotion(Enum):
    """The six emotion categories, in display and tie-break order."""
    JOY = "joy"
    SADNESS = "sadness"
    ANGER = "anger"
    SURPRISE = "surprise"
    DISGUST = "disgust"
    FEAR = "fear"


EMOTIONS = tuple(Emotion)

# emotion key ("joy", ...) -> weight
SentimentScores = Dict[str, float]


@dataclass
class Comment:
    """A single top-level YouTube comment, optionally pre-scored."""
    id: str
    author: str
    text: str
    likes: int = 0
    published_at: str = ""
    emotions: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Comment":
        """Build a comment from the comments endpoint JSON shape."""
        try:
            likes = int(data.get("likes") or 0)
        except (TypeError, ValueError):
            likes = 0
        return cls(
            id=str(data.get("id", "")),
            author=data.get("author") or "",
            text=data.get("text") or "",
            likes=max(0, likes),
            published_at=data.get("publishedAt") or data.get("published_at") or "",
            emotions=data.get("emotions"),
        )


@dataclass
class CommentInsight:
    """A comment whose emotion scores are complete and normalized."""
    id: str
    author: str
    text: str
    likes: int
    published_at: str
    emotions: SentimentScores

    @property
    def dominant_emotion(self) -> Emotion:
        from .scoring import dominant_emotion
        return dominant_emotion(self.emotions)


@dataclass
class AnalysisSummary:
    """Video-level result of analyzing a batch of comments."""
    video_title: str
    channel_name: str
    summary: SentimentScores
    total_comments: int
    top_comments: List[CommentInsight] = field(default_factory=list)


@dataclass
class VideoMeta:
    """Title and channel of a video."""
    video_id: str
    title: str
    channel: str


@dataclass
class SentimentBalance:
    """Coarse positive / neutral / negative split of a distribution."""
    positive: float
    neutral: float
    negative: float
