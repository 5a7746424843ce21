"""Scoring and aggregation of comment emotions."""

import logging
import math
import re
from collections.abc import Mapping
from typing import Dict, Any, Iterable

from .models import (
    Emotion, EMOTIONS, SentimentScores, Comment, CommentInsight,
    AnalysisSummary, SentimentBalance,
)
from .constants import ScoringWeights, DEFAULT_WEIGHTS, EmotionConstants, UIConstants

logger = logging.getLogger(__name__)

_PUNCTUATION_RE = re.compile(EmotionConstants.REPEATED_PUNCTUATION)
_LAUGHTER_RE = re.compile(EmotionConstants.LAUGHTER_RUN)
_SHOCK_RE = re.compile(EmotionConstants.SHOCK_RUN)
_CRYING_RE = re.compile(EmotionConstants.CRYING_RUN)


def _uniform() -> SentimentScores:
    even = 1.0 / len(EMOTIONS)
    return {e.value: even for e in EMOTIONS}


def normalize_scores(values: Dict[str, float]) -> SentimentScores:
    """Scale six non-negative weights to sum to 1; all-zero becomes uniform."""
    total = sum(values.get(e.value, 0.0) for e in EMOTIONS)
    if total == 0:
        return _uniform()
    return {e.value: values.get(e.value, 0.0) / total for e in EMOTIONS}


def score_comment(text: str, weights: ScoringWeights = DEFAULT_WEIGHTS) -> SentimentScores:
    """
    Score a comment's text over the six emotions using keyword heuristics.

    Every emotion starts at the baseline weight. Each distinct lexicon entry
    found as a substring adds the keyword weight to its emotion, and the
    punctuation / jamo-run heuristics add their own bonuses independently.
    The result is normalized so it always sums to 1.

    Args:
        text: Raw comment text, possibly empty
        weights: Tuning constants, the product defaults unless overridden

    Returns:
        Mapping of emotion key to probability-like score
    """
    normalized = (text or "").lower()
    scores = {e.value: weights.baseline for e in EMOTIONS}

    for emotion in EMOTIONS:
        for keyword in EmotionConstants.LEXICON[emotion.value]:
            if keyword in normalized:
                scores[emotion.value] += weights.keyword

    if _PUNCTUATION_RE.search(normalized):
        scores[Emotion.SURPRISE.value] += weights.punctuation_surprise
    if _LAUGHTER_RE.search(normalized):
        scores[Emotion.JOY.value] += weights.laughter_joy
    if _SHOCK_RE.search(normalized):
        scores[Emotion.SURPRISE.value] += weights.shock_surprise
    if _CRYING_RE.search(normalized):
        scores[Emotion.SADNESS.value] += weights.crying_sadness

    return normalize_scores(scores)


def _clean_value(value: Any) -> float:
    """Finite non-negative numbers pass through, anything else is 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    value = float(value)
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def _is_normalized(emotions: Dict[str, Any]) -> bool:
    values = [emotions.get(e.value) for e in EMOTIONS]
    if any(_clean_value(v) != v for v in values):
        return False
    return abs(sum(values) - 1.0) <= EmotionConstants.NORMALIZED_TOLERANCE


def ensure_scores(emotions: Dict[str, Any]) -> SentimentScores:
    """
    Complete a full or partial score mapping.

    Present finite non-negative numbers are kept, everything else counts as 0,
    and the result is renormalized. Mappings that are already complete and
    normalized are returned unchanged.
    """
    if not isinstance(emotions, Mapping):
        emotions = {}
    if _is_normalized(emotions):
        return {e.value: float(emotions[e.value]) for e in EMOTIONS}
    filled = {e.value: _clean_value(emotions.get(e.value)) for e in EMOTIONS}
    return normalize_scores(filled)


def complete_comment(comment: Comment) -> CommentInsight:
    """Attach complete scores, scoring the text when none were supplied."""
    if comment.emotions is None:
        emotions = score_comment(comment.text)
    else:
        emotions = ensure_scores(comment.emotions)
    return CommentInsight(
        id=comment.id,
        author=comment.author,
        text=comment.text,
        likes=comment.likes,
        published_at=comment.published_at,
        emotions=emotions,
    )


def summarize(video_title: str, channel_name: str, comments: Iterable[Comment]) -> AnalysisSummary:
    """Aggregate comments into a video-level emotion summary."""
    insights = [complete_comment(c) for c in comments]

    denominator = max(len(insights), 1)
    means = {
        e.value: sum(i.emotions[e.value] for i in insights) / denominator
        for e in EMOTIONS
    }

    logger.debug(f"Summarized {len(insights)} comments for '{video_title}'")

    return AnalysisSummary(
        video_title=video_title,
        channel_name=channel_name,
        summary=normalize_scores(means),
        total_comments=len(insights),
        top_comments=insights[:UIConstants.MAX_DISPLAY_COMMENTS],
    )


def dominant_emotion(scores: Dict[str, float]) -> Emotion:
    """Pick the highest-scoring emotion; ties go to the earlier category."""
    best = EMOTIONS[0]
    for emotion in EMOTIONS[1:]:
        if scores.get(emotion.value, 0.0) > scores.get(best.value, 0.0):
            best = emotion
    return best


def sentiment_balance(scores: Dict[str, float]) -> SentimentBalance:
    """Collapse six emotions into a positive / neutral / negative split."""
    positive = (scores["joy"]
                + scores["surprise"] * EmotionConstants.SURPRISE_POSITIVE_SHARE)
    negative = (scores["anger"] + scores["disgust"] + scores["fear"]
                + scores["sadness"] * EmotionConstants.SADNESS_NEGATIVE_SHARE)
    neutral = max(0.0, 1.0 - (positive + negative))
    total = max(positive + negative + neutral, EmotionConstants.BALANCE_EPSILON)
    return SentimentBalance(
        positive=positive / total,
        neutral=neutral / total,
        negative=negative / total,
    )
