"""Basic usage examples for CommentRadar."""

from commentradar import score_comment, summarize, dominant_emotion
from commentradar.core.models import Comment
from commentradar.services import AnalysisService


def example_score_text():
    """Example: Score a single comment."""
    print("🔍 Scoring: '와 진짜 역대급 ㅋㅋㅋ 최고!!'")

    scores = score_comment("와 진짜 역대급 ㅋㅋㅋ 최고!!")
    for emotion, value in scores.items():
        print(f"  {emotion}: {value:.2f}")
    print(f"🎭 Dominant: {dominant_emotion(scores).value}")


def example_offline_summary():
    """Example: Summarize comments you already have, some pre-scored."""
    print("\n🔍 Summarizing three comments")

    comments = [
        Comment(id="1", author="a", text="노래 너무 좋아요 ❤️", likes=120),
        Comment(id="2", author="b", text="이번 편은 좀 아쉽네요 ㅠㅠ", likes=40),
        Comment(id="3", author="c", text="", likes=3,
                emotions={"fear": 0.7, "surprise": 0.3}),
    ]
    result = summarize("Sample video", "Sample channel", comments)

    print(f"📊 {result.total_comments} comments")
    for emotion, value in result.summary.items():
        print(f"  {emotion}: {value:.2f}")


def example_live_video():
    """Example: Analyze a live video (requires YOUTUBE_API_KEY)."""
    print("\n🔍 Analyzing https://www.youtube.com/watch?v=dQw4w9WgXcQ")

    result = AnalysisService().analyze("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
    print(f"🎬 {result.video_title} - {result.channel_name}")
    print(f"🎭 Dominant: {dominant_emotion(result.summary).value}")


if __name__ == "__main__":
    example_score_text()
    example_offline_summary()
    example_live_video()
