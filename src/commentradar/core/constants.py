"""Constants and configuration values for CommentRadar."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringWeights:
    """Hand-tuned weights used by the keyword scorer."""

    baseline: float = 0.02  # floor for every emotion before matching
    keyword: float = 0.18  # per distinct lexicon entry found
    punctuation_surprise: float = 0.12  # "!!", "?!" and friends
    laughter_joy: float = 0.10  # ㅋㅋ / ㅎㅎ runs
    shock_surprise: float = 0.08  # ㄷㄷ / ㅎㄷㄷ runs
    crying_sadness: float = 0.10  # ㅠ / ㅜ runs


DEFAULT_WEIGHTS = ScoringWeights()


# Emotion Constants
class EmotionConstants:
    """Lexicon and presentation data for the six emotion categories."""

    # Substring markers per emotion, matched against lower-cased text
    LEXICON = {
        "joy": ["좋", "사랑", "최고", "대박", "행복", "ㅋㅋ", "ㅎㅎ", "굿", "❤️", "😍", "멋져"],
        "sadness": ["슬프", "아쉽", "속상", "ㅠ", "ㅜ", "눈물", "우울", "허전"],
        "anger": ["화나", "짜증", "빡치", "열받", "분노", "최악", "역겹", "화났"],
        "surprise": ["놀라", "헐", "미쳤", "와", "대박", "충격", "어메이징", "역대급"],
        "disgust": ["별로", "싫", "구림", "노잼", "혐오", "어색", "촌스럽", "구리"],
        "fear": ["불안", "무섭", "걱정", "위험", "떨리", "두렵", "긴장"],
    }

    # Heuristic patterns
    REPEATED_PUNCTUATION = r"[!?]{2,}"
    LAUGHTER_RUN = r"ㅋㅋ+|ㅎㅎ+"
    SHOCK_RUN = r"ㅎㄷㄷ|ㄷㄷ"
    CRYING_RUN = r"ㅠ+|ㅜ+"

    # Display metadata: label, chart accent color, emoji
    DISPLAY = {
        "joy": ("Joy", "#fbbf24", "😊"),
        "sadness": ("Sadness", "#60a5fa", "😢"),
        "anger": ("Anger", "#f87171", "😡"),
        "surprise": ("Surprise", "#34d399", "😲"),
        "disgust": ("Disgust", "#a78bfa", "🤢"),
        "fear": ("Fear", "#f59e0b", "😰"),
    }

    # Positive / negative balance
    SURPRISE_POSITIVE_SHARE = 0.4  # surprise counts partly as positive
    SADNESS_NEGATIVE_SHARE = 0.6  # sadness counts partly as negative
    BALANCE_EPSILON = 1e-6

    NORMALIZED_TOLERANCE = 1e-9  # sum tolerance for "already normalized"

# YouTube Constants
class YouTubeConstants:
    """Constants related to the YouTube Data API."""

    API_SERVICE_NAME = "youtube"
    API_VERSION = "v3"
    VIDEO_ID_PATTERN = r"([a-zA-Z0-9_-]{11})"

    TITLE_PLACEHOLDER = "Title unavailable"
    CHANNEL_PLACEHOLDER = "Channel unavailable"

    # Friendly messages for known API error reasons
    ERROR_MESSAGES = {
        "commentsDisabled": "Comments are disabled for this video, so they cannot be loaded.",
        "quotaExceeded": "The YouTube API quota has been exceeded.",
        "forbidden": (
            "Access to this video's comments is forbidden "
            "(comments may be private, blocked, age- or region-restricted)."
        ),
    }

# UI Constants
class UIConstants:
    """Constants for the dashboard layout."""

    PAGE_SIZE = 10  # comments per page
    MAX_DISPLAY_COMMENTS = 30  # comments shown across all pages
    MIN_LABEL_VALUE = 0.02  # donut slices below this get no label
    EXCERPT_LENGTH = 240  # chars shown per comment in compact views
    URL_PLACEHOLDER = "https://www.youtube.com/watch?v=..."

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    CONFIG_FILE = ".env.example"  # configuration template file
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    EXPORT_VERSION = "1.0.0"
