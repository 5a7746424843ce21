"""Command-line interface for CommentRadar."""

import argparse
import json
import logging
import subprocess
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import FileConstants
from .core.exceptions import CommentRadarError
from .core.models import AnalysisSummary
from .core.scoring import score_comment, summarize, dominant_emotion, sentiment_balance
from .services.analysis_service import AnalysisService
from .utils.data_prep import export_to_json, prepare_export, load_comments_payload
from .utils.display import emotion_rows, emotion_label, format_percent, excerpt

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _print_distribution(scores):
    for row in emotion_rows(scores):
        print(f"  {row['emoji']} {row['label']:<9} {row['percent']:>3}%")


def _print_summary(result: AnalysisSummary):
    print(f"\n{result.video_title}")
    print(f"{result.channel_name}")
    print(f"\nComments analyzed: {result.total_comments}")

    if result.total_comments:
        print(f"Dominant emotion: {emotion_label(dominant_emotion(result.summary))}")
    else:
        print("Dominant emotion: no data")

    balance = sentiment_balance(result.summary)
    print(f"Balance: positive {format_percent(balance.positive)}% / "
          f"neutral {format_percent(balance.neutral)}% / "
          f"negative {format_percent(balance.negative)}%")

    print("\nEmotion distribution:")
    _print_distribution(result.summary)

    if result.top_comments:
        print("\nTop comments:")
        for i, comment in enumerate(result.top_comments[:5], 1):
            emotion = comment.dominant_emotion
            print(f"  {i}. [{emotion_label(emotion)} "
                  f"{format_percent(comment.emotions[emotion.value])}%] "
                  f"{comment.author} ({comment.likes} likes): {excerpt(comment.text, 100)}")


def _write_output(result: AnalysisSummary, out: str):
    if out:
        export_to_json(prepare_export(result), out)
        print(f"Results exported to {out}")


def cmd_analyze(args):
    """Analyze command: fetch a video's comments and summarize them."""
    service = AnalysisService()
    print(f"Analyzing {args.url} ...")
    result = service.analyze(args.url)
    _print_summary(result)
    _write_output(result, args.out)


def cmd_score(args):
    """Score command: score a single piece of text."""
    scores = score_comment(args.text)
    print(f"Dominant emotion: {emotion_label(dominant_emotion(scores))}")
    _print_distribution(scores)


def cmd_summarize(args):
    """Summarize command: aggregate a saved comments payload offline."""
    with open(args.input_file, 'r', encoding='utf-8') as f:
        data = json.load(f)

    video_title, channel_title, comments = load_comments_payload(data)
    result = summarize(video_title, channel_title, comments)
    _print_summary(result)
    _write_output(result, args.out)


def cmd_export(args):
    """Export command: turn a saved comments payload into the dashboard JSON."""
    with open(args.input_file, 'r', encoding='utf-8') as f:
        data = json.load(f)

    video_title, channel_title, comments = load_comments_payload(data)
    payload = prepare_export(summarize(video_title, channel_title, comments))

    if args.pretty:
        # Pretty print the JSON
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        # Export to file
        output_file = args.output or args.input_file.replace('.json', '_export.json')
        export_to_json(payload, output_file)
        print(f"Exported to {output_file}")


def cmd_ui(args):
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return

    print("Launching CommentRadar UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
    except KeyboardInterrupt:
        print("\nUI stopped by user")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CommentRadar - YouTube comment emotion dashboard")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze a YouTube video')
    analyze_parser.add_argument('url', help='YouTube video URL')
    analyze_parser.add_argument('--out', help='Output JSON file')

    # Score command
    score_parser = subparsers.add_parser('score', help='Score a single comment')
    score_parser.add_argument('text', help='Comment text')

    # Summarize command
    summarize_parser = subparsers.add_parser('summarize', help='Summarize a saved comments payload')
    summarize_parser.add_argument('input_file', help='Comments JSON file')
    summarize_parser.add_argument('--out', help='Output JSON file')

    # Export command
    export_parser = subparsers.add_parser('export', help='Export a comments payload as dashboard JSON')
    export_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    export_parser.add_argument('--out', dest='output', help='Output file (optional)')
    export_parser.add_argument('--pretty', action='store_true', help='Pretty print to stdout')

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')

    return parser


COMMANDS = {
    'analyze': cmd_analyze,
    'score': cmd_score,
    'summarize': cmd_summarize,
    'export': cmd_export,
    'ui': cmd_ui,
}


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        COMMANDS[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except CommentRadarError as e:
        logger.error(f"Command failed: {e}")
        print(f"Error: {e}")
        sys.exit(1)
    except (OSError, ValueError) as e:
        logger.error(f"Command failed: {e}")
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
