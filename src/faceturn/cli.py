"""CLI for faceturn: ``faceturn run`` and ``faceturn image``."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from faceturn.analyzer import FrameAnalyzer
from faceturn.config import AnalyzerConfig
from faceturn.history import DetectionHistory
from faceturn.types import FrameResult

logger = logging.getLogger(__name__)

_ESC = 27


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="faceturn",
        description="Skin-color head orientation estimation",
    )
    sub = parser.add_subparsers(dest="command")

    # faceturn run
    run_p = sub.add_parser("run", help="Analyze a camera or video stream")
    run_p.add_argument(
        "--input", "-i",
        default="0",
        help="Input source: video file path or camera index (default: 0)",
    )
    run_p.add_argument(
        "--max-frames",
        type=int,
        default=None,
        help="Stop after N processed frames",
    )
    run_p.add_argument(
        "--viz",
        choices=["text", "live"],
        default="text",
        help="Visualization mode (default: text)",
    )
    run_p.add_argument("--config", "-c", default=None, help="YAML config file")
    run_p.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    # faceturn image
    img_p = sub.add_parser("image", help="Analyze a single image file")
    img_p.add_argument("path", help="Image file path")
    img_p.add_argument("--config", "-c", default=None, help="YAML config file")
    img_p.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    return parser


def _resolve_input(input_str: str):
    """Resolve --input to a source path or camera index."""
    try:
        return int(input_str)
    except ValueError:
        return input_str


def _load_config(path: Optional[str]) -> AnalyzerConfig:
    if path is None:
        return AnalyzerConfig()
    logger.info("Loading config from %s", path)
    return AnalyzerConfig.from_yaml(path)


def format_result(result: FrameResult) -> str:
    """One-line summary of a frame result."""
    det = result.detection
    line = f"{det.orientation.value:<8s} {det.confidence * 100:5.1f}%"
    region = result.region
    if region is not None:
        line += (
            f"  center=({region.center_x:.0f},{region.center_y:.0f})"
            f" size={region.width:.0f}x{region.height:.0f}"
            f" samples={region.sample_count}"
        )
    return line


def _cmd_image(args: argparse.Namespace) -> int:
    """Handle ``faceturn image``."""
    import cv2

    image = cv2.imread(args.path, cv2.IMREAD_COLOR)
    if image is None:
        print(f"Error: cannot read image {args.path}", file=sys.stderr)
        return 1

    analyzer = FrameAnalyzer(_load_config(args.config))
    rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
    result = analyzer.analyze(rgb, t_ns=0)
    print(format_result(result))
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    """Handle ``faceturn run``."""
    import cv2

    source = _resolve_input(args.input)
    cap = cv2.VideoCapture(source)
    if not cap.isOpened():
        logger.error("Cannot open video source %r", source)
        print(f"Error: cannot open input {args.input}", file=sys.stderr)
        return 1

    analyzer = FrameAnalyzer(_load_config(args.config))
    history = DetectionHistory()
    live = args.viz == "live"
    processed = 0
    logger.info("Analyzing %r (viz=%s)", source, args.viz)

    try:
        while args.max_frames is None or processed < args.max_frames:
            ok, frame = cap.read()
            if not ok:
                break

            rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
            result = analyzer.analyze(rgb)
            history.record(result.detection)
            processed += 1

            if not live:
                print(f"[{processed:05d}] {format_result(result)}")
                continue

            from faceturn.renderer import render_marks

            cv2.imshow("faceturn", render_marks(frame, analyzer.annotate(result)))
            key = cv2.waitKey(1) & 0xFF
            if key in (_ESC, ord("q")):
                break
            if key == ord("r"):
                analyzer.reset()
                history.clear()
    finally:
        cap.release()
        if live:
            cv2.destroyAllWindows()

    print(f"\nDone: {processed} frames, {len(history)} detections logged")
    for det in history.recent():
        print(f"  {det.orientation.value:<8s} {det.confidence * 100:3.0f}%")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for ``faceturn`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "run":
        return _cmd_run(args)
    if args.command == "image":
        return _cmd_image(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
