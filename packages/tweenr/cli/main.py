"""Command-line interface for tweenr.

Inspect animation curves from config files:

    tweenr preview bounce.yaml --samples 11
    tweenr preview tweenr.yaml --name workspace-switch
    tweenr duration tweenr.yaml --name window-open
"""

from __future__ import annotations

import argparse
import json
import math
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tweenr.core.config import loader
from tweenr.core.config.models import AnimationConfig
from tweenr.core.curves.sampling import sample_curve
from tweenr.core.curves.variant import dump_curve
from tweenr.core.utils.logging import configure_logging, get_logger

console = Console()

DEFAULT_SAMPLES = 11


def _load_animation(config_path: Path, name: str | None) -> AnimationConfig:
    """Resolve the animation to inspect.

    With a name, ``config_path`` is an app config and the named animation is
    used. Without one, the file holds a single curve.
    """
    log = get_logger(__name__, config=str(config_path), animation=name)
    log.debug("Loading animation from %s", config_path)
    if name is None:
        return AnimationConfig(curve=loader.load_curve(config_path))

    app_config = loader.load_app_config(config_path)
    return app_config.get_animation(name)


def _format_seconds(seconds: float) -> str:
    if math.isinf(seconds):
        return "never settles"
    return f"{seconds:.4f}s"


def preview(args: argparse.Namespace) -> int:
    """Print a table of curve progress over the animation's time span."""
    try:
        animation = _load_animation(Path(args.config), args.name)
    except (FileNotFoundError, KeyError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return 1

    if args.samples < 2:
        console.print("[red]ERROR: --samples must be >= 2[/red]")
        return 1

    fallback = animation.duration if animation.duration > 0 else 1.0
    samples = sample_curve(animation.curve, args.samples, duration=fallback)

    title = f"{args.name or Path(args.config).name}: {json.dumps(dump_curve(animation.curve))}"
    table = Table(title=escape(title))
    table.add_column("t", justify="right")
    table.add_column("progress", justify="right")
    for sample in samples:
        table.add_row(f"{sample.t:.4f}", f"{sample.v:.4f}")

    console.print(table)
    console.print(f"Duration: {_format_seconds(animation.effective_duration)}")
    return 0


def duration(args: argparse.Namespace) -> int:
    """Print the duration an animation will run for."""
    try:
        animation = _load_animation(Path(args.config), args.name)
    except (FileNotFoundError, KeyError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return 1

    console.print(_format_seconds(animation.effective_duration))
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="tweenr",
        description="tweenr - inspect animation curves and durations",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    prev = sub.add_parser("preview", help="Print sampled progress of a curve")
    prev.add_argument("config", help="Curve file, or app config when --name is given")
    prev.add_argument("--name", default=None, help="Animation name in the app config")
    prev.add_argument(
        "--samples",
        type=int,
        default=DEFAULT_SAMPLES,
        help=f"Number of samples (default: {DEFAULT_SAMPLES})",
    )

    dur = sub.add_parser("duration", help="Print the effective duration of an animation")
    dur.add_argument("config", help="Curve file, or app config when --name is given")
    dur.add_argument("--name", default=None, help="Animation name in the app config")

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    configure_logging(level=args.log_level)

    if args.cmd == "preview":
        return preview(args)
    if args.cmd == "duration":
        return duration(args)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
