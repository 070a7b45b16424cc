from __future__ import annotations

"""CLI entry point for the timed quiz."""

import argparse
import math
import sys
from typing import List, Optional, TextIO

from . import __version__
from .app.explain import enable as explain_enable
from .app.session import run_timed_quiz, run_untimed_quiz
from .config.config import load_config, validate_config
from .errors import ConfigError, MalformedRecord, SourceUnreadable


def _duration(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid duration: '{value}'")
    if math.isnan(seconds):
        raise argparse.ArgumentTypeError("duration must be a number of seconds, not NaN")
    return seconds


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="timedquiz", description="Timed quiz from a CSV of question,answer rows")
    p.add_argument("--csv_file", "--csv-file", dest="csv_file", default=None,
                   help="The csv quiz file (default: problems.csv)")
    p.add_argument("--duration", type=_duration, default=None,
                   help="The duration of the quiz in seconds (default: 30)")
    p.add_argument("--no-timer", dest="timed", action="store_false",
                   help="Ask every question with no time limit")
    p.set_defaults(timed=None)
    p.add_argument("--config", type=str, default=None, help="Path to YAML config")
    p.add_argument("--explain", action="store_true", help="Trace quiz milestones on stderr")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    args = _parse_args(argv)
    out = stdout if stdout is not None else sys.stdout
    if args.version:
        out.write(f"timedquiz {__version__}\n")
        return 0

    if args.explain:
        explain_enable(True)

    try:
        cfg = validate_config(load_config(args.config))
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    quiz = cfg["quiz"]
    csv_file = args.csv_file or quiz["csv_file"]
    duration = args.duration if args.duration is not None else quiz["duration"]
    timed = quiz["timed"] if args.timed is None else args.timed
    poll = cfg["runner"]["poll_interval_s"]

    try:
        if timed:
            run_timed_quiz(csv_file, duration, stdin=stdin, stdout=out, poll_interval=poll)
        else:
            run_untimed_quiz(csv_file, stdin=stdin, stdout=out, poll_interval=poll)
    except (SourceUnreadable, MalformedRecord) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
