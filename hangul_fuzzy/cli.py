from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from hangul_fuzzy.domain.similarity import distance, matches
from hangul_fuzzy.services.search import rank
from hangul_fuzzy.services.settings_store import MatchSettings, SettingsStore

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hangul-fuzzy",
        description="Korean-aware fuzzy string distance and matching.",
    )
    parser.add_argument("--settings", default=None, help="Path to settings.yaml.")
    parser.add_argument("--log-level", default=None, type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])

    sub = parser.add_subparsers(dest="command", required=True)

    p_dist = sub.add_parser("distance", help="Print the edit distance between two strings.")
    p_dist.add_argument("a")
    p_dist.add_argument("b")
    p_dist.add_argument("--case-sensitive", action="store_true", default=None)

    p_match = sub.add_parser("match", help="Print the fuzzy containment score of NEEDLE in HAYSTACK.")
    p_match.add_argument("needle")
    p_match.add_argument("haystack")
    p_match.add_argument("--case-sensitive", action="store_true", default=None)

    p_search = sub.add_parser("search", help="Rank candidate lines (FILE or stdin) against NEEDLE.")
    p_search.add_argument("needle")
    p_search.add_argument("file", nargs="?", default=None)
    p_search.add_argument("--case-sensitive", action="store_true", default=None)
    p_search.add_argument("--min-score", type=float, default=None)
    p_search.add_argument("--limit", type=int, default=None, help="Max results to print.")

    return parser


def _configure_logging(level_name: str) -> None:
    if str(os.environ.get("HANGUL_FUZZY_DEBUG", "")).strip().lower() in ("1", "true", "yes", "on"):
        level_name = "DEBUG"
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read_candidates(path: str | None) -> list[str]:
    if path is None:
        raw = sys.stdin.read()
    else:
        raw = Path(path).read_text(encoding="utf-8")
    return [line.strip() for line in raw.splitlines() if line.strip()]


def _case_sensitive(args: argparse.Namespace, settings: MatchSettings) -> bool:
    if args.case_sensitive is None:
        return settings.case_sensitive
    return bool(args.case_sensitive)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = SettingsStore(args.settings).get_match_settings()
    _configure_logging(args.log_level or settings.log_level)
    logger.debug("Settings: %s", settings)

    if args.command == "distance":
        print("{:g}".format(distance(args.a, args.b, _case_sensitive(args, settings))))
        return 0

    if args.command == "match":
        print("{:.4f}".format(matches(args.needle, args.haystack, _case_sensitive(args, settings))))
        return 0

    min_score = settings.min_score if args.min_score is None else args.min_score
    if not 0.0 <= min_score <= 1.0:
        parser.error("--min-score must be between 0 and 1")
    limit = settings.limit if args.limit is None else args.limit

    try:
        candidates = _read_candidates(args.file)
    except OSError as e:
        parser.error("cannot read {}: {}".format(args.file, e))

    hits = rank(
        args.needle,
        candidates,
        case_sensitive=_case_sensitive(args, settings),
        min_score=min_score,
        limit=limit,
    )
    for hit in hits:
        print("{:.4f}\t{}".format(hit.score, hit.text))
    return 0 if hits else 1


if __name__ == "__main__":
    sys.exit(main())
