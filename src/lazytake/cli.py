from __future__ import annotations
import argparse, sys
from typing import Callable, Dict, Optional

from pydantic import ValidationError

from .capability import UnsupportedSourceError, probe_source
from .config.logging import configure_logging
from .config.settings import LazyTakeSettings
from .sources.collection import CollectionSource
from .sources.count import CountSource
from .sources.filter import FilterSource
from .sources.sequence import SequenceSource
from .sources.stream import IteratorSource, TokenStreamSource, read_tokens
from .view import BoundedView

# Sample sources for `probe`, one per kind of source the view distinguishes.
SAMPLE_SOURCES: Dict[str, Callable[[], object]] = {
    "list": lambda: SequenceSource([0, 1, 2]),
    "tuple": lambda: SequenceSource((0, 1, 2)),
    "set": lambda: CollectionSource({0, 1, 2}),
    "count": lambda: CountSource(0),
    "bounded-count": lambda: CountSource(0, 3),
    "filter": lambda: FilterSource(CountSource(0), lambda v: v % 2 == 0),
    "iterator": lambda: IteratorSource(iter([0, 1, 2])),
}


def _take_from(stream, settings: LazyTakeSettings, then_read: bool):
    for v in BoundedView(TokenStreamSource(stream, settings.parser), settings.count):
        print(v)
    if then_read:
        # Read straight from the stream: whatever the view left behind.
        nxt = next(read_tokens(stream, settings.parser), None)
        print("next:", "<eof>" if nxt is None else nxt)


def cmd_take(args, settings: LazyTakeSettings):
    if args.input:
        with open(args.input, "r", encoding="utf-8") as stream:
            _take_from(stream, settings, args.then_read)
    else:
        _take_from(sys.stdin, settings, args.then_read)
    return 0


def cmd_count(args, settings: LazyTakeSettings):
    src = CountSource(args.start)
    if args.below is not None:
        below = args.below
        src = FilterSource(src, lambda v: v < below)
    print(" ".join(str(v) for v in BoundedView(src, settings.count)))
    return 0


def cmd_probe(args, settings: LazyTakeSettings):
    caps = probe_source(SAMPLE_SOURCES[args.kind]())
    print(caps.model_dump_json(indent=2))
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="lazytake", description="Bounded views that never over-consume their source")
    p.add_argument("--verbose", action="store_true", default=None, help="Log tier selection (DEBUG)")
    p.add_argument("--log-json", action="store_true", default=None, help="Render log lines as JSON")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("take", help="print the first N whitespace-separated tokens of the input")
    sp.add_argument("count", type=int, nargs="?", default=None, help="How many tokens (default: LAZYTAKE_COUNT or 1)")
    sp.add_argument("--input", default=None, help="Text file to read (default: stdin)")
    sp.add_argument("--parse", choices=["int", "float", "str"], default=None, help="Token conversion")
    sp.add_argument("--then-read", action="store_true", help="Afterwards read one more token directly from the stream")
    sp.set_defaults(func=cmd_take)

    sp = sub.add_parser("count", help="count up from START, optionally keep values below B, take N")
    sp.add_argument("--take", dest="count", type=int, default=None, help="How many values")
    sp.add_argument("--below", type=int, default=None, help="Keep only values below this bound")
    sp.add_argument("--start", type=int, default=0)
    sp.set_defaults(func=cmd_count)

    sp = sub.add_parser("probe", help="print the capabilities detected for a sample source")
    sp.add_argument("kind", choices=sorted(SAMPLE_SOURCES))
    sp.set_defaults(func=cmd_probe)

    return p


def main(argv: Optional[list[str]] = None):
    p = build_parser()
    ns = p.parse_args(argv)
    try:
        # count goes through the settings model so a negative one is rejected
        settings = LazyTakeSettings.from_cli(
            count=getattr(ns, "count", None),
            verbose=ns.verbose,
            log_json=ns.log_json,
            parse=getattr(ns, "parse", None),
        )
    except ValidationError as e:
        print(f"lazytake: {e}", file=sys.stderr)
        return 2
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    try:
        return ns.func(ns, settings)
    except (ValueError, UnsupportedSourceError) as e:
        print(f"lazytake: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
