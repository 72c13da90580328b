from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .core.logging_config import setup_logging
from .key import (
    Boxed,
    Horizontal,
    Inside,
    Justification,
    KeyProperties,
    KeySpecError,
    Order,
    Outside,
    Position,
    Stacked,
    Vertical,
    key_spec_from_dict,
    load_key_spec,
    save_key_spec,
)
from .script import compose_script

log = logging.getLogger(__name__)

EXIT_IO_ERROR = 1
EXIT_SPEC_ERROR = 2

_PLACEMENTS = {"inside": Inside, "outside": Outside}


def _parse_position(raw: str) -> Position:
    """Parse ``placement:vertical:horizontal``, e.g. ``inside:top:right``."""
    try:
        placement, vertical, horizontal = raw.lower().split(":")
        return _PLACEMENTS[placement](Vertical(vertical), Horizontal(horizontal))
    except (KeyError, ValueError) as exc:
        raise argparse.ArgumentTypeError(
            f"invalid position {raw!r}; expected inside|outside:top|center|bottom:left|center|right"
        ) from exc


def _read_stdin_spec() -> KeyProperties:
    try:
        raw = json.load(sys.stdin)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise KeySpecError(f"<stdin>: not valid UTF-8 JSON ({exc})") from exc
    if not isinstance(raw, dict):
        raise KeySpecError(f"<stdin>: expected a JSON object, got {type(raw).__name__}")
    return key_spec_from_dict(raw)


def cmd_new(args: argparse.Namespace) -> None:
    props = KeyProperties()
    if args.hidden:
        props.hide()
    if args.boxed:
        props.set_boxed(Boxed.YES)
    if args.title is not None:
        props.set_title(args.title)
    if args.position is not None:
        props.set_position(args.position)
    if args.stacking is not None:
        props.set_stacking(Stacked(args.stacking))
    if args.justification is not None:
        props.set_justification(Justification(args.justification))
    if args.order is not None:
        props.set_order(Order(args.order))
    save_key_spec(args.path, props)
    print(f"Created {args.path}")


def cmd_render(args: argparse.Namespace) -> None:
    paths = args.paths or ["-"]
    keys = [_read_stdin_spec() if p == "-" else load_key_spec(p) for p in paths]
    script = compose_script(*keys)
    if args.output:
        Path(args.output).write_text(script, encoding="utf-8")
        log.info("Wrote %d key line(s) to %s", len(keys), args.output)
    else:
        sys.stdout.write(script)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("plotscript")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="console log level",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="also write a rotating log file in the platform log directory",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("new", help="write a key spec JSON file")
    sp.add_argument("path")
    sp.add_argument("--hidden", action="store_true")
    sp.add_argument("--boxed", action="store_true")
    sp.add_argument("--title", default=None)
    sp.add_argument("--position", type=_parse_position, default=None, help="e.g. inside:top:right")
    sp.add_argument("--stacking", choices=[s.value for s in Stacked], default=None)
    sp.add_argument("--justification", choices=[j.value for j in Justification], default=None)
    sp.add_argument("--order", choices=[o.value for o in Order], default=None)
    sp.set_defaults(func=cmd_new)

    sp = sub.add_parser("render", help="compile key specs into gnuplot lines")
    sp.add_argument("paths", nargs="*", help="key spec files ('-' for stdin)")
    sp.add_argument("-o", "--output", default=None)
    sp.set_defaults(func=cmd_render)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(console_level=getattr(logging, args.log_level), log_to_file=args.log_file)
    try:
        args.func(args)
    except KeySpecError as exc:
        log.error("%s", exc)
        return EXIT_SPEC_ERROR
    except OSError as exc:
        log.error("%s", exc)
        return EXIT_IO_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
