# main.py
from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from config_reader import apply_setting, is_setting_line, read_config
from debug import Debug
from errors import EnigmaError, SettingError
from machine import BLOCK, Machine
from suites import SUITES, suite_config

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class Config:
    """Runtime switches for a CLI run."""

    block: int = BLOCK                  # output group size
    debug: tuple[str, ...] = ()         # Debug components to switch on
    log_file: str | None = None         # also log to this file


# ────────────────────────────────────────────────────────────────────────
#  1. Message stream
# ────────────────────────────────────────────────────────────────────────


def process(machine: Machine, lines: Iterable[str], block: int = BLOCK) -> Iterator[str]:
    """Yield one output line per input line of the message stream.

    ``*`` lines reconfigure the machine and produce no output, blank
    lines are echoed, and everything else is converted.
    """
    configured = False
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip():
            if configured:
                yield ""
        elif is_setting_line(line):
            apply_setting(machine, line)
            configured = True
        elif not configured:
            raise SettingError("Input does not start with a setting")
        else:
            yield machine.convert_message(line, block)

    if not configured:
        raise SettingError("No setting line in input")


def run(config_text: str, lines: Iterable[str], cfg: Config | None = None) -> str:
    """Configure a machine from *config_text* and return the converted
    stream. Nothing is returned unless the whole stream succeeds."""
    cfg = cfg or Config()
    machine = read_config(config_text)
    return "".join(out + "\n" for out in process(machine, lines, cfg.block))


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a rotor machine")
    p.add_argument("config", nargs="?", help="Machine configuration file.")
    p.add_argument("input", nargs="?", help="Message file. Default: standard input")
    p.add_argument("output", nargs="?", help="Output file. Default: standard output")
    p.add_argument(
        "--debug", action="append", choices=Debug.component_names(), default=[],
        metavar="COMPONENT",
        help=f"Log one component ({', '.join(Debug.component_names())}). Repeatable.",
    )
    p.add_argument("--log-file", metavar="FILE", help="Also write debug logging to FILE.")
    p.add_argument(
        "--dump-suite", choices=sorted(SUITES), metavar="SUITE",
        help=f"Write the built-in configuration for SUITE ({', '.join(sorted(SUITES))}) "
        "to CONFIG, or standard output, and exit.",
    )
    return p.parse_args(argv)


def _read(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError:
        raise EnigmaError(f"could not open {path}") from None


def _write(path: str | None, text: str) -> None:
    if path is None:
        sys.stdout.write(text)
        return
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError:
        raise EnigmaError(f"could not open {path}") from None


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    cfg = Config(debug=tuple(args.debug), log_file=args.log_file)

    debug = Debug(log_to=cfg.log_file)
    debug.enable(*cfg.debug)

    try:
        if args.dump_suite:
            _write(args.config, suite_config(args.dump_suite))
            return
        if args.config is None:
            raise EnigmaError("a configuration file is required")

        config_text = _read(args.config)
        lines = _read(args.input).splitlines() if args.input else sys.stdin
        _write(args.output, run(config_text, lines, cfg))
    except EnigmaError as exc:
        sys.exit(f"Error: {exc}")


if __name__ == "__main__":
    main()
