# tts_convert/args.py
import argparse
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .options import DEFAULT_FORMAT, DEFAULT_VOICE, FORMATS

EPILOG = f"""\
Example:
    tts-convert book.txt audio-book.aac
    tts-convert book.txt audio-book --voice echo -f opus

Options:
    --voice       male: 'ash' | 'echo' | 'onyx' | 'nova'
                  female: 'alloy' | 'coral' | 'fable' | 'nova' | 'sage' | 'shimmer'
                  default = '{DEFAULT_VOICE.value}'
    --format, -f  {' | '.join(repr(f) for f in FORMATS)}
                  default = '{DEFAULT_FORMAT.value}'
"""

KNOWN_FLAGS = ("--voice", "--format", "-f")
HELP_FLAGS = ("-h", "--help")


@dataclass
class ParsedArgs:
    positional: List[str] = field(default_factory=list)
    options: Dict[str, object] = field(default_factory=dict)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tts-convert",
        usage="tts-convert <inputFile.txt> <outputFile.mp3> [OPTIONS]",
        description="tts-convert: Convert text into voice",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    ap.add_argument("files", nargs="*", metavar="FILE", help="input text file, then optional output file")
    # a bare flag parses as True and is rejected later by the resolvers
    ap.add_argument("--voice", nargs="?", const=True, help="voice name")
    ap.add_argument("--format", "-f", dest="format", nargs="?", const=True, help="audio format")
    return ap


def _is_flag(tok: str) -> bool:
    return tok.startswith("-") and bool(tok.strip("-"))


def _is_known(name: str) -> bool:
    # "-fopus" is -f with an attached value
    return name in KNOWN_FLAGS or name in HELP_FLAGS or (name.startswith("-f") and not name.startswith("--"))


def _split_unknown(argv: List[str]) -> Tuple[List[str], Dict[str, object]]:
    """Pull unknown flags (and the value token after them) out of argv."""
    kept: List[str] = []
    unknown: Dict[str, object] = {}
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok == "--":
            kept.extend(argv[i:])
            break
        if not _is_flag(tok):
            kept.append(tok)
            i += 1
            continue

        name, sep, value = tok.partition("=")
        has_next = i + 1 < len(argv) and not _is_flag(argv[i + 1]) and argv[i + 1] != "--"
        if _is_known(name):
            kept.append(tok)
            if not sep and name in KNOWN_FLAGS and has_next:
                kept.append(argv[i + 1])
                i += 1
        elif sep:
            unknown[name.lstrip("-")] = value
        elif has_next:
            unknown[name.lstrip("-")] = argv[i + 1]
            i += 1
        else:
            unknown[name.lstrip("-")] = True
        i += 1
    return kept, unknown


def parse_args(argv: List[str]) -> ParsedArgs:
    """
    Split argv into positional tokens and a flag -> value map.
    No validation here; a repeated flag keeps its last value.
    """
    kept, unknown = _split_unknown(list(argv))
    ns, extras = build_parser().parse_known_intermixed_args(kept)
    parsed = ParsedArgs(positional=list(ns.files or []), options=unknown)
    if ns.voice is not None:
        parsed.options["voice"] = ns.voice
    if ns.format is not None:
        parsed.options["format"] = ns.format

    for tok in extras:
        if _is_flag(tok):
            name, sep, value = tok.lstrip("-").partition("=")
            parsed.options[name] = value if sep else True
        else:
            parsed.positional.append(tok)
    return parsed
