# tts_convert/cli.py
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from .args import build_parser, parse_args
from .convert import convert
from .options import DEFAULT_FILE_OUTPUT, InvocationOptions, resolve_format, resolve_voice
from .paths import resolve_output_path


def print_help() -> None:
    build_parser().print_help()


def get_params(argv: List[str]) -> Optional[Tuple[str, Path, InvocationOptions]]:
    """Return (input, output path, options), or None after printing help."""
    parsed = parse_args(argv)
    files = parsed.positional
    if not files or not files[0]:
        print_help()
        return None

    file_input = files[0]
    param_output = files[1] if len(files) > 1 and files[1] else DEFAULT_FILE_OUTPUT

    fmt = resolve_format(parsed.options, param_output)
    voice = resolve_voice(parsed.options)
    file_output = resolve_output_path(param_output, fmt)
    return file_input, file_output, InvocationOptions(voice=voice, format=fmt)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    try:
        params = get_params(sys.argv[1:] if argv is None else argv)
        if params is None:
            return 1
        file_input, file_output, options = params
        convert(file_input, file_output, options)
    except Exception as e:
        print(f"[tts] error: {e}", file=sys.stderr)
        return 1

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
