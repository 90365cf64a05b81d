# tts_convert/paths.py
from pathlib import Path

from .options import AudioFormat


def resolve_output_path(proposed: str, fmt) -> Path:
    """
    Return an absolute, not-yet-existing path for the audio file.

    The format extension is appended unless the name already ends with it
    (case-insensitive). Any other extension stays part of the base name,
    so "book.mp3" with aac becomes "book.mp3.aac". On collision we try
    base-1, base-2, ... until a free name turns up.
    """
    ext = "." + AudioFormat(fmt).value
    if proposed.lower().endswith(ext):
        base = ".".join(proposed.split(".")[:-1])
    else:
        base = proposed

    candidate = Path(base + ext)
    i = 0
    while candidate.exists():
        i += 1
        candidate = Path(f"{base}-{i}{ext}")

    return candidate.resolve()
