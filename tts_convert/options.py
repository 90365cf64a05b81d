# tts_convert/options.py
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


class Voice(str, Enum):
    ALLOY = "alloy"
    ASH = "ash"
    CORAL = "coral"
    ECHO = "echo"
    FABLE = "fable"
    ONYX = "onyx"
    NOVA = "nova"
    SAGE = "sage"
    SHIMMER = "shimmer"


class AudioFormat(str, Enum):
    MP3 = "mp3"
    OPUS = "opus"
    AAC = "aac"
    FLAC = "flac"
    WAV = "wav"
    PCM = "pcm"


DEFAULT_FILE_OUTPUT = "./output"
DEFAULT_VOICE = Voice.ONYX
DEFAULT_FORMAT = AudioFormat.MP3

VOICES = [v.value for v in Voice]
FORMATS = [f.value for f in AudioFormat]


@dataclass(frozen=True)
class InvocationOptions:
    voice: Voice
    format: AudioFormat


def warn(msg: str) -> None:
    print(f"[tts] warning: {msg}", file=sys.stderr)


def is_valid_voice(value) -> bool:
    return isinstance(value, str) and value in VOICES


def is_valid_format(value) -> bool:
    return isinstance(value, str) and value in FORMATS


def _format_from_name(output_path: str) -> Optional[AudioFormat]:
    """Return the format named by the file extension, if any.

    A leading-dot name like ".aac" has no real stem, so it only counts
    when there is a further segment (".x.aac").
    """
    chunks = output_path.split(".")
    if len(chunks) < 2:
        return None
    if not (chunks[0] or len(chunks) > 2):
        return None
    ext = chunks[-1].lower()
    return AudioFormat(ext) if is_valid_format(ext) else None


def resolve_format(options: Mapping, output_path: Optional[str] = None) -> AudioFormat:
    """Explicit --format/-f first, then the output file extension, then mp3."""
    fmt = options.get("format")
    if fmt:
        if is_valid_format(fmt):
            return AudioFormat(fmt)
        warn(f"Unsupported format option '{fmt}'")

    inferred = _format_from_name(output_path or DEFAULT_FILE_OUTPUT)
    return inferred or DEFAULT_FORMAT


def resolve_voice(options: Mapping) -> Voice:
    voice = options.get("voice")
    if not voice:
        return DEFAULT_VOICE
    if not is_valid_voice(voice):
        warn(f"Unknown voice option '{voice}'. Using default voice '{DEFAULT_VOICE.value}'")
        return DEFAULT_VOICE
    return Voice(voice)
