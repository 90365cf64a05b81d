"""Convert a text file into speech audio with OpenAI TTS."""
from .convert import convert
from .options import AudioFormat, InvocationOptions, Voice, resolve_format, resolve_voice
from .paths import resolve_output_path

__all__ = [
    "AudioFormat",
    "InvocationOptions",
    "Voice",
    "convert",
    "resolve_format",
    "resolve_output_path",
    "resolve_voice",
]
