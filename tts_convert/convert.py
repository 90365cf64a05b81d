# tts_convert/convert.py
import time
from pathlib import Path
from typing import Callable

from .options import InvocationOptions
from .synth import synthesize


def convert(
    input_file,
    output_file,
    options: InvocationOptions,
    synth: Callable[..., bytes] = synthesize,
) -> Path:
    """Read input_file, synthesize it, write the audio to output_file."""
    file_input = Path(input_file).resolve()
    if not file_input.exists():
        raise FileNotFoundError(f'File "{file_input}" not found')

    text = file_input.read_text(encoding="utf-8")
    if not text:
        raise ValueError(f'File "{file_input}" is empty')

    voice, fmt = options.voice, options.format
    print(f'[tts] Creating "{voice.value}" voice for the text length {len(text)} characters...')
    t0 = time.time()
    audio = synth(text, voice, fmt)
    print(f"[tts] synthesized in {time.time() - t0:.3f}s")

    file_output = Path(output_file).resolve()
    # exclusive create, raises FileExistsError if the file is already there
    with open(file_output, "xb") as f:
        f.write(audio)
    print(f'[tts] Saved into a file "{file_output}"')
    return file_output
