# tts_convert/synth.py
import os
from openai import OpenAI

DEFAULT_TTS_MODEL = "tts-1"


def tts_model() -> str:
    return os.environ.get("OPENAI_TTS_MODEL") or DEFAULT_TTS_MODEL


def synthesize(text: str, voice, fmt) -> bytes:
    """
    One blocking round-trip to OpenAI TTS; returns the raw audio payload.
    A missing OPENAI_API_KEY surfaces as the SDK's own error.
    """
    client = OpenAI(api_key=os.environ.get("OPENAI_API_KEY"))

    resp = client.audio.speech.create(
        model=tts_model(),
        voice=getattr(voice, "value", voice),
        response_format=getattr(fmt, "value", fmt),
        input=text,
    )
    # SDK returns a binary response wrapper; read() gives the whole body
    return resp.read()
