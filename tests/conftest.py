import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tts_convert import synth  # noqa: E402


class FakeResponse:
    def __init__(self, payload: bytes):
        self._payload = payload

    def read(self) -> bytes:
        return self._payload


class FakeSpeech:
    def __init__(self, calls, payload, error):
        self.calls = calls
        self.payload = payload
        self.error = error

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.payload)


@pytest.fixture
def fake_openai(monkeypatch):
    """Swap the OpenAI client for one that records speech.create calls."""
    state = SimpleNamespace(calls=[], api_keys=[], payload=b"ID3-fake-audio", error=None)

    class FakeOpenAI:
        def __init__(self, api_key=None):
            state.api_keys.append(api_key)
            self.audio = SimpleNamespace(speech=FakeSpeech(state.calls, state.payload, state.error))

    monkeypatch.setattr(synth, "OpenAI", FakeOpenAI)
    monkeypatch.delenv("OPENAI_TTS_MODEL", raising=False)
    return state
