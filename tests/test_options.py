import pytest

from tts_convert.options import (
    DEFAULT_FORMAT,
    DEFAULT_VOICE,
    FORMATS,
    VOICES,
    AudioFormat,
    Voice,
    resolve_format,
    resolve_voice,
)


@pytest.mark.parametrize("voice", VOICES)
def test_valid_voice_is_kept(voice, capsys):
    assert resolve_voice({"voice": voice}) == voice
    assert capsys.readouterr().err == ""


@pytest.mark.parametrize("voice", ["Echo", "robot", "onyx ", "ONYX"])
def test_invalid_voice_warns_and_uses_default(voice, capsys):
    assert resolve_voice({"voice": voice}) is DEFAULT_VOICE
    err = capsys.readouterr().err
    assert "warning" in err
    assert voice in err


def test_missing_voice_defaults_silently(capsys):
    assert resolve_voice({}) is Voice.ONYX
    assert capsys.readouterr().err == ""


@pytest.mark.parametrize("fmt", FORMATS)
def test_explicit_format_wins_over_extension(fmt):
    assert resolve_format({"format": fmt}, "book.wav") == fmt


def test_invalid_format_falls_back_to_extension(capsys):
    assert resolve_format({"format": "MP4"}, "book.flac") is AudioFormat.FLAC
    assert "Unsupported format option 'MP4'" in capsys.readouterr().err


def test_invalid_format_without_extension_uses_default(capsys):
    assert resolve_format({"format": "ogg"}, "book") is DEFAULT_FORMAT
    assert "warning" in capsys.readouterr().err


@pytest.mark.parametrize(
    "output, expected",
    [
        ("book.aac", AudioFormat.AAC),
        ("book", AudioFormat.MP3),
        (".aac", AudioFormat.MP3),
        (".x.aac", AudioFormat.AAC),
        ("a.b.aac", AudioFormat.AAC),
        ("BOOK.WAV", AudioFormat.WAV),
        ("book.txt", AudioFormat.MP3),
        ("./output", AudioFormat.MP3),
        ("./audio/book.opus", AudioFormat.OPUS),
    ],
)
def test_format_inferred_from_output_name(output, expected, capsys):
    assert resolve_format({}, output) is expected
    assert capsys.readouterr().err == ""


def test_format_without_output_uses_default():
    assert resolve_format({}) is AudioFormat.MP3
