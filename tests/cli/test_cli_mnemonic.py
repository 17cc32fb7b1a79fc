"""CLI tests for the mnemonic encode/decode commands."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from mnemonicode import cli

SAMPLE = bytes([101, 2, 240, 6, 108, 11, 20, 97])
SAMPLE_TEXT = "digital-apollo-aroma--rival-artist-rebel"


def _env() -> dict:
    root = Path(__file__).resolve().parents[2]
    env = os.environ.copy()
    pythonpath = str(root / "src")
    if env.get("PYTHONPATH"):
        env["PYTHONPATH"] = f"{pythonpath}{os.pathsep}{env['PYTHONPATH']}"
    else:
        env["PYTHONPATH"] = pythonpath
    env.pop("MNEMONICODE_FORMAT", None)
    return env


def _run(*args: str, stdin: bytes = b"") -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "mnemonicode", *args],
        input=stdin,
        capture_output=True,
        check=False,
        env=_env(),
    )


def test_encode_decode_files(tmp_path: Path) -> None:
    source = tmp_path / "message.bin"
    words = tmp_path / "message.txt"
    restored = tmp_path / "restored.bin"
    source.write_bytes(SAMPLE)

    assert cli.main(["encode", "-i", str(source), "-o", str(words)]) == 0
    assert words.read_text(encoding="utf-8") == SAMPLE_TEXT

    assert cli.main(["decode", "--in", str(words), "--out", str(restored)]) == 0
    assert restored.read_bytes() == SAMPLE


def test_encode_custom_format(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "message.bin"
    words = tmp_path / "message.txt"
    source.write_bytes(SAMPLE)

    monkeypatch.delenv("MNEMONICODE_FORMAT", raising=False)
    assert cli.main(["encode", "-i", str(source), "-o", str(words), "--format", "x x x\n"]) == 0
    assert words.read_text(encoding="utf-8") == "digital apollo aroma\nrival artist rebel"


def test_encode_format_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "message.bin"
    words = tmp_path / "message.txt"
    source.write_bytes(SAMPLE)

    monkeypatch.setenv("MNEMONICODE_FORMAT", "x.")
    assert cli.encode_main(["-i", str(source), "-o", str(words)]) == 0
    assert words.read_text(encoding="utf-8") == "digital.apollo.aroma.rival.artist.rebel"


def test_encode_rejects_letter_free_format(tmp_path: Path) -> None:
    source = tmp_path / "message.bin"
    words = tmp_path / "message.txt"
    source.write_bytes(SAMPLE)

    assert cli.main(["encode", "-i", str(source), "-o", str(words), "--format", "1, 2"]) == 1
    assert not words.exists()


def test_decode_invalid_words(tmp_path: Path) -> None:
    words = tmp_path / "message.txt"
    restored = tmp_path / "restored.bin"
    words.write_text("digital apollo zzyzx", encoding="utf-8")

    assert cli.decode_main(["-i", str(words), "-o", str(restored)]) == 1
    assert not restored.exists()


def test_missing_input_file(tmp_path: Path) -> None:
    assert cli.main(["decode", "-i", str(tmp_path / "absent.txt"), "-o", str(tmp_path / "out.bin")]) == 1


def test_unknown_command() -> None:
    assert cli.main(["transmogrify"]) == 1


def test_no_arguments_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([]) == 0
    assert "mnemonicode" in capsys.readouterr().out


def test_stdin_stdout_roundtrip() -> None:
    encoded = _run("encode", stdin=SAMPLE)
    assert encoded.returncode == 0
    assert encoded.stdout == SAMPLE_TEXT.encode("ascii")

    decoded = _run("decode", stdin=encoded.stdout)
    assert decoded.returncode == 0
    assert decoded.stdout == SAMPLE


def test_empty_input_produces_empty_output() -> None:
    encoded = _run("encode")
    assert encoded.returncode == 0
    assert encoded.stdout == b""


def test_decode_error_goes_to_stderr() -> None:
    result = _run("decode", stdin=b"consul-quiet-fax--digital")
    assert result.returncode == 1
    assert result.stdout == b""
    assert b"Unexpected data past 24-bit remainder" in result.stderr


def test_encode_rejects_empty_format(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "message.bin"
    words = tmp_path / "message.txt"
    source.write_bytes(SAMPLE)

    monkeypatch.delenv("MNEMONICODE_FORMAT", raising=False)
    assert cli.main(["encode", "-i", str(source), "-o", str(words), "--format", ""]) == 1
    assert not words.exists()


def test_encode_rejects_empty_format_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "message.bin"
    words = tmp_path / "message.txt"
    source.write_bytes(SAMPLE)

    monkeypatch.setenv("MNEMONICODE_FORMAT", "")
    assert cli.encode_main(["-i", str(source), "-o", str(words)]) == 1
    assert not words.exists()
