from pathlib import Path

import pytest

from src.ingestion import (
    ManuscriptError,
    ManuscriptTooLargeError,
    MissingManuscriptError,
    UnsupportedExtensionError,
    load_manuscript,
    load_manuscript_bytes,
)


def test_load_manuscript_reads_tex_file(tmp_path: Path) -> None:
    path = tmp_path / "paper.tex"
    path.write_text("Hello", encoding="utf-8")

    upload = load_manuscript(path)

    assert upload.filename == "paper.tex"
    assert upload.content == "Hello"
    assert upload.size_bytes == 5


def test_load_manuscript_rejects_other_extensions(tmp_path: Path) -> None:
    path = tmp_path / "paper.txt"
    path.write_text("Hello", encoding="utf-8")

    with pytest.raises(UnsupportedExtensionError, match="Only .tex files are supported"):
        load_manuscript(path)


def test_load_manuscript_missing_file(tmp_path: Path) -> None:
    with pytest.raises(MissingManuscriptError):
        load_manuscript(tmp_path / "absent.tex")


def test_load_manuscript_enforces_size_ceiling(tmp_path: Path) -> None:
    path = tmp_path / "big.tex"
    path.write_text("too long", encoding="utf-8")

    with pytest.raises(ManuscriptTooLargeError):
        load_manuscript(path, max_bytes=3)


def test_load_manuscript_accepts_custom_extensions(tmp_path: Path) -> None:
    path = tmp_path / "chapter.ltx"
    path.write_text("Body", encoding="utf-8")

    upload = load_manuscript(path, allowed_extensions=(".tex", ".ltx"))
    assert upload.content == "Body"


def test_load_bytes_defaults_filename_and_replaces_bad_utf8() -> None:
    upload = load_manuscript_bytes(None, b"caf\xe9")

    assert upload.filename == "uploaded.tex"
    assert upload.content == "caf\ufffd"
    assert upload.size_bytes == 4


def test_load_bytes_extension_check_is_case_insensitive() -> None:
    assert load_manuscript_bytes("PAPER.TEX", b"x").filename == "PAPER.TEX"


def test_load_bytes_missing_payload() -> None:
    with pytest.raises(MissingManuscriptError, match="Missing file"):
        load_manuscript_bytes("paper.tex", None)


def test_loader_errors_are_value_errors() -> None:
    assert issubclass(ManuscriptError, ValueError)
    with pytest.raises(ValueError):
        load_manuscript_bytes("notes.md", b"x")
