from pathlib import Path

from conftest import write
from docsite.rendering.io import atomic_write_text, copy_verbatim


def test_atomic_write_creates_parents_and_sets_mode(tmp_path: Path):
    target = tmp_path / "a/b/index.html"

    atomic_write_text(target, "<p>hi</p>", mode=0o600)

    assert target.read_text() == "<p>hi</p>"
    assert target.stat().st_mode & 0o777 == 0o600
    assert [p.name for p in target.parent.iterdir()] == ["index.html"]


def test_atomic_write_replaces_existing_file(tmp_path: Path):
    target = write(tmp_path / "index.html", "old")

    atomic_write_text(target, "new")

    assert target.read_text() == "new"


def test_copy_single_file(tmp_path: Path):
    source = write(tmp_path / "src/favicon.ico", b"\x00\x01\x02")

    copied = copy_verbatim(source, tmp_path / "_site/favicon.ico")

    assert copied == [tmp_path / "_site/favicon.ico"]
    assert copied[0].read_bytes() == b"\x00\x01\x02"


def test_copy_directory_reports_only_source_files(tmp_path: Path):
    write(tmp_path / "src/css/a.css", "a")
    write(tmp_path / "src/css/sub/b.css", "b")
    write(tmp_path / "_site/css/stale.css", "stale")

    copied = copy_verbatim(tmp_path / "src/css", tmp_path / "_site/css")

    assert copied == [tmp_path / "_site/css/a.css", tmp_path / "_site/css/sub/b.css"]
    assert (tmp_path / "_site/css/sub/b.css").read_text() == "b"
    assert (tmp_path / "_site/css/stale.css").exists()
