from pathlib import Path

import pytest


def write(path: Path, content: str | bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


PNG_BYTES = bytes(range(256)) * 4


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A project tree with every asset the i18n configuration copies."""
    write(tmp_path / "src/css/style.css", "body { color: #333; }\n")
    write(tmp_path / "src/css/print/print.css", "@media print { nav { display: none; } }\n")
    write(tmp_path / "src/images/logo.png", PNG_BYTES)
    write(tmp_path / "src/js/app.js", "console.log('docs');\n")
    write(tmp_path / "src/favicon.ico", b"\x00\x00\x01\x00icon")
    return tmp_path
