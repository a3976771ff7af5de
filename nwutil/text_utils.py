from pathlib import Path


def append_text(path, text: str) -> None:
    """Append *text* and a newline to *path*; empty text only creates the file."""
    with Path(path).expanduser().open("a", encoding="utf-8") as f:
        if text:
            f.write(text + "\n")
