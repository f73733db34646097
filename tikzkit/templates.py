"""The list of recently used LaTeX templates."""

from __future__ import annotations

import html
import json
from pathlib import Path
from typing import Iterable

DEFAULT_MAX_COUNT = 10

_KEY_MAX_COUNT = "TemplateRecentNumber"
_KEY_RECENT = "TemplateRecent"
_KEY_FILE = "TemplateFile"


def _escape(text: str) -> str:
    return html.escape(text, quote=False).replace('"', "&quot;")


def template_description(replace: str) -> str:
    """Return the help paragraph explaining how ``replace`` is used in a template."""
    return (
        "<p>The template contains the code "
        "of a complete LaTeX document in which the TikZ picture will be "
        "included and which will be typesetted to produce the preview "
        "image.  The string {} in the template will be replaced by the "
        "TikZ code.</p>"
    ).format(_escape(replace))


def _read_settings(path: Path) -> dict:
    try:
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: settings file must hold a JSON object")
    return data


class RecentTemplates:
    """Recently used template files, most recent first, with a current choice."""

    def __init__(self, items: Iterable[str] = (), current: str | None = None,
                 max_count: int = DEFAULT_MAX_COUNT) -> None:
        if max_count < 0:
            raise ValueError("max_count must not be negative")
        self.max_count = max_count
        self.items = list(items)[:max_count]
        if current is not None and current in self.items:
            self.current = current
        else:
            self.current = self.items[0] if self.items else ""

    def __repr__(self) -> str:
        return (f"RecentTemplates(items={self.items!r}, current={self.current!r}, "
                f"max_count={self.max_count})")

    def set_file_name(self, file_name: str) -> None:
        """Move ``file_name`` to the top of the list and make it current."""
        if file_name in self.items:
            self.items.remove(file_name)
        if self.max_count == 0:
            self.current = ""
            return
        self.items.insert(0, file_name)
        del self.items[self.max_count:]
        self.current = file_name

    @classmethod
    def load(cls, path: str | Path) -> RecentTemplates:
        """Read the recent templates from the settings file at ``path``."""
        data = _read_settings(Path(path))
        max_count = int(data.get(_KEY_MAX_COUNT, DEFAULT_MAX_COUNT))
        items = [str(item) for item in data.get(_KEY_RECENT, [])]
        current = data.get(_KEY_FILE)
        return cls(items, None if current is None else str(current), max_count)

    def save(self, path: str | Path) -> None:
        """Write the list and current choice to ``path``, keeping other settings."""
        path = Path(path)
        data = _read_settings(path)
        data[_KEY_RECENT] = list(self.items)
        data[_KEY_FILE] = self.current
        with path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2, ensure_ascii=False)