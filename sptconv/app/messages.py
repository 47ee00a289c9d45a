from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Optional

DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "messages.json"
DEFAULT_LOCALE = "en"


class MessageCatalog:
    _cache: Dict[Path, Dict[str, Dict[str, str]]] = {}

    def __init__(self, messages: Dict[str, str], locale: str = DEFAULT_LOCALE) -> None:
        self._messages = dict(messages)
        self.locale = locale

    @classmethod
    def load(cls, locale: Optional[str] = None, path: Path = DATA_PATH) -> "MessageCatalog":
        key = path.resolve()
        catalogs = cls._cache.get(key)
        if catalogs is None:
            catalogs = json.loads(path.read_text(encoding="utf-8"))
            cls._cache[key] = catalogs
        selected = resolve_locale(locale, catalogs.keys())
        messages = dict(catalogs.get(DEFAULT_LOCALE, {}))
        messages.update(catalogs.get(selected, {}))
        return cls(messages, selected)

    def format(self, key: str, **kwargs) -> str:
        template = self._messages.get(key)
        if template is None:
            raise KeyError(f"Unknown message '{key}'")
        return template.format(**kwargs)


def resolve_locale(locale: Optional[str], available) -> str:
    available = set(available)
    candidates = [locale] if locale else [os.environ.get("LC_ALL"), os.environ.get("LANG")]
    for candidate in candidates:
        if not candidate:
            continue
        lang = candidate.split(".", 1)[0].split("_", 1)[0].split("-", 1)[0].lower()
        if lang in available:
            return lang
    return DEFAULT_LOCALE
