"""JSON-file translations for bot copy, keyed by language code."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

DEFAULT_LOCALES_PATH = Path(__file__).with_name("locales")


@lru_cache(maxsize=32)
def _load_table(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fp:
        return json.load(fp)


class I18nService:
    def __init__(self, *, locales_path: str | Path | None = None, default_locale: str = "en") -> None:
        self.locales_path = Path(locales_path or DEFAULT_LOCALES_PATH)
        self.default_locale = default_locale.lower()

    def available_locales(self) -> list[str]:
        if not self.locales_path.is_dir():
            return []
        return sorted(path.stem for path in self.locales_path.glob("*.json"))

    def resolve_locale(self, locale: str | None) -> str:
        """Map a Telegram language tag such as ``pt-BR`` to a bundled locale."""

        if not locale:
            return self.default_locale
        language = locale.lower().replace("_", "-").split("-", 1)[0]
        if (self.locales_path / f"{language}.json").exists():
            return language
        return self.default_locale

    def gettext(self, key: str, *, locale: str | None = None, **kwargs: Any) -> str:
        resolved = self.resolve_locale(locale)
        text = self._table(resolved).get(key)
        if text is None and resolved != self.default_locale:
            text = self._table(self.default_locale).get(key)
        if text is None:
            text = key
        return text.format(**kwargs) if kwargs else text

    def _table(self, locale: str) -> dict[str, str]:
        return _load_table(self.locales_path / f"{locale}.json")


__all__ = ["I18nService"]
