"""Message catalog reading MediaWiki style ``<language>.json`` files."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from notiheze.domain.parameters import MISSING_PARAMETER

logger = logging.getLogger(__name__)

_PARAMETER_PATTERN = re.compile(r"\$(\d+)")
_METADATA_KEY = "@metadata"


def _format_parameter(value: Any) -> str:
    if value is None or value is MISSING_PARAMETER:
        return ""
    return str(value)


@dataclass(frozen=True)
class Message:
    """A message key with its positional parameters, rendered on demand."""

    key: str
    params: tuple[Any, ...] = ()
    catalog: "JsonMessageCatalog | None" = field(default=None, repr=False, compare=False)

    def text(self, language: str | None = None) -> str:
        """Return the message in ``language`` with ``$n`` placeholders filled."""

        template = self.catalog.lookup(self.key, language) if self.catalog else None
        if template is None:
            return f"⧼{self.key}⧽"

        def substitute(match: re.Match[str]) -> str:
            index = int(match.group(1)) - 1
            if 0 <= index < len(self.params):
                return _format_parameter(self.params[index])
            return match.group(0)

        return _PARAMETER_PATTERN.sub(substitute, template)

    def __str__(self) -> str:
        return self.text()


class JsonMessageCatalog:
    """Load messages from ``<messages_dir>/<language>.json`` files.

    Files are read lazily the first time a language is requested. Keys missing
    from a language fall back to ``default_language``.
    """

    def __init__(self, messages_dir: str | Path, *, default_language: str = "en") -> None:
        self._messages_dir = Path(messages_dir)
        self._default_language = default_language
        self._languages: dict[str, dict[str, str]] = {}

    @property
    def default_language(self) -> str:
        return self._default_language

    def render(self, key: str, params: Sequence[Any]) -> Message:
        return Message(key=key, params=tuple(params), catalog=self)

    def lookup(self, key: str, language: str | None = None) -> str | None:
        """Return the raw message text for ``key`` or ``None`` when unknown."""

        for code in dict.fromkeys((language or self._default_language, self._default_language)):
            messages = self._messages_for(code)
            if key in messages:
                return messages[key]
        logger.debug("Message '%s' is not defined for language '%s'", key, language)
        return None

    def _messages_for(self, language: str) -> dict[str, str]:
        if language not in self._languages:
            self._languages[language] = self._load(language)
        return self._languages[language]

    def _load(self, language: str) -> dict[str, str]:
        if not re.fullmatch(r"[a-z]{2,3}(?:-[a-z0-9]+)*", language):
            logger.warning("Ignoring invalid language code '%s'", language)
            return {}

        path = self._messages_dir / f"{language}.json"
        if not path.is_file():
            return {}

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Could not read message file %s: %s", path, exc)
            return {}

        if not isinstance(data, dict):
            logger.error("Message file %s does not contain an object", path)
            return {}

        return {
            str(key): str(value)
            for key, value in data.items()
            if key != _METADATA_KEY and isinstance(value, str)
        }


__all__ = ["Message", "JsonMessageCatalog"]
