"""Known languages and helpers to look them up by code."""

from __future__ import annotations

import json
from dataclasses import dataclass

__all__ = [
    "Lang",
    "UnknownLangError",
    "ALL",
    "EMPTY",
    "CA",
    "DE",
    "DE_DE",
    "EN",
    "EN_GB",
    "EN_US",
    "ES",
    "ES_ES",
    "EU",
    "FR",
    "FR_FR",
    "IT",
    "IT_IT",
    "JA",
    "PT",
    "PT_PT",
    "RU",
    "is_valid",
    "parse",
    "native_name",
]


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


class UnknownLangError(ValueError):
    """Raised when a language code is not one of the known languages."""

    def __init__(self, code: str, prefix: str = "langs: unknown code") -> None:
        self.code = code
        super().__init__(f"{prefix} {_quote(code)}")


@dataclass(frozen=True)
class Lang:
    """A language identified by its code, with its native name and group."""

    code: str = ""
    native: str = ""
    group: str = ""

    def __str__(self) -> str:
        return self.code

    def to_json(self) -> str:
        """Serialize the language as a JSON string holding its code."""
        return _quote(self.code)

    @classmethod
    def from_json(cls, data: str | bytes) -> Lang:
        """Read a language from a JSON string; unknown codes give the empty lang."""
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8")
        try:
            code = json.loads(data)
        except json.JSONDecodeError as exc:
            raise ValueError(f"langs: invalid JSON lang: {exc}") from exc
        if not isinstance(code, str):
            raise ValueError(f"langs: expected a JSON string, got {type(code).__name__}")
        return cls.from_text(code)

    @classmethod
    def from_text(cls, text: str | bytes) -> Lang:
        """Find the language with this code, ignoring case; empty lang if unknown."""
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("utf-8")
        return _lookup(text) or EMPTY

    def to_db(self) -> str:
        """Value stored in a database column."""
        return self.code

    @classmethod
    def from_db(cls, value: object) -> Lang:
        """Read a language from a database column value."""
        if value is None:
            raise TypeError("langs: cannot scan None into Lang")
        if isinstance(value, (str, bytes, bytearray)):
            return cls.from_text(value)
        raise TypeError(f"langs: cannot scan {type(value).__name__} into Lang")

    def is_empty(self) -> bool:
        """Whether this is the empty language."""
        return self == EMPTY


CA = Lang("ca", "Català", "ca")
DE = Lang("de", "Deutsch", "de")
DE_DE = Lang("de-DE", "Deutsch", "de")
EN = Lang("en", "English", "en")
EN_GB = Lang("en-GB", "English", "en")
EN_US = Lang("en-US", "English", "en")
ES = Lang("es", "Español", "es")
ES_ES = Lang("es-ES", "Español", "es")
EU = Lang("eu", "Euskera", "eu")
FR = Lang("fr", "Français", "fr")
FR_FR = Lang("fr-FR", "Français", "fr")
IT = Lang("it", "Italiano", "it")
IT_IT = Lang("it-IT", "Italiano", "it")
JA = Lang("ja", "日本語", "ja")
PT = Lang("pt", "Portugues", "pt")
PT_PT = Lang("pt-PT", "Portugues", "pt")
RU = Lang("ru", "Русский", "ru")

EMPTY = Lang()

ALL: tuple[Lang, ...] = (
    CA,
    DE,
    DE_DE,
    EN,
    EN_GB,
    EN_US,
    ES,
    ES_ES,
    EU,
    FR,
    FR_FR,
    IT,
    IT_IT,
    JA,
    PT,
    PT_PT,
    RU,
)


def _lookup(code: str) -> Lang | None:
    folded = code.casefold()
    return next((lang for lang in ALL if lang.code.casefold() == folded), None)


def is_valid(code: str) -> bool:
    """Whether the code names a known language, ignoring case."""
    return _lookup(code) is not None


def parse(code: str) -> Lang:
    """Return the known language for a code, ignoring case."""
    lang = _lookup(code)
    if lang is None:
        raise UnknownLangError(code)
    return lang


def native_name(lang: Lang) -> str:
    """Native name of a language; same as ``lang.native``."""
    return lang.native