"""Translatable text holding one value per language."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping

from .langs import ALL, Lang, UnknownLangError, is_valid

__all__ = ["Content", "Chain"]


class Chain:
    """Ordered fallback languages used when a translation is missing."""

    __slots__ = ("fallbacks",)

    def __init__(self, *args: Lang) -> None:
        self.fallbacks: tuple[Lang, ...] = tuple(args)

    def __repr__(self) -> str:
        return f"Chain({', '.join(str(lang) for lang in self.fallbacks)})"


class Content:
    """A string translated to several languages."""

    def __init__(self, values: Mapping[Lang, str] | None = None) -> None:
        self._values: dict[Lang, str] = dict(values or {})

    @classmethod
    def single(cls, lang: Lang, value: str) -> Content:
        """Content with a single translated value."""
        content = cls()
        content.set(lang, value)
        return content

    @classmethod
    def parse(cls, values: Mapping[str, str]) -> Content:
        """Build content from codes, raising for codes that are not known."""
        content = cls()
        for code, value in values.items():
            if not is_valid(code):
                raise UnknownLangError(code, prefix="unknown lang")
            lang = next((la for la in ALL if la.code == code), None)
            if lang is not None:
                content.set(lang, value)
        return content

    def set(self, lang: Lang, value: str) -> None:
        """Set the value of a language; an empty value removes it."""
        if value:
            self._values[lang] = value
        else:
            self._values.pop(lang, None)

    def get(self, lang: Lang) -> str:
        """Value for a language, or an empty string."""
        return self._values.get(lang, "")

    def is_empty(self) -> bool:
        """Whether no language has a value."""
        return not self._values

    def clear(self, lang: Lang) -> None:
        """Remove the value of one language."""
        self._values.pop(lang, None)

    def clear_all(self) -> None:
        """Remove every value."""
        self._values.clear()

    def get_chain(self, chain: Chain, lang: Lang) -> str:
        """Value for a language, falling back through groups and then any value."""
        if not self._values:
            return ""
        if lang in self._values:
            return self._values[lang]
        for wanted in (lang, *chain.fallbacks):
            for key, value in self._values.items():
                if key.group == wanted.group:
                    return value
        return next(iter(self._values.values()))

    def to_json(self) -> str:
        """JSON object mapping language codes to values."""
        return json.dumps(self.plain_dict(), ensure_ascii=False, sort_keys=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> Content:
        """Read content from a JSON object of codes to values."""
        try:
            raw = json.loads(data)
        except json.JSONDecodeError as exc:
            raise ValueError(f"cannot unmarshal langs: {exc}") from exc
        if not isinstance(raw, dict):
            raise ValueError("cannot unmarshal langs: expected a JSON object")
        values: dict[Lang, str] = {}
        for code, value in raw.items():
            if not isinstance(value, str):
                raise ValueError(
                    f"cannot unmarshal langs: value for {code!r} is not a string"
                )
            values[Lang.from_text(code)] = value
        return cls(values)

    def to_dict(self) -> dict[Lang, str]:
        """Copy of the values keyed by language."""
        return dict(self._values)

    def plain_dict(self) -> dict[str, str]:
        """Copy of the values keyed by language code."""
        return {lang.code: value for lang, value in self._values.items()}

    @classmethod
    def from_db(cls, value: object) -> Content:
        """Read content from a database column value; NULL gives empty content."""
        if value is None:
            return cls()
        if isinstance(value, (str, bytes, bytearray)):
            return cls.from_json(bytes(value) if isinstance(value, bytearray) else value)
        raise TypeError(f"sqltypes: unknown content type {type(value).__name__}")

    def to_db(self) -> str:
        """Value stored in a database column."""
        return self.to_json()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return self._values == other._values

    def __iter__(self) -> Iterator[Lang]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Content({self.plain_dict()!r})"