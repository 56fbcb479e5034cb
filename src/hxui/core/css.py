"""
Fluent builder for BEM class strings.

Tokens are kept in insertion order and never de-duplicated; blank tokens are
dropped when they are added, so ``build()`` is always a plain space join.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum


def enum_token(value: Enum) -> str:
    """Class token for an enum member.

    str-valued enums carry their token table in their values; anything else
    falls back to the lowercased member name.
    """
    if isinstance(value.value, str):
        return value.value
    return value.name.lower()


class ClassBuilder:
    """Ordered list of CSS class tokens."""

    __slots__ = ("_tokens",)

    def __init__(self, initial: str | None = None) -> None:
        self._tokens: list[str] = []
        self.add(initial)

    def add(self, token: str | None) -> ClassBuilder:
        if token is not None and token.strip():
            self._tokens.append(token)
        return self

    def add_range(self, *tokens: str | None | Iterable[str | None]) -> ClassBuilder:
        for token in tokens:
            if token is None or isinstance(token, str):
                self.add(token)
            else:
                for item in token:
                    self.add(item)
        return self

    def add_if(self, token: str | None, condition: bool) -> ClassBuilder:
        if condition:
            self.add(token)
        return self

    def add_choice(self, condition: bool, when_true: str, when_false: str) -> ClassBuilder:
        return self.add(when_true if condition else when_false)

    def add_variant(self, block: str, variant: str | Enum | None) -> ClassBuilder:
        """Append ``{block}--{variant}`` when a variant is given."""
        if isinstance(variant, Enum):
            variant = enum_token(variant)
        if variant:
            self.add(f"{block}--{variant}")
        return self

    def add_size(self, block: str, size: str | Enum | None) -> ClassBuilder:
        # Same shape as a variant, kept separate so call sites read by axis.
        return self.add_variant(block, size)

    def add_enum(self, prefix: str, value: Enum | None) -> ClassBuilder:
        if value is not None:
            self.add(f"{prefix}{enum_token(value)}")
        return self

    def add_from(self, factory: Callable[[], str | None]) -> ClassBuilder:
        return self.add(factory())

    @property
    def count(self) -> int:
        return len(self._tokens)

    @property
    def is_empty(self) -> bool:
        return not self._tokens

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(self._tokens)

    def build(self) -> str:
        return " ".join(self._tokens)

    def __str__(self) -> str:
        return self.build()

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"ClassBuilder({self.build()!r})"
