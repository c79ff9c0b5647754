"""Typing contexts and evaluation environments."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Self

from dtcore.kernel.value import Type, Value


@dataclass(frozen=True)
class _Bindings[T](Mapping[str, T]):
    """
    Persistent name-keyed bindings.

    Representation:
        ``entries`` holds ``(name, item)`` pairs, newest first. Lookup returns
        the first match, so a newer binding shadows an older one with the
        same name.

    Extension discipline:
        ``extend`` returns a new mapping and never rewrites the receiver, so a
        binding introduced for one sub-expression is invisible to its
        siblings and to the caller.
    """

    entries: tuple[tuple[str, T], ...] = ()

    @classmethod
    def of(cls, *pairs: tuple[str, T], **items: T) -> Self:
        """Build a mapping from pairs and keywords, later entries winning."""
        result = cls()
        for name, item in (*pairs, *items.items()):
            result = result.extend(name, item)
        return result

    def extend(self, name: str, item: T) -> Self:
        return type(self)(((name, item), *self.entries))

    def __getitem__(self, name: str) -> T:
        for bound, item in self.entries:
            if bound == name:
                return item
        raise KeyError(name)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self.entries:
            if name not in seen:
                seen.add(name)
                yield name

    def __len__(self) -> int:
        return len({name for name, _ in self.entries})

    def __str__(self) -> str:
        if not self.entries:
            return f"{type(self).__name__}()"
        lines = "".join(f"  {name}: {self[name]}\n" for name in self)
        return f"{type(self).__name__}(\n{lines})"


@dataclass(frozen=True)
class Ctx(_Bindings[Type]):
    """Typing context mapping names to their types."""


@dataclass(frozen=True)
class Env(_Bindings[Value]):
    """Evaluation environment mapping names to their values."""


__all__ = ["Ctx", "Env"]
