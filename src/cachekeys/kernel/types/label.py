"""Type/namespace label prefixed to derived cache keys."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class TypeLabel:
    """Short and fully-qualified form of a key prefix.

    Key derivation only ever reads the two strings; where they come from is
    up to the caller. Empty strings are valid labels.

    Examples::

        TypeLabel("Widget", "app.models.Widget")
        TypeLabel.of(Widget)          # derived from a class
        TypeLabel.coerce("orders")    # same text for both forms
    """

    short: str
    qualified: str

    def __post_init__(self) -> None:
        if not isinstance(self.short, str) or not isinstance(self.qualified, str):
            raise TypeError("TypeLabel forms must be str")

    def __str__(self) -> str:
        return self.short

    def select(self, qualified: bool = False) -> str:
        """Return the qualified form when *qualified* is true, else the short form."""
        return self.qualified if qualified else self.short

    @classmethod
    def of(cls, type_: type) -> "TypeLabel":
        """Label a class by ``__name__`` and ``module.__qualname__``."""
        return cls(type_.__name__, f"{type_.__module__}.{type_.__qualname__}")

    @classmethod
    def coerce(cls, label: "TypeLabel | type | str") -> "TypeLabel":
        if isinstance(label, TypeLabel):
            return label
        if isinstance(label, str):
            return cls(label, label)
        if isinstance(label, type):
            return cls.of(label)
        raise TypeError(f"Cannot build a TypeLabel from {type(label).__name__}")


__all__ = ["TypeLabel"]
