"""RenderOptions: immutable configuration for a render pass.

RenderOptions is a frozen dataclass validated on construction.  It can also
be built from the property names the review-summary component exposes to page
builders (``hideEmptyFields``, ``skipFieldsList``, ``collapsibleSections``,
``title``) via ``RenderOptions.from_mapping``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any

__all__ = ["RenderOptions"]

# Component property name -> RenderOptions attribute
_ALIASES = {
    "hideEmptyFields": "hide_empty_fields",
    "skipFieldsList": "skip_keys",
    "skipKeys": "skip_keys",
    "collapsibleSections": "collapsible_sections",
}


def _parse_skip_keys(raw: Any) -> frozenset[str]:
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        raw = raw.split(",")
    if not isinstance(raw, Iterable):
        msg = f"skip_keys must be a string or an iterable of strings, got {type(raw).__name__}"
        raise ValueError(msg)
    keys = set()
    for key in raw:
        if not isinstance(key, str):
            msg = f"skip_keys entries must be strings, got {key!r}"
            raise ValueError(msg)
        if key.strip():
            keys.add(key.strip())
    return frozenset(keys)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Immutable options for ``render``.

    Attributes:
        hide_empty_fields: Drop fields whose display value is the empty
            placeholder.  Containers left without children are then pruned.
        skip_keys: Keys excluded from matching at every level.  Accepts any
            iterable of strings or a comma-separated string; stored as a
            frozenset of stripped, non-empty names.
        collapsible_sections: Mark sections as collapsible for the caller's UI.
        expanded: Initial expanded state of collapsible sections.  Sections
            that are not collapsible are always expanded.
        title: Optional heading carried on the resulting ``SectionTree``.
    """

    hide_empty_fields: bool = False
    skip_keys: frozenset[str] = field(default_factory=frozenset)
    collapsible_sections: bool = False
    expanded: bool = True
    title: str = ""

    def __post_init__(self) -> None:
        # frozen + slots: normalise through object.__setattr__
        object.__setattr__(self, "skip_keys", _parse_skip_keys(self.skip_keys))
        if not isinstance(self.title, str):
            msg = f"title must be a string, got {type(self.title).__name__}"
            raise ValueError(msg)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> RenderOptions:
        """Build options from snake_case names or component property names.

        Raises:
            ValueError: If ``options`` contains an unknown name.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for name, value in options.items():
            attr = _ALIASES.get(name, name)
            if attr not in known:
                msg = f"unknown render option {name!r}"
                raise ValueError(msg)
            kwargs[attr] = value
        return cls(**kwargs)

    def is_skipped(self, key: str) -> bool:
        return key in self.skip_keys

    def initial_expanded(self) -> bool:
        return self.expanded if self.collapsible_sections else True
