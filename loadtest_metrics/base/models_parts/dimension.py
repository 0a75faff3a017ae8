"""
Dimension name/value pair attached to every record of a run.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Tuple


@dataclass(frozen=True)
class Dimension:
    """Backend dimension used for filtering and grouping metrics."""

    name: str
    value: str

    def to_wire(self) -> Dict[str, str]:
        return {"Name": self.name, "Value": self.value}


def coerce_dimensions(raw: Iterable[Any] | None) -> Tuple[Dimension, ...]:
    """Build a dimension tuple from config-shaped entries.

    Accepts ``Dimension`` instances, ``{"Name": ..., "Value": ...}`` mappings
    (lower-case keys also accepted) and two-element ``[name, value]`` pairs.

    Raises:
        ValueError: when an entry has none of those shapes.
    """
    if raw is None:
        return ()
    out = []
    for entry in raw:
        if isinstance(entry, Dimension):
            out.append(entry)
        elif isinstance(entry, Mapping):
            name = entry.get("Name", entry.get("name"))
            value = entry.get("Value", entry.get("value"))
            if name is None or value is None:
                raise ValueError(f"dimension mapping needs Name and Value: {dict(entry)!r}")
            out.append(Dimension(str(name), str(value)))
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            out.append(Dimension(str(entry[0]), str(entry[1])))
        else:
            raise ValueError(f"unsupported dimension entry: {entry!r}")
    return tuple(out)


__all__ = ["Dimension", "coerce_dimensions"]
