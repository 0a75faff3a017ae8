"""
Optional-field DTOs describing a load-test run report.

Every field is optional: producers emit different shapes across versions
(``aggregate.latencies`` vs top-level ``latencies``, missing ``codes`` or
``rps``). ``ReportDTO.salvage`` validates field by field so that one bad
field never discards the rest of the report.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, ValidationError


def _read(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


class RpsDTO(BaseModel):
    """Throughput summary; only ``mean`` is consumed."""

    model_config = ConfigDict(extra="allow", from_attributes=True)

    mean: Optional[float] = None


class AggregateDTO(BaseModel):
    """Aggregate section of newer report shapes."""

    model_config = ConfigDict(extra="allow", from_attributes=True)

    latencies: Optional[List[Any]] = None


class ReportDTO(BaseModel):
    """Run report with every field optional."""

    model_config = ConfigDict(extra="allow", from_attributes=True)

    timestamp: Optional[Union[int, float, str]] = None
    rps: Optional[RpsDTO] = None
    # counts are filtered entry by entry when aggregated
    codes: Optional[Dict[Union[int, str], Any]] = None
    aggregate: Optional[AggregateDTO] = None
    latencies: Optional[List[Any]] = None

    @classmethod
    def salvage(cls, raw: Any) -> Tuple["ReportDTO", List[str]]:
        """Validate ``raw`` one field at a time.

        Returns:
            The DTO built from the fields that validated, and the names of the
            fields that were present but dropped as malformed.
        """
        if raw is None:
            return cls(), []
        kept: Dict[str, Any] = {}
        dropped: List[str] = []
        for name in cls.model_fields:
            value = _read(raw, name)
            if value is None:
                continue
            try:
                kept[name] = getattr(cls.model_validate({name: value}), name)
            except ValidationError:
                dropped.append(name)
        return cls(**kept), dropped


__all__ = ["RpsDTO", "AggregateDTO", "ReportDTO"]
