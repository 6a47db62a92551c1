"""
Raw personnel record access.

A raw record carries either an ``employeeInfo`` or an ``externalInfo``
sub-record. Both share the same shape. A record resolves to a Worker
that reads each field from its preferred sub-record first and from the
other one second, through the alias-aware accessors below. Absent,
null or wrongly typed fields read as None or as an empty list;
sentinels are chosen by the formatters, not here.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal

WorkerKind = Literal["employee", "external"]

# Canonical field name -> names used by the original data feed
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "employeeInfo": ("employees",),
    "externalInfo": ("externals",),
    "rateLastTwelveMonths": ("utilisationRateLastTwelveMonths",),
    "rateYearToDate": ("utilisationRateYearToDate",),
    "monthlyBreakdown": ("lastThreeMonthsIndividually",),
}


@dataclass(frozen=True)
class Worker:
    """
    The sub-record a raw record resolved to.

    Fields missing from ``info`` are read from ``fallback``, the other
    sub-record of the same raw record, so an empty stub never hides data.
    """

    kind: WorkerKind
    info: Mapping[str, Any]
    fallback: Mapping[str, Any] = field(default_factory=dict)

    def _first(self, *path: str) -> Any:
        """First non-null value at ``path``, primary sub-record first."""
        for source in (self.info, self.fallback):
            value: Any = source
            for key in path:
                value = get_field(value, key)
            if value is not None:
                return value
        return None

    @property
    def name(self) -> Any:
        return self._first("name")

    @property
    def rate_last_twelve_months(self) -> Any:
        return self._first("workforceUtilisation", "rateLastTwelveMonths")

    @property
    def rate_year_to_date(self) -> Any:
        return self._first("workforceUtilisation", "rateYearToDate")

    @property
    def monthly_breakdown(self) -> list[Mapping[str, Any]]:
        """Breakdown entries, skipping anything that is not a mapping."""
        return entries(self._first("workforceUtilisation", "monthlyBreakdown"))

    @property
    def earnings_by_month(self) -> list[Any]:
        """
        Raw potential earnings entries, in source order.

        An empty list in the primary sub-record falls through to the
        fallback one.
        """
        for source in (self.info, self.fallback):
            costs = get_mapping(source, "costsByMonth")
            value = get_field(costs, "potentialEarningsByMonth")
            if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
                continue
            if value:
                return list(value)
        return []


def get_field(mapping: Any, key: str) -> Any:
    """
    Read a field by canonical name, falling back to its aliases.

    Args:
        mapping: Any value; non-mappings have no fields.
        key: Canonical field name.

    Returns:
        The first non-null value found, or None.
    """
    if not isinstance(mapping, Mapping):
        return None
    for name in (key, *FIELD_ALIASES.get(key, ())):
        value = mapping.get(name)
        if value is not None:
            return value
    return None


def get_mapping(mapping: Any, key: str) -> Mapping[str, Any]:
    """Read a nested sub-mapping, or an empty mapping when absent."""
    value = get_field(mapping, key)
    return value if isinstance(value, Mapping) else {}


def entries(value: Any) -> list[Mapping[str, Any]]:
    """Mapping entries of a list field; anything else yields no entries."""
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def resolve_worker(record: Any) -> Worker | None:
    """
    Resolve a raw record to whichever sub-record is present.

    The employee sub-record is preferred should a record carry both,
    unless it is an empty stub. The other sub-record stays available as
    the per-field fallback.

    Args:
        record: Raw record as loaded from the source document.

    Returns:
        Worker, or None for a record with neither sub-record.
    """
    employee = get_field(record, "employeeInfo")
    employee = employee if isinstance(employee, Mapping) else None
    external = get_field(record, "externalInfo")
    external = external if isinstance(external, Mapping) else None

    if employee:
        return Worker(kind="employee", info=employee, fallback=external or {})
    if external is not None:
        return Worker(kind="external", info=external, fallback=employee or {})
    if employee is not None:
        return Worker(kind="employee", info=employee)
    return None
