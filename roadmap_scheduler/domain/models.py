"""Plain data models for project/engineer scheduling."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


def _pick(data: Dict[str, Any], *keys: str) -> Any:
    """Return the first present key, accepting snake_case and camelCase spellings."""
    for key in keys:
        if key in data:
            return data[key]
    return None


def _parse_hours(value: Any) -> Optional[float]:
    # Blank strings count as a missing estimate
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return float(value)


@dataclass(frozen=True)
class Engineer:
    """Engineer supplied by the host application. Identity is the id."""

    id: str
    name: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.id

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Engineer":
        if "id" not in data:
            raise ValueError(f"Engineer record missing id: {data!r}")
        return cls(id=str(data["id"]), name=str(data.get("name") or ""))


@dataclass(frozen=True)
class Allocation:
    engineer_id: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Allocation":
        engineer_id = _pick(data, "engineer_id", "engineerId")
        if engineer_id is None:
            raise ValueError(f"Allocation record missing engineer id: {data!r}")
        return cls(engineer_id=str(engineer_id))


@dataclass
class Project:
    """
    Project to be scheduled.

    ``estimated_hours`` and ``allocations`` are optional: a project lacking
    either is reported and skipped by the scheduler, not rejected here.
    """

    name: str
    priority: int
    estimated_hours: Optional[float] = None
    allocations: Optional[List[Allocation]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        """
        Build a Project from a decoded JSON/dict record.

        Accepts both ``estimated_hours``/``engineer_id`` and the camelCase
        ``estimatedHours``/``engineerId`` spellings.
        """
        raw_allocations = data.get("allocations")
        allocations = None
        if raw_allocations is not None:
            allocations = [
                a if isinstance(a, Allocation) else Allocation.from_dict(a)
                for a in raw_allocations
            ]

        hours = _pick(data, "estimated_hours", "estimatedHours")
        return cls(
            name=str(data["name"]),
            priority=int(data.get("priority", 0)),
            estimated_hours=_parse_hours(hours),
            allocations=allocations,
        )


@dataclass(frozen=True)
class Assignment:
    """One engineer's share of a project, in week indexes from the horizon start."""

    project_name: str
    engineer_id: str
    start_week: int
    weeks_needed: int

    @property
    def end_week(self) -> int:
        return self.start_week + self.weeks_needed

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class EngineerScheduleState:
    """Per-call tracking of the next free week for each known engineer."""

    current_week: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def for_engineers(cls, engineers: List[Engineer]) -> "EngineerScheduleState":
        return cls(current_week={eng.id: 0 for eng in engineers})

    def __contains__(self, engineer_id: str) -> bool:
        return engineer_id in self.current_week

    def week_of(self, engineer_id: str) -> int:
        # Unknown engineers count as week 0 here; they are skipped on commit.
        return self.current_week.get(engineer_id, 0)

    def commit(self, engineer_id: str, end_week: int) -> None:
        self.current_week[engineer_id] = end_week
