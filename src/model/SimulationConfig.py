"""Input model for a wealth projection.

Holds the run configuration, the one-time life events it carries and the
sparse per-year manual overrides. Spec files use the camelCase field
identifiers (baseSalary, lifeEvents, hikePercentage, ...); the dataclasses
here use snake_case and convert at the boundary.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Dict, List, Optional


class EventType(Enum):
    """Kind of life event and how it touches the projection."""

    EXPENSE = "expense"          # Inflated by year index, subtracted from investable cash
    INCOME_JUMP = "income_jump"  # Flat, permanent addition to base salary
    WINDFALL = "windfall"        # Raw amount added to investable cash


@dataclass(frozen=True)
class LifeEvent:
    """A one-time, year-anchored modifier to income, RSU grant or cash flow.

    Attributes:
        year: Calendar year the event applies to
        type: EventType of the event
        amount: Monetary impact; meaning depends on type
        hike_percentage: Optional one-time salary hike percentage for this year
        new_rsu_amount: Optional one-time RSU grant value for this year
        description: Short label for display
        icon: Display icon identifier
        id: Optional identifier assigned by whoever created the event
    """
    year: int
    type: EventType
    amount: float = 0.0
    hike_percentage: Optional[float] = None
    new_rsu_amount: Optional[float] = None
    description: str = ""
    icon: str = ""
    id: Optional[str] = None

    @classmethod
    def from_spec(cls, data: dict) -> "LifeEvent":
        raw_type = data.get('type')
        try:
            event_type = EventType(raw_type)
        except ValueError:
            raise ValueError(f"Unknown life event type '{raw_type}' for year {data.get('year')}")
        return cls(
            year=int(data['year']),
            type=event_type,
            amount=float(data.get('amount', 0)),
            hike_percentage=_optional_float(data.get('hikePercentage')),
            new_rsu_amount=_optional_float(data.get('newRsuAmount')),
            description=data.get('description', ''),
            icon=data.get('icon', ''),
            id=data.get('id'),
        )

    def to_spec(self) -> dict:
        result = {
            'year': self.year,
            'type': self.type.value,
            'amount': self.amount,
            'description': self.description,
            'icon': self.icon,
        }
        if self.id is not None:
            result['id'] = self.id
        if self.hike_percentage is not None:
            result['hikePercentage'] = self.hike_percentage
        if self.new_rsu_amount is not None:
            result['newRsuAmount'] = self.new_rsu_amount
        return result


@dataclass(frozen=True)
class YearOverride:
    """Manual replacement values for a single year; None means not overridden."""
    base: Optional[float] = None
    bonus: Optional[float] = None
    rsu: Optional[float] = None

    @classmethod
    def from_spec(cls, data: dict) -> "YearOverride":
        return cls(
            base=_optional_float(data.get('base')),
            bonus=_optional_float(data.get('bonus')),
            rsu=_optional_float(data.get('rsu')),
        )

    def to_spec(self) -> dict:
        return {k: v for k, v in (('base', self.base), ('bonus', self.bonus), ('rsu', self.rsu)) if v is not None}

    def is_empty(self) -> bool:
        return self.base is None and self.bonus is None and self.rsu is None


OVERRIDE_FIELDS = ('base', 'bonus', 'rsu')


# Defaults for every configuration key, matching a fresh session of the planner
DEFAULT_SPEC = {
    'initialAge': 25,
    'duration': 15,
    'baseSalary': 1000000,
    'rsu': 1000000,
    'initialAssets': 5000000,
    'bonusPercent': 15,
    'hikePercent': 10,
    'inflation': 6,
    'savingsRate': 60,
    'returnConservative': 10,
    'returnModerate': 12,
    'returnAggressive': 15,
}


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable configuration for one projection run.

    All rates and percentages are expressed as percentages (12 means 12%).
    """
    initial_age: int
    start_year: int
    duration: int
    base_salary: float
    rsu: float
    initial_assets: float
    bonus_percent: float
    hike_percent: float
    inflation: float
    return_conservative: float
    return_moderate: float
    return_aggressive: float
    savings_rate: float
    life_events: List[LifeEvent] = field(default_factory=list)

    @property
    def end_year(self) -> int:
        """Last calendar year of the projection horizon."""
        return self.start_year + self.duration

    @classmethod
    def from_spec(cls, spec: dict, validate: bool = True) -> "SimulationConfig":
        """Build a configuration from spec-file fields.

        Accepts either the bare configuration mapping or a program spec with
        the configuration nested under 'config'. Missing keys take the
        DEFAULT_SPEC values; the start year defaults to the current year.

        Raises:
            ValueError: if validate is True and the configuration is invalid
        """
        data = spec.get('config', spec)

        def get(key):
            return data.get(key, DEFAULT_SPEC.get(key))

        hike = data.get('hikePercent', data.get('baseHike', DEFAULT_SPEC['hikePercent']))
        config = cls(
            initial_age=int(get('initialAge')),
            start_year=int(data.get('startYear', date.today().year)),
            duration=int(get('duration')),
            base_salary=float(get('baseSalary')),
            rsu=float(get('rsu')),
            initial_assets=float(get('initialAssets')),
            bonus_percent=float(get('bonusPercent')),
            hike_percent=float(hike),
            inflation=float(get('inflation')),
            return_conservative=float(get('returnConservative')),
            return_moderate=float(get('returnModerate')),
            return_aggressive=float(get('returnAggressive')),
            savings_rate=float(get('savingsRate')),
            life_events=[LifeEvent.from_spec(e) for e in data.get('lifeEvents', [])],
        )
        if validate:
            config.validate()
        return config

    def to_spec(self) -> dict:
        return {
            'initialAge': self.initial_age,
            'startYear': self.start_year,
            'duration': self.duration,
            'baseSalary': self.base_salary,
            'rsu': self.rsu,
            'initialAssets': self.initial_assets,
            'bonusPercent': self.bonus_percent,
            'hikePercent': self.hike_percent,
            'inflation': self.inflation,
            'returnConservative': self.return_conservative,
            'returnModerate': self.return_moderate,
            'returnAggressive': self.return_aggressive,
            'savingsRate': self.savings_rate,
            'lifeEvents': [e.to_spec() for e in self.life_events],
        }

    def validate(self) -> None:
        """Check the configuration before a run.

        Raises:
            ValueError: listing every problem found
        """
        problems = []
        if self.duration < 1:
            problems.append(f"duration must be at least 1 (got {self.duration})")
        if self.initial_age < 0:
            problems.append(f"initialAge cannot be negative (got {self.initial_age})")
        for name, value in (
            ('baseSalary', self.base_salary),
            ('rsu', self.rsu),
            ('initialAssets', self.initial_assets),
            ('bonusPercent', self.bonus_percent),
            ('hikePercent', self.hike_percent),
            ('inflation', self.inflation),
            ('returnConservative', self.return_conservative),
            ('returnModerate', self.return_moderate),
            ('returnAggressive', self.return_aggressive),
            ('savingsRate', self.savings_rate),
        ):
            if value < 0:
                problems.append(f"{name} cannot be negative (got {value})")
        if self.savings_rate > 100:
            problems.append(f"savingsRate cannot exceed 100 (got {self.savings_rate})")

        seen_years = set()
        for event in self.life_events:
            if event.year in seen_years:
                problems.append(f"more than one life event in {event.year}")
            seen_years.add(event.year)

        if problems:
            raise ValueError("Invalid configuration: " + "; ".join(problems))

    def event_for_year(self, year: int) -> Optional[LifeEvent]:
        """First life event anchored to the given year, if any."""
        return next((e for e in self.life_events if e.year == year), None)

    def with_changes(self, **changes) -> "SimulationConfig":
        return replace(self, **changes)


def parse_overrides(data: Optional[dict]) -> Dict[int, YearOverride]:
    """Convert spec-file overrides ({"2028": {"base": ...}}) keyed by year."""
    overrides = {}
    for year, values in (data or {}).items():
        override = YearOverride.from_spec(values or {})
        if not override.is_empty():
            overrides[int(year)] = override
    return overrides


def overrides_to_spec(overrides: Dict[int, YearOverride]) -> dict:
    return {str(year): o.to_spec() for year, o in sorted(overrides.items()) if not o.is_empty()}


def set_override(overrides: Dict[int, YearOverride], year: int, field_name: str, value: float) -> Dict[int, YearOverride]:
    """Return a new override mapping with one field of one year replaced."""
    if field_name not in OVERRIDE_FIELDS:
        raise ValueError(f"Unknown override field '{field_name}'. Use one of: {', '.join(OVERRIDE_FIELDS)}")
    updated = dict(overrides)
    updated[year] = replace(overrides.get(year, YearOverride()), **{field_name: value})
    return updated


def _optional_float(value) -> Optional[float]:
    return None if value is None else float(value)
