"""
Holiday calendar models
"""
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Union


@dataclass(frozen=True)
class Holiday:
    date: date
    name: str
    is_worked: bool = False


class HolidayRegistry:
    """
    Read-only date-keyed view over a set of holidays.

    At most one holiday per date is expected; when a date repeats, the last
    record wins.
    """

    def __init__(self, holidays: Iterable[Holiday] = ()):
        self._by_date: Mapping[date, Holiday] = MappingProxyType(
            {holiday.date: holiday for holiday in holidays}
        )

    @classmethod
    def of(cls, holidays: Optional[Union[Iterable[Holiday], "HolidayRegistry"]]) -> "HolidayRegistry":
        """Wrap a plain iterable of holidays; registries pass through unchanged."""
        if isinstance(holidays, HolidayRegistry):
            return holidays
        return cls(holidays or ())

    def get(self, day: date) -> Optional[Holiday]:
        return self._by_date.get(day)

    def __contains__(self, day: object) -> bool:
        return day in self._by_date

    def __iter__(self) -> Iterator[Holiday]:
        return iter(sorted(self._by_date.values(), key=lambda h: h.date))

    def __len__(self) -> int:
        return len(self._by_date)
