"""
Calendar schemas
"""
from datetime import date as date_type
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from salesgoals.constants import SUPPORTED_LOCALES
from salesgoals.models.holiday import Holiday, HolidayRegistry


class HolidayIn(BaseModel):
    """Schema for a holiday supplied by the caller"""
    date: date_type = Field(..., description="Holiday date (YYYY-MM-DD)")
    name: str = Field(..., min_length=1, description="Holiday name")
    is_worked: bool = Field(False, description="Whether the store opens on this holiday")

    def to_model(self) -> Holiday:
        return Holiday(date=self.date, name=self.name, is_worked=self.is_worked)


class PeriodRequest(BaseModel):
    """Date range plus the holiday calendar that applies to it"""
    start_date: date_type = Field(..., description="First day of the period (inclusive)")
    end_date: date_type = Field(..., description="Last day of the period (inclusive)")
    holidays: List[HolidayIn] = Field(default_factory=list, description="Holiday calendar")
    locale: Optional[str] = Field(None, description="Weekday name locale (defaults to WEEKDAY_LOCALE)")

    @field_validator("holidays")
    @classmethod
    def validate_unique_holiday_dates(cls, v: List[HolidayIn]) -> List[HolidayIn]:
        """At most one holiday per date"""
        seen = set()
        for holiday in v:
            if holiday.date in seen:
                raise ValueError(f"Duplicate holiday for date {holiday.date}")
            seen.add(holiday.date)
        return v

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in SUPPORTED_LOCALES:
            raise ValueError(f"locale must be one of {list(SUPPORTED_LOCALES)}")
        return v

    def holiday_registry(self) -> HolidayRegistry:
        return HolidayRegistry(holiday.to_model() for holiday in self.holidays)


class DayOut(BaseModel):
    """Schema for a classified day"""
    date: date_type
    weekday_name: str
    weekday_short_name: str
    is_weekend: bool
    is_saturday: bool
    is_sunday: bool
    is_holiday: bool
    holiday_worked: bool
    weight: Decimal

    model_config = ConfigDict(from_attributes=True)


class ScheduleOut(BaseModel):
    """Schema for an expanded period"""
    start_date: date_type
    end_date: date_type
    total_days: int
    payable_days: int
    total_weight: Decimal
    days: List[DayOut]
