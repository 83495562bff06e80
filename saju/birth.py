"""
Birth input: validation and normalisation of the fields a chart is built from.

BirthInput is the only way raw caller values enter the engine. Anything
it accepts is a real date in range; anything else raises InvalidInput
before a pillar is computed.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from saju.astro_calendar import is_valid_date
from saju.errors import InvalidInput

MIN_YEAR = 1900
MAX_YEAR = 2100
LUNAR_MONTH_MAX_DAYS = 30


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"


class CalendarType(Enum):
    SOLAR = "solar"
    LUNAR = "lunar"


_GENDER_ALIASES = {"m": Gender.MALE, "남": Gender.MALE, "f": Gender.FEMALE, "여": Gender.FEMALE}


def _as_int(name: str, value, low: Optional[int] = None, high: Optional[int] = None) -> int:
    if isinstance(value, bool):
        raise InvalidInput(f"{name} must be a number, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidInput(f"{name} must be a number, got {value!r}") from None
    if isinstance(value, float) and value != number:
        raise InvalidInput(f"{name} must be a whole number, got {value!r}")
    if low is not None and not low <= number <= high:
        raise InvalidInput(f"{name} must be between {low} and {high}, got {number}")
    return number


def _as_enum(name: str, enum_cls, value, aliases=None):
    if isinstance(value, enum_cls):
        return value
    key = str(value).strip().lower()
    if aliases and key in aliases:
        return aliases[key]
    try:
        return enum_cls(key)
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise InvalidInput(f"{name} must be one of {choices}, got {value!r}") from None


@dataclass(frozen=True)
class BirthInput:
    """
    Normalised birth fields.

    Raw values (ints or numeric strings, enum values or their names) are
    validated and normalised on construction.

    For a lunar calendar tag, year/month/day are the lunar date as given;
    no conversion happens here. When unknown_time is set the hour is kept
    only as an echo and never drives any visible relation.

    Raises:
        InvalidInput: non-numeric or out-of-range field, impossible
            date, or a missing hour while the time is known.
    """
    year: int
    month: int
    day: int
    hour: Optional[int]
    gender: Gender
    calendar: CalendarType = CalendarType.SOLAR
    unknown_time: bool = False
    minute: Optional[int] = None

    def __post_init__(self):
        year = _as_int("year", self.year, MIN_YEAR, MAX_YEAR)
        month = _as_int("month", self.month, 1, 12)
        calendar_type = _as_enum("calendar", CalendarType, self.calendar)
        if calendar_type is CalendarType.LUNAR:
            day = _as_int("day", self.day, 1, LUNAR_MONTH_MAX_DAYS)
        else:
            day = _as_int("day", self.day, 1, 31)
            if not is_valid_date(year, month, day):
                raise InvalidInput(f"{year}-{month:02d}-{day:02d} is not a valid date")

        unknown_time = bool(self.unknown_time)
        hour = self.hour
        if hour is None or hour == "":
            if not unknown_time:
                raise InvalidInput("hour is required unless the birth time is unknown")
            hour = None
        elif unknown_time:
            # placeholder only; any whole number is echoed back unchanged
            hour = _as_int("hour", hour)
        else:
            hour = _as_int("hour", hour, 0, 23)

        minute = self.minute
        if minute is not None and minute != "":
            minute = _as_int("minute", minute, 0, 59)
        else:
            minute = None

        object.__setattr__(self, "year", year)
        object.__setattr__(self, "month", month)
        object.__setattr__(self, "day", day)
        object.__setattr__(self, "hour", hour)
        object.__setattr__(self, "gender", _as_enum("gender", Gender, self.gender, _GENDER_ALIASES))
        object.__setattr__(self, "calendar", calendar_type)
        object.__setattr__(self, "unknown_time", unknown_time)
        object.__setattr__(self, "minute", minute)

    @classmethod
    def create(cls, year, month, day, hour=None, gender="male", calendar="solar",
               unknown_time: bool = False, minute=None) -> "BirthInput":
        """Keyword-friendly constructor with a default gender and calendar."""
        return cls(
            year=year,
            month=month,
            day=day,
            hour=hour,
            gender=gender,
            calendar=calendar,
            unknown_time=unknown_time,
            minute=minute,
        )

    @property
    def is_lunar(self) -> bool:
        return self.calendar is CalendarType.LUNAR

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)

    def record_key(self) -> dict:
        """Fields a saved-subject store keys this person by."""
        return {
            "birth_year": self.year,
            "birth_month": self.month,
            "birth_day": self.day,
            "birth_hour": None if self.unknown_time else self.hour,
            "gender": self.gender.value,
            "calendar": self.calendar.value,
        }

    def to_dict(self):
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "hour": self.hour,
            "minute": self.minute,
            "gender": self.gender.value,
            "calendar": self.calendar.value,
            "unknown_time": self.unknown_time,
        }
