import enum

from canonical_opening_hours.temporal_objects import (
    BaseValue, check_type, to_enum
)


class Weekday(enum.IntEnum):
    NONE = 0
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


class NthDayOfTheMonth(enum.IntEnum):
    NONE = 0
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5


class Month(enum.IntEnum):
    NONE = 0
    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12


class VariableDate(enum.IntEnum):
    NONE = 0
    EASTER = 1


def to_tuple(values, expected, name):
    return tuple(check_type(value, expected, name) for value in values)


def to_int(value, name):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("{!r} must be an int, not {!r}.".format(name, value))
    return value


class NthWeekdayOfTheMonthEntry(BaseValue):
    """An entry of the brackets in "Mo[1,3-4]"."""
    _fields = ("start", "end")

    def __init__(self, start=NthDayOfTheMonth.NONE, end=NthDayOfTheMonth.NONE):
        self._set("start", to_enum(NthDayOfTheMonth, start, "start"))
        self._set("end", to_enum(NthDayOfTheMonth, end, "end"))

    def is_empty(self):
        return not self.has_start() and not self.has_end()

    def has_start(self):
        return self.start != NthDayOfTheMonth.NONE

    def has_end(self):
        return self.end != NthDayOfTheMonth.NONE


class WeekdayRange(BaseValue):
    """A day or a range of days of the week, like "Mo-Fr" or "Su[1] -1 day".

    The nth entries and the offset are only meaningful for a single day.
    """
    _fields = ("start", "end", "offset", "nths")

    def __init__(
        self, start=Weekday.NONE, end=Weekday.NONE, offset=0, nths=()
    ):
        self._set("start", to_enum(Weekday, start, "start"))
        self._set("end", to_enum(Weekday, end, "end"))
        self._set("offset", to_int(offset, "offset"))
        self._set("nths", to_tuple(nths, NthWeekdayOfTheMonthEntry, "nths"))

    def has_wday(self, wday):
        """Returns whether the range includes the given weekday.

        Ranges are not cyclic: "Fr-Mo" includes no day.
        """
        if self.is_empty() or wday == Weekday.NONE:
            return False
        if not self.has_end():
            return self.start == wday
        return self.start <= wday <= self.end

    def has_sunday(self):
        return self.has_wday(Weekday.SUNDAY)

    def has_monday(self):
        return self.has_wday(Weekday.MONDAY)

    def has_tuesday(self):
        return self.has_wday(Weekday.TUESDAY)

    def has_wednesday(self):
        return self.has_wday(Weekday.WEDNESDAY)

    def has_thursday(self):
        return self.has_wday(Weekday.THURSDAY)

    def has_friday(self):
        return self.has_wday(Weekday.FRIDAY)

    def has_saturday(self):
        return self.has_wday(Weekday.SATURDAY)

    def has_start(self):
        return self.start != Weekday.NONE

    def has_end(self):
        return self.end != Weekday.NONE

    def has_offset(self):
        return self.offset != 0

    def has_nth(self):
        return bool(self.nths)

    def is_empty(self):
        return self.start == Weekday.NONE and self.end == Weekday.NONE

    def get_days_count(self):
        """Returns the number of weekdays included in the range."""
        return sum(
            1 for wday in Weekday
            if wday != Weekday.NONE and self.has_wday(wday)
        )


class Holiday(BaseValue):
    """A public ("PH") or a school ("SH") holiday."""
    _fields = ("plural", "offset")

    def __init__(self, plural=False, offset=0):
        self._set("plural", bool(plural))
        self._set("offset", to_int(offset, "offset"))

    def is_plural(self):
        return self.plural

    def has_offset(self):
        return self.offset != 0


class Weekdays(BaseValue):
    """The day selector of a rule: holidays and weekday ranges."""
    _fields = ("weekday_ranges", "holidays")

    def __init__(self, weekday_ranges=(), holidays=()):
        self._set(
            "weekday_ranges",
            to_tuple(weekday_ranges, WeekdayRange, "weekday_ranges")
        )
        self._set("holidays", to_tuple(holidays, Holiday, "holidays"))

    def is_empty(self):
        return not self.weekday_ranges and not self.holidays

    def has_weekday(self):
        return bool(self.weekday_ranges)

    def has_holidays(self):
        return bool(self.holidays)


class DateOffset(BaseValue):
    """The offset of a date, like the "+Su" and "-2 days" of
    "Dec 25 +Su -2 days".
    """
    _fields = ("wday_offset", "positive", "offset")

    def __init__(self, wday_offset=Weekday.NONE, positive=True, offset=0):
        self._set("wday_offset", to_enum(Weekday, wday_offset, "wday_offset"))
        self._set("positive", bool(positive))
        self._set("offset", to_int(offset, "offset"))

    def is_empty(self):
        return not self.has_offset() and not self.has_wday_offset()

    def has_wday_offset(self):
        return self.wday_offset != Weekday.NONE

    def has_offset(self):
        return self.offset != 0

    def is_wday_offset_positive(self):
        return self.positive


class MonthDay(BaseValue):
    """A date, like "2020 Dec 25", "Jan", "easter" or "Dec 25 +Su".

    A null year or day number means the year or the day is not given.
    """
    _fields = ("year", "month", "day_num", "variable_date", "offset")

    def __init__(
        self, year=0, month=Month.NONE, day_num=0,
        variable_date=VariableDate.NONE, offset=DateOffset()
    ):
        self._set("year", to_int(year, "year"))
        self._set("month", to_enum(Month, month, "month"))
        self._set("day_num", to_int(day_num, "day_num"))
        self._set(
            "variable_date",
            to_enum(VariableDate, variable_date, "variable_date")
        )
        self._set("offset", check_type(offset, DateOffset, "offset"))

    def is_empty(self):
        return (
            not self.has_year() and not self.has_month() and
            not self.has_day_num() and not self.is_variable()
        )

    def is_variable(self):
        return self.variable_date != VariableDate.NONE

    def has_year(self):
        return self.year != 0

    def has_month(self):
        return self.month != Month.NONE

    def has_day_num(self):
        return self.day_num != 0

    def has_offset(self):
        return not self.offset.is_empty()


class MonthdayRange(BaseValue):
    """A range of dates, like "Jan-Mar", "Dec 24-26" or "Dec 25+"."""
    _fields = ("start", "end", "period", "plus")

    def __init__(self, start=MonthDay(), end=MonthDay(), period=0, plus=False):
        self._set("start", check_type(start, MonthDay, "start"))
        self._set("end", check_type(end, MonthDay, "end"))
        self._set("period", to_int(period, "period"))
        self._set("plus", bool(plus))

    def is_empty(self):
        return not self.has_start() and not self.has_end()

    def has_start(self):
        return not self.start.is_empty()

    def has_end(self):
        # A lonely day number ("Dec 24-26") is an end too.
        return not self.end.is_empty() or self.end.has_day_num()

    def has_period(self):
        return self.period != 0

    def has_plus(self):
        return self.plus


class YearRange(BaseValue):
    """A range of years, like "2020", "2020-2030/2" or "2020+"."""
    _fields = ("start", "end", "period", "plus")

    def __init__(self, start=0, end=0, period=0, plus=False):
        self._set("start", to_int(start, "start"))
        self._set("end", to_int(end, "end"))
        self._set("period", to_int(period, "period"))
        self._set("plus", bool(plus))

    def is_empty(self):
        return not self.has_start() and not self.has_end()

    def is_open(self):
        return self.has_start() and not self.has_end()

    def has_start(self):
        return self.start != 0

    def has_end(self):
        return self.end != 0

    def has_plus(self):
        return self.plus

    def has_period(self):
        return self.period != 0


class WeekRange(BaseValue):
    """A range of ISO week numbers, like the "01-10/2" of "week 01-10/2"."""
    _fields = ("start", "end", "period")

    def __init__(self, start=0, end=0, period=0):
        self._set("start", to_int(start, "start"))
        self._set("end", to_int(end, "end"))
        self._set("period", to_int(period, "period"))

    def is_empty(self):
        return not self.has_start() and not self.has_end()

    def is_open(self):
        return self.has_start() and not self.has_end()

    def has_start(self):
        return self.start != 0

    def has_end(self):
        return self.end != 0

    def has_period(self):
        return self.period != 0
