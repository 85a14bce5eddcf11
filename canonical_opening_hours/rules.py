import enum

from canonical_opening_hours.temporal_objects import (
    BaseValue, Timespan, check_type, to_enum
)
from canonical_opening_hours.temporal_ranges import (
    MonthdayRange, WeekRange, Weekdays, YearRange, to_tuple
)


class Modifier(enum.IntEnum):
    DEFAULT_OPEN = 0
    OPEN = 1
    CLOSED = 2
    UNKNOWN = 3
    COMMENT = 4


class RuleSequence(BaseValue):
    """A rule of an opening_hours field, like "Mo-Fr 10:00-20:00".

    Parameters
    ----------
    years : list[YearRange], optional
    months : list[MonthdayRange], optional
    weeks : list[WeekRange], optional
    weekdays : Weekdays, optional
    times : list[Timespan], optional
    twenty_four_hours : bool, optional
        Whether the rule is "24/7". The other selectors are ignored if so.
    modifier : Modifier, optional
        The state of the rule ("open", "closed", "unknown").
    comment : str, optional
        A comment used in place of the selectors (like in
        "Christmas: closed"). The other selectors are ignored if given.
    modifier_comment : str, optional
        A comment on the state (like in 'Mo closed "except in summer"').
        Given without the quotes.
    separator_for_readability : bool, optional
        Whether a colon follows the wide selectors (like in "Dec 25: off").
    any_separator : str, optional
        The separator between this rule and the next one
        (';', ',' or '||').
    """
    _fields = (
        "years", "months", "weeks", "weekdays", "times",
        "twenty_four_hours", "modifier", "comment", "modifier_comment",
        "separator_for_readability", "any_separator"
    )

    def __init__(
        self, years=(), months=(), weeks=(), weekdays=Weekdays(), times=(),
        twenty_four_hours=False, modifier=Modifier.DEFAULT_OPEN,
        comment='', modifier_comment='', separator_for_readability=False,
        any_separator=''
    ):
        self._set("years", to_tuple(years, YearRange, "years"))
        self._set("months", to_tuple(months, MonthdayRange, "months"))
        self._set("weeks", to_tuple(weeks, WeekRange, "weeks"))
        self._set("weekdays", check_type(weekdays, Weekdays, "weekdays"))
        self._set("times", to_tuple(times, Timespan, "times"))
        self._set("twenty_four_hours", bool(twenty_four_hours))
        self._set("modifier", to_enum(Modifier, modifier, "modifier"))
        self._set("comment", check_type(comment, str, "comment"))
        self._set(
            "modifier_comment",
            check_type(modifier_comment, str, "modifier_comment")
        )
        self._set(
            "separator_for_readability", bool(separator_for_readability)
        )
        self._set(
            "any_separator", check_type(any_separator, str, "any_separator")
        )

    def is_empty(self):
        return (
            not self.has_years() and not self.has_months() and
            not self.has_weeks() and not self.has_weekdays() and
            not self.has_times() and not self.is_twenty_four_hours()
        )

    def is_twenty_four_hours(self):
        return self.twenty_four_hours

    def has_years(self):
        return bool(self.years)

    def has_months(self):
        return bool(self.months)

    def has_weeks(self):
        return bool(self.weeks)

    def has_weekdays(self):
        return not self.weekdays.is_empty()

    def has_times(self):
        return bool(self.times)

    def has_comment(self):
        return bool(self.comment)

    def has_modifier_comment(self):
        return bool(self.modifier_comment)

    def has_separator_for_readability(self):
        return self.separator_for_readability
