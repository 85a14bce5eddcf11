"""Provides validators that raise exceptions in case of invalid objects.

The model accepts any value, even ones which can't be written
in a valid field (like "Mo[7]" or "week 60"). These validators
check the objects against the opening_hours specification, as a
separate pass: rendering never requires them.
"""

import datetime
import logging

from canonical_opening_hours.exceptions import ValidationError
from canonical_opening_hours.rendering import render
from canonical_opening_hours.temporal_objects import Time, Timespan, TimeKind
from canonical_opening_hours.temporal_ranges import (
    NthWeekdayOfTheMonthEntry, WeekdayRange, Holiday, Weekdays, DateOffset,
    MonthDay, MonthdayRange, YearRange, WeekRange
)
from canonical_opening_hours.rules import Modifier, RuleSequence

logger = logging.getLogger(__name__)

RULE_SEPARATORS = ('', ';', ',', '||')
MAX_HOURS = 48
MAX_EVENT_OFFSET = datetime.timedelta(hours=24)
HOUR = datetime.timedelta(hours=1)
MIN_YEAR = 1900
MAX_WEEK = 53
MAX_MONTHDAY = 31


def invalid(value, reason):
    raise ValidationError(
        "The part {part!r} is invalid: {reason}.".format(
            part=render(value), reason=reason
        )
    )


def validate_time(time):
    kind = time.kind
    if kind == TimeKind.HOURS_MINUTES:
        if time.duration < datetime.timedelta():
            invalid(time, "a time can't be negative")
        if time.get_hours() > MAX_HOURS or (
            time.get_hours() == MAX_HOURS and time.get_minutes()
        ):
            invalid(time, "a time can't exceed 48:00")
    elif kind == TimeKind.MINUTES:
        if not datetime.timedelta() <= time.duration < HOUR:
            invalid(time, "minutes must be between 0 and 59")
    elif kind == TimeKind.EVENT_OFFSET:
        if abs(time.duration) > MAX_EVENT_OFFSET:
            invalid(time, "an event offset can't exceed 24 hours")
    elif kind == TimeKind.UNSET:
        invalid(time, "the time has no value")


def validate_timespan(timespan):
    if not timespan.has_start():
        invalid(timespan, "a timespan must have a start")
    validate_time(timespan.start)
    if timespan.has_end():
        validate_time(timespan.end)
    if timespan.has_period():
        if not timespan.has_end():
            invalid(timespan, "a period requires an end")
        if timespan.period.is_event():
            invalid(timespan, "a period can't be an event")
        validate_time(timespan.period)


def validate_nth_entry(entry):
    if not entry.has_start():
        invalid(entry, "an nth entry must have a start")
    if entry.has_end() and entry.end < entry.start:
        invalid(entry, "the end of an nth entry is before its start")


def validate_weekday_range(weekday_range):
    if not weekday_range.has_start():
        invalid(weekday_range, "a weekday range must have a start")
    if weekday_range.has_end():
        if weekday_range.has_nth():
            invalid(weekday_range, "nth entries require a single day")
        if weekday_range.has_offset():
            invalid(weekday_range, "an offset requires a single day")
    if weekday_range.has_offset() and not weekday_range.has_nth():
        invalid(weekday_range, "an offset requires nth entries")
    for entry in weekday_range.nths:
        validate_nth_entry(entry)


def validate_holiday(holiday):
    """Any holiday can be written."""
    pass


def validate_weekdays(weekdays):
    for holiday in weekdays.holidays:
        validate_holiday(holiday)
    for weekday_range in weekdays.weekday_ranges:
        validate_weekday_range(weekday_range)


def validate_date_offset(date_offset):
    """Any date offset can be written."""
    pass


def validate_monthday(monthday):
    if monthday.has_year() and monthday.year < MIN_YEAR:
        invalid(monthday, "years start at {}".format(MIN_YEAR))
    if monthday.has_day_num():
        if not 1 <= monthday.day_num <= MAX_MONTHDAY:
            invalid(monthday, "a day number must be between 1 and 31")
        if not monthday.has_month() and not monthday.is_variable():
            # A lonely day number is only valid as the end of a range.
            invalid(monthday, "a day number requires a month")
    validate_date_offset(monthday.offset)


def validate_monthday_range(monthday_range):
    if not monthday_range.has_start():
        invalid(monthday_range, "a date range must have a start")
    validate_monthday(monthday_range.start)
    if monthday_range.has_end():
        end = monthday_range.end
        if end.has_month() or end.has_year() or end.is_variable():
            validate_monthday(end)
        elif not 1 <= end.day_num <= MAX_MONTHDAY:
            invalid(monthday_range, "a day number must be between 1 and 31")
    elif monthday_range.has_period():
        invalid(monthday_range, "a period requires an end")


def validate_year_range(year_range):
    if not year_range.has_start():
        invalid(year_range, "a year range must have a start")
    if year_range.start < MIN_YEAR:
        invalid(year_range, "years start at {}".format(MIN_YEAR))
    if year_range.has_end():
        if year_range.end < year_range.start:
            invalid(year_range, "the end of the range is before its start")
    elif year_range.has_period():
        invalid(year_range, "a period requires an end")


def validate_week_range(week_range):
    if not week_range.has_start():
        invalid(week_range, "a week range must have a start")
    for week in (week_range.start, week_range.end):
        if week and not 1 <= week <= MAX_WEEK:
            invalid(week_range, "week numbers must be between 1 and 53")
    if week_range.has_period() and not week_range.has_end():
        invalid(week_range, "a period requires an end")


def validate_rule_sequence(rule):
    if rule.any_separator not in RULE_SEPARATORS:
        invalid(rule, "{!r} is not a rule separator".format(
            rule.any_separator
        ))
    if rule.has_modifier_comment() and '"' in rule.modifier_comment:
        invalid(rule, "a comment can't contain quotes")
    if rule.is_twenty_four_hours():
        return
    if rule.has_comment():
        if '"' in rule.comment:
            invalid(rule, "a comment can't contain quotes")
        return
    if (
        rule.is_empty() and rule.modifier == Modifier.DEFAULT_OPEN and
        not rule.has_modifier_comment()
    ):
        invalid(rule, "the rule is empty")
    for year_range in rule.years:
        validate_year_range(year_range)
    for monthday_range in rule.months:
        validate_monthday_range(monthday_range)
    for week_range in rule.weeks:
        validate_week_range(week_range)
    validate_weekdays(rule.weekdays)
    for timespan in rule.times:
        validate_timespan(timespan)


def validate_rule_sequences(rules):
    for i, rule in enumerate(rules):
        validate_rule_sequence(rule)
        # Only the last rule can go without a separator.
        if i < len(rules) - 1 and not rule.any_separator:
            invalid(rule, "a rule must be followed by a separator")


VALIDATORS = {
    Time: validate_time,
    Timespan: validate_timespan,
    NthWeekdayOfTheMonthEntry: validate_nth_entry,
    WeekdayRange: validate_weekday_range,
    Holiday: validate_holiday,
    Weekdays: validate_weekdays,
    DateOffset: validate_date_offset,
    MonthDay: validate_monthday,
    MonthdayRange: validate_monthday_range,
    YearRange: validate_year_range,
    WeekRange: validate_week_range,
    RuleSequence: validate_rule_sequence,
}


def validate(value):
    """Raises a ValidationError if the object is not valid.

    Lists of RuleSequence are validated rule by rule.
    """
    if isinstance(value, (list, tuple)):
        for rule in value:
            if not isinstance(rule, RuleSequence):
                raise TypeError(
                    "Can't validate a list of {!r}, only lists of "
                    "RuleSequence.".format(type(rule).__name__)
                )
        validate_rule_sequences(value)
        return
    validator = VALIDATORS.get(type(value))
    if validator is None:
        raise TypeError("Can't validate an object of type {!r}.".format(
            type(value).__name__
        ))
    validator(value)


def is_valid(value):
    """Returns whether the object is valid, logging the reason if not."""
    try:
        validate(value)
    except ValidationError as e:
        logger.debug(str(e))
        return False
    return True
