"""Renders the objects of the model as canonical opening_hours fields.

Each `render_*()` function returns the text of one kind of object,
`render()` chooses the function from the type of its argument, and
`write()` writes the text to a stream.

>>> rule = RuleSequence(
...     weekdays=Weekdays([WeekdayRange(Weekday.MONDAY, Weekday.FRIDAY)]),
...     times=[Timespan(Time.from_hours(9), Time.from_hours(18))],
... )
>>> render(rule)
'Mo-Fr 09:00-18:00'
"""

from canonical_opening_hours.utils import (
    padded_number, render_offset, join_list
)
from canonical_opening_hours.temporal_objects import (
    Event, Time, TimeKind, Timespan, split_duration
)
from canonical_opening_hours.temporal_ranges import (
    Weekday, NthDayOfTheMonth, NthWeekdayOfTheMonthEntry, WeekdayRange,
    Holiday, Weekdays, Month, VariableDate, DateOffset, MonthDay,
    MonthdayRange, YearRange, WeekRange
)
from canonical_opening_hours.rules import Modifier, RuleSequence


WEEKDAYS = {
    Weekday.SUNDAY: "Su",
    Weekday.MONDAY: "Mo",
    Weekday.TUESDAY: "Tu",
    Weekday.WEDNESDAY: "We",
    Weekday.THURSDAY: "Th",
    Weekday.FRIDAY: "Fr",
    Weekday.SATURDAY: "Sa",
    Weekday.NONE: "not-a-day",
}

MONTHS = {
    Month.NONE: "None",
    Month.JAN: "Jan",
    Month.FEB: "Feb",
    Month.MAR: "Mar",
    Month.APR: "Apr",
    Month.MAY: "May",
    Month.JUN: "Jun",
    Month.JUL: "Jul",
    Month.AUG: "Aug",
    Month.SEP: "Sep",
    Month.OCT: "Oct",
    Month.NOV: "Nov",
    Month.DEC: "Dec",
}

EVENTS = {
    Event.NONE: "NotEvent",
    Event.SUNRISE: "sunrise",
    Event.SUNSET: "sunset",
    Event.DAWN: "dawn",
    Event.DUSK: "dusk",
}

VARIABLE_DATES = {
    VariableDate.NONE: "none",
    VariableDate.EASTER: "easter",
}

MODIFIERS = {
    Modifier.DEFAULT_OPEN: '',
    Modifier.OPEN: "open",
    Modifier.CLOSED: "closed",
    Modifier.UNKNOWN: "unknown",
    Modifier.COMMENT: '',
}

UNSET_TIME = "hh:mm"
WEEK_PREFIX = "week "
ALWAYS_OPEN = "24/7"
FALLBACK_SEPARATOR = "||"


class SpacedParts:
    """Collects the parts of a rendering, separated by single spaces.

    A space is put before a part only if something has been put before.
    """
    def __init__(self):
        self.parts = []
        self.space = False

    def put_space(self):
        if self.space:
            self.parts.append(' ')
        self.space = True

    def add(self, part):
        self.put_space()
        self.parts.append(part)

    def append(self, text):
        """Adds some text without any space."""
        self.parts.append(text)

    def __str__(self):
        return ''.join(self.parts)


# Time

def render_event(event):
    return EVENTS[event]


def _render_hours_minutes(hours, minutes):
    return "{}:{}".format(
        padded_number(abs(hours), 2), padded_number(abs(minutes), 2)
    )


def _render_unset(time):
    return UNSET_TIME


def _render_minutes(time):
    return padded_number(abs(time.get_minutes()), 2)


def _render_time_of_day(time):
    return _render_hours_minutes(time.get_hours(), time.get_minutes())


def _render_plain_event(time):
    return render_event(time.event)


def _render_event_offset(time):
    hours, minutes = split_duration(time.duration)
    return "({event}{sign}{offset})".format(
        event=render_event(time.event),
        sign='-' if time.duration.total_seconds() < 0 else '+',
        offset=_render_hours_minutes(hours, minutes)
    )


TIME_RENDERERS = {
    TimeKind.UNSET: _render_unset,
    TimeKind.MINUTES: _render_minutes,
    TimeKind.HOURS_MINUTES: _render_time_of_day,
    TimeKind.EVENT: _render_plain_event,
    TimeKind.EVENT_OFFSET: _render_event_offset,
}


def render_time(time):
    """Returns a string from a Time object.

    >>> render_time(Time.from_hours_minutes(9, 30))
    '09:30'
    >>> render_time(Time.from_event(Event.SUNSET, -60))
    '(sunset-01:00)'
    >>> render_time(Time())
    'hh:mm'
    """
    return TIME_RENDERERS[time.kind](time)


def render_timespan(timespan):
    """Returns a string from a Timespan object."""
    output = render_time(timespan.start)
    if not timespan.is_open():
        output += '-' + render_time(timespan.end)
        if timespan.has_period():
            output += '/' + render_time(timespan.period)
    if timespan.has_plus():
        output += '+'
    return output


def render_timespans(timespans):
    return join_list(timespans, render_timespan)


# Weekdays

def render_weekday(wday):
    return WEEKDAYS[wday]


def render_nth_entry(entry):
    output = ''
    if entry.has_start():
        output += str(int(entry.start))
    if entry.has_end():
        output += '-' + str(int(entry.end))
    return output


def render_weekday_range(weekday_range):
    """Returns a string from a WeekdayRange object.

    The nth entries and the offset are rendered only if the range
    has no end ("Su[1] -1 day").
    """
    output = render_weekday(weekday_range.start)
    if weekday_range.has_end():
        return output + '-' + render_weekday(weekday_range.end)
    if weekday_range.has_nth():
        output += '[{}]'.format(
            join_list(weekday_range.nths, render_nth_entry, ',')
        )
    return output + render_offset(weekday_range.offset, True)


def render_weekday_ranges(weekday_ranges):
    return join_list(weekday_ranges, render_weekday_range)


def render_holiday(holiday):
    if holiday.is_plural():
        return "PH"
    return "SH" + render_offset(holiday.offset, True)


def render_holidays(holidays):
    return join_list(holidays, render_holiday)


def render_weekdays(weekdays):
    """Returns the holidays, then the weekday ranges ("PH, Mo-Fr")."""
    output = render_holidays(weekdays.holidays)
    if weekdays.has_weekday() and weekdays.has_holidays():
        output += ", "
    return output + render_weekday_ranges(weekdays.weekday_ranges)


# Dates

def render_date_offset(date_offset):
    output = ''
    if date_offset.has_wday_offset():
        output += '+' if date_offset.is_wday_offset_positive() else '-'
        output += render_weekday(date_offset.wday_offset)
    return output + render_offset(
        date_offset.offset, date_offset.has_wday_offset()
    )


def render_month(month):
    return MONTHS[month]


def render_variable_date(variable_date):
    return VARIABLE_DATES[variable_date]


def render_monthday(monthday):
    """Returns a string from a MonthDay object ("2020 Dec 25 +Su")."""
    parts = SpacedParts()
    if monthday.has_year():
        parts.add(str(monthday.year))
    if monthday.is_variable():
        parts.add(render_variable_date(monthday.variable_date))
    else:
        if monthday.has_month():
            parts.add(render_month(monthday.month))
        if monthday.has_day_num():
            parts.add(padded_number(monthday.day_num, 2))
    if monthday.has_offset():
        parts.append(' ' + render_date_offset(monthday.offset))
    return str(parts)


def render_monthday_range(monthday_range):
    output = ''
    if monthday_range.has_start():
        output += render_monthday(monthday_range.start)
    if monthday_range.has_end():
        output += '-' + render_monthday(monthday_range.end)
        if monthday_range.has_period():
            output += '/' + str(monthday_range.period)
    elif monthday_range.has_plus():
        output += '+'
    return output


def render_monthday_ranges(monthday_ranges):
    return join_list(monthday_ranges, render_monthday_range)


def render_year_range(year_range):
    if year_range.is_empty():
        return ''
    output = str(year_range.start)
    if year_range.has_end():
        output += '-' + str(year_range.end)
        if year_range.has_period():
            output += '/' + str(year_range.period)
    elif year_range.has_plus():
        output += '+'
    return output


def render_year_ranges(year_ranges):
    return join_list(year_ranges, render_year_range)


def render_week_range(week_range):
    if week_range.is_empty():
        return ''
    output = padded_number(week_range.start, 2)
    if week_range.has_end():
        output += '-' + padded_number(week_range.end, 2)
        if week_range.has_period():
            output += '/' + str(week_range.period)
    return output


def render_week_ranges(week_ranges):
    return WEEK_PREFIX + join_list(week_ranges, render_week_range)


# Rules

def render_modifier(modifier):
    return MODIFIERS[modifier]


def render_rule_sequence(rule):
    """Returns a string from a RuleSequence object.

    "24/7" replaces all the selectors, and so does a comment.
    The modifier and its comment are always rendered.
    """
    parts = SpacedParts()
    if rule.is_twenty_four_hours():
        parts.add(ALWAYS_OPEN)
    elif rule.has_comment():
        parts.add(rule.comment + ':')
    else:
        if rule.has_years():
            parts.add(render_year_ranges(rule.years))
        if rule.has_months():
            parts.add(render_monthday_ranges(rule.months))
        if rule.has_weeks():
            parts.add(render_week_ranges(rule.weeks))
        if rule.has_separator_for_readability():
            parts.append(':')
        if rule.has_weekdays():
            parts.add(render_weekdays(rule.weekdays))
        if rule.has_times():
            parts.add(render_timespans(rule.times))
    if render_modifier(rule.modifier):
        parts.add(render_modifier(rule.modifier))
    if rule.has_modifier_comment():
        parts.add('"{}"'.format(rule.modifier_comment))
    return str(parts)


def _rule_separator(rule):
    if rule.any_separator == FALLBACK_SEPARATOR:
        return ' ' + rule.any_separator + ' '
    return rule.any_separator + ' '


def render_rule_sequences(rules):
    """Returns a full opening_hours field from a list of RuleSequence.

    Each rule is followed by its own separator, except the last one.
    """
    return join_list(rules, render_rule_sequence, _rule_separator)


RENDERERS = {
    Time: render_time,
    Timespan: render_timespan,
    Event: render_event,
    Weekday: render_weekday,
    NthDayOfTheMonth: lambda nth: str(int(nth)),
    NthWeekdayOfTheMonthEntry: render_nth_entry,
    WeekdayRange: render_weekday_range,
    Holiday: render_holiday,
    Weekdays: render_weekdays,
    DateOffset: render_date_offset,
    Month: render_month,
    VariableDate: render_variable_date,
    MonthDay: render_monthday,
    MonthdayRange: render_monthday_range,
    YearRange: render_year_range,
    WeekRange: render_week_range,
    Modifier: render_modifier,
    RuleSequence: render_rule_sequence,
}

LIST_RENDERERS = {
    Timespan: render_timespans,
    WeekdayRange: render_weekday_ranges,
    Holiday: render_holidays,
    MonthdayRange: render_monthday_ranges,
    YearRange: render_year_ranges,
    NthWeekdayOfTheMonthEntry: lambda entries: join_list(
        entries, render_nth_entry, ','
    ),
    WeekRange: render_week_ranges,
    RuleSequence: render_rule_sequences,
}


def render(value):
    """Returns the canonical text of any object of the model.

    A list is rendered like the selector of its items: a list
    of RuleSequence gives a full field, a list of WeekRange
    gives "week ...", etc. Other lists give their items separated
    by commas. An empty list gives an empty string.
    """
    if isinstance(value, (list, tuple)):
        if not value:
            return ''
        renderer = LIST_RENDERERS.get(type(value[0]))
        if renderer is None:
            return join_list(value, render)
    else:
        renderer = RENDERERS.get(type(value))
    if renderer is None:
        raise TypeError("Can't render an object of type {!r}.".format(
            type(value).__name__
        ))
    return renderer(value)


def write(value, sink):
    """Writes the canonical text of an object to a stream.

    Parameters
    ----------
    value
        Any object of the model, or a list of them.
    sink
        Any object with a `write(str)` method (file, io.StringIO, etc).

    Returns
    -------
    The sink, allowing chaining.
    """
    sink.write(render(value))
    return sink
