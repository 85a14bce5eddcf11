"""A model of the opening_hours fields from OpenStreetMap.

Provides the objects describing each part of a field (times, weekdays,
holidays, dates, years, weeks and rules) and renders them back as
canonical opening_hours fields, for display, normalization or
comparison of parsed fields.

To get started, simply do:
>>> import canonical_opening_hours as coh
>>> rule = coh.RuleSequence(
...     weekdays=coh.Weekdays([
...         coh.WeekdayRange(coh.Weekday.MONDAY, coh.Weekday.SATURDAY)
...     ]),
...     times=[coh.Timespan(coh.Time.from_hours(10), coh.Time.from_hours(19))]
... )
>>> coh.render([rule])
'Mo-Sa 10:00-19:00'
"""
# flake8: noqa

from canonical_opening_hours.version import __version__, __appname__, __author__, __licence__
from canonical_opening_hours.temporal_objects import Event, TimeKind, Time, Timespan
from canonical_opening_hours.temporal_ranges import (
    Weekday, NthDayOfTheMonth, NthWeekdayOfTheMonthEntry, WeekdayRange,
    Holiday, Weekdays, Month, VariableDate, DateOffset, MonthDay,
    MonthdayRange, YearRange, WeekRange
)
from canonical_opening_hours.rules import Modifier, RuleSequence
from canonical_opening_hours.rendering import render, write
from canonical_opening_hours.resolvers import (
    EventResolver, NullEventResolver, FixedEventResolver, AstralEventResolver
)
from canonical_opening_hours.validators import validate, is_valid
from canonical_opening_hours import exceptions
