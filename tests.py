import unittest
import datetime
import io

import astral
import pytz

from canonical_opening_hours import rendering
from canonical_opening_hours.rendering import render, write
from canonical_opening_hours.utils import (
    padded_number, render_offset, join_list
)
from canonical_opening_hours.temporal_objects import (
    Event, TimeKind, Time, Timespan, split_duration
)
from canonical_opening_hours.temporal_ranges import (
    Weekday, NthDayOfTheMonth, NthWeekdayOfTheMonthEntry, WeekdayRange,
    Holiday, Weekdays, Month, VariableDate, DateOffset, MonthDay,
    MonthdayRange, YearRange, WeekRange
)
from canonical_opening_hours.rules import Modifier, RuleSequence
from canonical_opening_hours.resolvers import (
    NullEventResolver, FixedEventResolver, AstralEventResolver
)
from canonical_opening_hours.validators import validate, is_valid
from canonical_opening_hours.exceptions import (
    COHError, ValidationError, EventResolutionError
)

unittest.util._MAX_LENGTH = 1000


def hm(hours, minutes=0):
    return Time.from_hours_minutes(hours, minutes)


def span(start, end):
    return Timespan(hm(*start), hm(*end))


def wdays(*ranges, holidays=()):
    return Weekdays(list(ranges), list(holidays))


MO_FR = WeekdayRange(Weekday.MONDAY, Weekday.FRIDAY)


class TestUtils(unittest.TestCase):
    def test_padded_number(self):
        self.assertEqual(padded_number(5, 2), "05")
        self.assertEqual(padded_number(12, 2), "12")
        self.assertEqual(padded_number(5), "5")
        self.assertEqual(padded_number(2020, 2), "2020")

    def test_render_offset(self):
        self.assertEqual(render_offset(0, True), '')
        self.assertEqual(render_offset(0, False), '')
        self.assertEqual(render_offset(1, False), "+1 day")
        self.assertEqual(render_offset(1, True), " +1 day")
        self.assertEqual(render_offset(-1, False), "-1 day")
        self.assertEqual(render_offset(-2, False), "-2 days")
        self.assertEqual(render_offset(3, True), " +3 days")

    def test_join_list(self):
        self.assertEqual(join_list([]), '')
        self.assertEqual(join_list([1]), "1")
        self.assertEqual(join_list([1, 2, 3]), "1, 2, 3")
        self.assertEqual(join_list([1, 2, 3], separator=','), "1,2,3")
        self.assertEqual(
            join_list(
                [1, 2, 3],
                render_item=lambda i: str(i * 10),
                separator=lambda i: " {} ".format(i)
            ),
            "10 1 20 2 30"
        )

    def test_split_duration(self):
        self.assertEqual(
            split_duration(datetime.timedelta(minutes=90)), (1, 30)
        )
        self.assertEqual(
            split_duration(datetime.timedelta(minutes=-90)), (-1, -30)
        )
        self.assertEqual(split_duration(datetime.timedelta()), (0, 0))


class TestTime(unittest.TestCase):
    maxDiff = None

    def test_hours_minutes(self):
        time = hm(9, 30)
        self.assertEqual(time.kind, TimeKind.HOURS_MINUTES)
        self.assertTrue(time.is_hours_minutes())
        self.assertTrue(time.is_time())
        self.assertTrue(time.has_value())
        self.assertFalse(time.is_event())
        self.assertEqual(time.get_hours(), 9)
        self.assertEqual(time.get_minutes(), 30)
        self.assertEqual(render(time), "09:30")
        self.assertEqual(render(Time.from_hours(18)), "18:00")
        self.assertEqual(render(hm(0, 5)), "00:05")
        self.assertEqual(render(hm(26)), "26:00")

    def test_literal_round_trip(self):
        for hours in range(0, 25):
            for minutes in (0, 1, 9, 10, 30, 59):
                text = render(hm(hours, minutes))
                self.assertRegex(text, r"^[0-9]{2}:[0-9]{2}$")
                parsed = tuple(int(part) for part in text.split(':'))
                self.assertEqual(parsed, (hours, minutes))

    def test_minutes(self):
        time = Time.from_minutes(45)
        self.assertEqual(time.kind, TimeKind.MINUTES)
        self.assertTrue(time.is_minutes())
        self.assertFalse(time.is_time())
        self.assertTrue(time.has_value())
        self.assertEqual(render(time), "45")
        self.assertEqual(render(Time.from_minutes(5)), "05")
        # More than one hour: displayed with hours.
        time = Time.from_minutes(90)
        self.assertEqual(time.kind, TimeKind.HOURS_MINUTES)
        self.assertEqual(render(time), "01:30")
        self.assertEqual(
            Time.from_minutes(datetime.timedelta(minutes=45)), Time(45, False, True)
        )

    def test_unset(self):
        time = Time()
        self.assertEqual(time.kind, TimeKind.UNSET)
        self.assertFalse(time.has_value())
        self.assertFalse(time.is_time())
        self.assertEqual(render(time), "hh:mm")
        self.assertEqual(render(Time(90)), "hh:mm")

    def test_events(self):
        time = Time.from_event(Event.SUNRISE)
        self.assertEqual(time.kind, TimeKind.EVENT)
        self.assertTrue(time.is_event())
        self.assertTrue(time.is_time())
        self.assertFalse(time.is_event_offset())
        self.assertFalse(time.is_hours_minutes())
        self.assertEqual(render(time), "sunrise")
        self.assertEqual(render(Time(event=Event.SUNSET)), "sunset")
        self.assertEqual(render(Time(event=Event.DAWN)), "dawn")
        self.assertEqual(render(Time(event=Event.DUSK)), "dusk")
        self.assertEqual(render(Time.from_event(Event.DUSK, 0)), "dusk")

    def test_event_offsets(self):
        time = Time.from_event(Event.SUNSET, -60)
        self.assertEqual(time.kind, TimeKind.EVENT_OFFSET)
        self.assertTrue(time.is_event_offset())
        self.assertTrue(time.is_event())
        self.assertEqual(render(time), "(sunset-01:00)")
        self.assertEqual(
            render(Time.from_event(Event.DAWN, 90)), "(dawn+01:30)"
        )
        self.assertEqual(
            render(Time.from_event(Event.DUSK, 15)), "(dusk+00:15)"
        )
        self.assertEqual(
            render(Time.from_event(
                Event.SUNRISE, datetime.timedelta(hours=-2, minutes=-15)
            )),
            "(sunrise-02:15)"
        )

    def test_events_without_resolver(self):
        time = Time.from_event(Event.SUNRISE)
        self.assertEqual(time.get_hours(), 0)
        self.assertEqual(time.get_minutes(), 0)
        time = Time.from_event(Event.SUNSET, 90)
        self.assertEqual(time.get_hours(), 1)
        self.assertEqual(time.get_minutes(), 30)
        self.assertEqual(
            time.get_hours(NullEventResolver()), time.get_hours()
        )

    def test_events_with_resolver(self):
        resolver = FixedEventResolver({
            "sunrise": datetime.time(8, 0),
            Event.SUNSET: hm(21, 30),
        })
        time = Time.from_event(Event.SUNRISE)
        self.assertEqual(time.get_hours(resolver), 8)
        self.assertEqual(time.get_minutes(resolver), 0)
        time = Time.from_event(Event.SUNRISE, 90)
        self.assertEqual(time.get_hours(resolver), 9)
        self.assertEqual(time.get_minutes(resolver), 30)
        time = Time.from_event(Event.SUNSET, -60)
        self.assertEqual(
            time.get_duration(resolver),
            datetime.timedelta(hours=20, minutes=30)
        )
        # The rendering doesn't depend on the resolver.
        self.assertEqual(render(time), "(sunset-01:00)")
        # Not events.
        self.assertEqual(hm(10, 15).get_hours(resolver), 10)

    def test_arithmetic(self):
        self.assertEqual(
            render(Time.from_hours(9) + Time.from_minutes(30)), "09:30"
        )
        self.assertEqual(
            render(Time.from_hours(10) - Time.from_minutes(30)), "09:30"
        )
        total = Time.from_minutes(30) + Time.from_minutes(20)
        self.assertTrue(total.is_minutes())
        self.assertEqual(render(total), "50")
        total = Time.from_minutes(50) + Time.from_minutes(20)
        self.assertTrue(total.is_hours_minutes())
        self.assertEqual(render(total), "01:10")
        # Adding unset times gives at least minutes.
        self.assertTrue((Time() + Time()).is_minutes())
        negative = -Time.from_minutes(90)
        self.assertEqual(negative.get_hours(), -1)
        self.assertEqual(negative.get_minutes(), -30)
        self.assertEqual(render(negative), "01:30")
        with self.assertRaises(TypeError):
            Time.from_hours(1) + 1

    def test_value_object(self):
        time = hm(9, 30)
        self.assertEqual(time, hm(9, 30))
        self.assertNotEqual(time, hm(9, 31))
        self.assertNotEqual(time, "09:30")
        self.assertEqual(hash(time), hash(hm(9, 30)))
        self.assertEqual(len({time, hm(9, 30), hm(10)}), 2)
        with self.assertRaises(AttributeError):
            time.duration = datetime.timedelta()
        with self.assertRaises(AttributeError):
            del time.event
        self.assertEqual(
            time.replace(duration=datetime.timedelta(hours=10)), hm(10)
        )
        with self.assertRaises(TypeError):
            time.replace(hours=10)
        self.assertEqual(str(time), "09:30")
        self.assertIn("duration=", repr(time))

    def test_types(self):
        with self.assertRaises(TypeError):
            Time("09:00")
        with self.assertRaises(TypeError):
            Time(event="sunrise")
        with self.assertRaises(ValueError):
            Time(event=12)


class TestTimespan(unittest.TestCase):
    def test_closed(self):
        timespan = span((9, 0), (18, 0))
        self.assertFalse(timespan.is_open())
        self.assertFalse(timespan.is_empty())
        self.assertFalse(timespan.has_plus())
        self.assertFalse(timespan.has_period())
        self.assertEqual(render(timespan), "09:00-18:00")

    def test_open(self):
        timespan = Timespan(hm(9))
        self.assertTrue(timespan.is_open())
        self.assertTrue(timespan.has_start())
        self.assertFalse(timespan.has_end())
        self.assertEqual(render(timespan), "09:00")
        self.assertEqual(render(timespan.replace(plus=True)), "09:00+")

    def test_period(self):
        self.assertEqual(
            render(Timespan(hm(10), hm(16), Time.from_minutes(30))),
            "10:00-16:00/30"
        )
        self.assertEqual(
            render(Timespan(hm(10), hm(16), Time.from_minutes(90))),
            "10:00-16:00/01:30"
        )
        # Not rendered for open timespans.
        self.assertEqual(
            render(Timespan(hm(10), period=Time.from_minutes(30))), "10:00"
        )

    def test_plus_with_end(self):
        self.assertEqual(
            render(Timespan(hm(9), hm(18), plus=True)), "09:00-18:00+"
        )

    def test_events(self):
        self.assertEqual(
            render(Timespan(
                Time.from_event(Event.SUNRISE), Time.from_event(Event.SUNSET)
            )),
            "sunrise-sunset"
        )
        self.assertEqual(
            render(Timespan(
                Time.from_event(Event.SUNRISE, -60),
                Time.from_event(Event.SUNSET, 60)
            )),
            "(sunrise-01:00)-(sunset+01:00)"
        )

    def test_empty(self):
        timespan = Timespan()
        self.assertTrue(timespan.is_empty())
        self.assertFalse(timespan.is_open())
        self.assertEqual(render(timespan), "hh:mm-hh:mm")

    def test_list(self):
        self.assertEqual(
            render([span((10, 0), (12, 0)), span((13, 0), (19, 0))]),
            "10:00-12:00, 13:00-19:00"
        )
        with self.assertRaises(TypeError):
            Timespan("10:00", "12:00")


class TestWeekdays(unittest.TestCase):
    def test_weekday_names(self):
        self.assertEqual(
            [render(wday) for wday in Weekday if wday != Weekday.NONE],
            ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]
        )
        self.assertEqual(render(Weekday.NONE), "not-a-day")
        self.assertLess(Weekday.SUNDAY, Weekday.SATURDAY)

    def test_has_wday(self):
        self.assertTrue(MO_FR.has_wday(Weekday.TUESDAY))
        self.assertTrue(MO_FR.has_wday(Weekday.MONDAY))
        self.assertTrue(MO_FR.has_wday(Weekday.FRIDAY))
        self.assertFalse(MO_FR.has_wday(Weekday.SATURDAY))
        self.assertFalse(MO_FR.has_wday(Weekday.NONE))
        self.assertTrue(MO_FR.has_wednesday())
        self.assertFalse(MO_FR.has_sunday())
        self.assertEqual(MO_FR.get_days_count(), 5)

        sunday = WeekdayRange(Weekday.SUNDAY)
        self.assertTrue(sunday.has_sunday())
        self.assertFalse(sunday.has_monday())
        self.assertEqual(sunday.get_days_count(), 1)

        empty = WeekdayRange()
        self.assertTrue(empty.is_empty())
        self.assertFalse(empty.has_wday(Weekday.MONDAY))
        self.assertEqual(empty.get_days_count(), 0)

        # Ranges are not cyclic.
        self.assertFalse(
            WeekdayRange(Weekday.FRIDAY, Weekday.MONDAY).has_saturday()
        )

    def test_weekday_range(self):
        self.assertEqual(render(MO_FR), "Mo-Fr")
        self.assertEqual(render(WeekdayRange(Weekday.SUNDAY)), "Su")
        self.assertEqual(
            render(WeekdayRange(
                Weekday.SUNDAY,
                nths=[NthWeekdayOfTheMonthEntry(NthDayOfTheMonth.FIRST)],
                offset=-1
            )),
            "Su[1] -1 day"
        )
        self.assertEqual(
            render(WeekdayRange(
                Weekday.MONDAY,
                nths=[
                    NthWeekdayOfTheMonthEntry(NthDayOfTheMonth.FIRST),
                    NthWeekdayOfTheMonthEntry(
                        NthDayOfTheMonth.THIRD, NthDayOfTheMonth.FOURTH
                    ),
                ]
            )),
            "Mo[1,3-4]"
        )
        self.assertEqual(
            render(WeekdayRange(Weekday.SATURDAY, offset=2)), "Sa +2 days"
        )
        # The nth entries and the offset are ignored with an end.
        self.assertEqual(
            render(MO_FR.replace(
                nths=[NthWeekdayOfTheMonthEntry(NthDayOfTheMonth.FIRST)],
                offset=1
            )),
            "Mo-Fr"
        )

    def test_nth_entry(self):
        entry = NthWeekdayOfTheMonthEntry()
        self.assertTrue(entry.is_empty())
        self.assertEqual(render(entry), '')
        self.assertEqual(
            render(NthWeekdayOfTheMonthEntry(NthDayOfTheMonth.FIFTH)), "5"
        )
        self.assertEqual(
            render(NthWeekdayOfTheMonthEntry(
                NthDayOfTheMonth.SECOND, NthDayOfTheMonth.THIRD
            )),
            "2-3"
        )

    def test_holidays(self):
        self.assertEqual(render(Holiday(plural=True)), "PH")
        self.assertEqual(render(Holiday(plural=True, offset=2)), "PH")
        self.assertEqual(render(Holiday()), "SH")
        self.assertEqual(render(Holiday(offset=2)), "SH +2 days")
        self.assertEqual(render(Holiday(offset=-1)), "SH -1 day")

    def test_weekdays(self):
        self.assertEqual(
            render(wdays(
                MO_FR, WeekdayRange(Weekday.SUNDAY),
                holidays=[Holiday(plural=True)]
            )),
            "PH, Mo-Fr, Su"
        )
        self.assertEqual(
            render(wdays(holidays=[Holiday(plural=True), Holiday()])),
            "PH, SH"
        )
        self.assertEqual(render(wdays(MO_FR)), "Mo-Fr")
        empty = Weekdays()
        self.assertTrue(empty.is_empty())
        self.assertFalse(empty.has_weekday())
        self.assertFalse(empty.has_holidays())
        self.assertEqual(render(empty), '')
        self.assertIsInstance(wdays(MO_FR).weekday_ranges, tuple)


class TestDates(unittest.TestCase):
    def test_month_names(self):
        self.assertEqual(
            [render(month) for month in Month if month != Month.NONE],
            [
                "Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"
            ]
        )
        self.assertEqual(render(VariableDate.EASTER), "easter")

    def test_date_offset(self):
        self.assertEqual(render(DateOffset(Weekday.SUNDAY)), "+Su")
        self.assertEqual(
            render(DateOffset(Weekday.FRIDAY, positive=False, offset=2)),
            "-Fr +2 days"
        )
        self.assertEqual(render(DateOffset(offset=-3)), "-3 days")
        self.assertTrue(DateOffset().is_empty())
        self.assertEqual(render(DateOffset()), '')

    def test_monthday(self):
        self.assertEqual(render(MonthDay(month=Month.DEC, day_num=25)), "Dec 25")
        self.assertEqual(
            render(MonthDay(year=2020, month=Month.JAN, day_num=1)),
            "2020 Jan 01"
        )
        self.assertEqual(render(MonthDay(month=Month.AUG)), "Aug")
        self.assertEqual(
            render(MonthDay(variable_date=VariableDate.EASTER)), "easter"
        )
        self.assertEqual(
            render(MonthDay(
                year=2021, month=Month.MAR,
                variable_date=VariableDate.EASTER
            )),
            "2021 easter"
        )
        self.assertEqual(
            render(MonthDay(
                month=Month.DEC, day_num=24,
                offset=DateOffset(Weekday.SATURDAY, positive=False)
            )),
            "Dec 24 -Sa"
        )
        self.assertEqual(
            render(MonthDay(
                variable_date=VariableDate.EASTER,
                offset=DateOffset(offset=-2)
            )),
            "easter -2 days"
        )
        self.assertTrue(MonthDay().is_empty())
        self.assertEqual(render(MonthDay()), '')

    def test_monthday_range(self):
        jan, mar = MonthDay(month=Month.JAN), MonthDay(month=Month.MAR)
        self.assertEqual(render(MonthdayRange(jan, mar)), "Jan-Mar")
        self.assertEqual(render(MonthdayRange(jan, mar, plus=True)), "Jan-Mar")
        self.assertEqual(render(MonthdayRange(jan)), "Jan")
        self.assertEqual(
            render(MonthdayRange(
                MonthDay(month=Month.JAN, day_num=1),
                MonthDay(month=Month.DEC, day_num=31),
                period=7
            )),
            "Jan 01-Dec 31/7"
        )
        # A lonely day number is an end.
        dec_24_26 = MonthdayRange(
            MonthDay(month=Month.DEC, day_num=24), MonthDay(day_num=26)
        )
        self.assertTrue(dec_24_26.has_end())
        self.assertEqual(render(dec_24_26), "Dec 24-26")
        self.assertEqual(
            render(MonthdayRange(
                MonthDay(month=Month.DEC, day_num=25), plus=True
            )),
            "Dec 25+"
        )
        self.assertTrue(MonthdayRange().is_empty())
        self.assertEqual(render(MonthdayRange()), '')

    def test_year_range(self):
        self.assertEqual(render(YearRange(2020)), "2020")
        self.assertEqual(render(YearRange(2020, 2030)), "2020-2030")
        self.assertEqual(render(YearRange(2020, 2030, 2)), "2020-2030/2")
        self.assertEqual(render(YearRange(2020, plus=True)), "2020+")
        self.assertEqual(render(YearRange(2020, period=2)), "2020")
        self.assertEqual(render(YearRange(2020, 2030, plus=True)), "2020-2030")
        self.assertTrue(YearRange(2020).is_open())
        self.assertFalse(YearRange(2020, 2021).is_open())
        self.assertTrue(YearRange().is_empty())
        self.assertEqual(render(YearRange()), '')
        self.assertEqual(
            render([YearRange(2010), YearRange(2020, plus=True)]),
            "2010, 2020+"
        )

    def test_week_range(self):
        self.assertEqual(render(WeekRange(1)), "01")
        self.assertEqual(render(WeekRange(1, 10)), "01-10")
        self.assertEqual(render(WeekRange(1, 53, 2)), "01-53/2")
        self.assertEqual(render(WeekRange()), '')
        self.assertEqual(
            render([WeekRange(1, 10, 2), WeekRange(20)]), "week 01-10/2, 20"
        )
        self.assertEqual(rendering.render_week_ranges([]), "week ")


class TestRuleSequence(unittest.TestCase):
    maxDiff = None

    def test_simple(self):
        rule = RuleSequence(
            weekdays=wdays(MO_FR), times=[span((9, 0), (18, 0))]
        )
        self.assertEqual(render(rule), "Mo-Fr 09:00-18:00")
        self.assertEqual(str(rule), "Mo-Fr 09:00-18:00")
        self.assertFalse(rule.is_empty())

    def test_all_selectors(self):
        rule = RuleSequence(
            years=[YearRange(2020, 2030, 2)],
            months=[MonthdayRange(
                MonthDay(month=Month.JAN), MonthDay(month=Month.MAR)
            )],
            weeks=[WeekRange(1, 10)],
            weekdays=wdays(WeekdayRange(Weekday.MONDAY)),
            times=[span((10, 0), (12, 0)), span((13, 0), (19, 0))]
        )
        self.assertEqual(
            render(rule),
            "2020-2030/2 Jan-Mar week 01-10 Mo 10:00-12:00, 13:00-19:00"
        )

    def test_twenty_four_hours(self):
        rule = RuleSequence(
            weekdays=wdays(MO_FR), times=[span((9, 0), (18, 0))],
            twenty_four_hours=True
        )
        self.assertEqual(render(rule), "24/7")
        self.assertEqual(
            render(rule.replace(modifier=Modifier.CLOSED)), "24/7 closed"
        )
        self.assertFalse(RuleSequence(twenty_four_hours=True).is_empty())

    def test_modifiers(self):
        rule = RuleSequence(weekdays=wdays(MO_FR))
        self.assertEqual(render(rule), "Mo-Fr")
        self.assertEqual(render(rule.replace(modifier=Modifier.OPEN)), "Mo-Fr open")
        self.assertEqual(
            render(rule.replace(modifier=Modifier.CLOSED)), "Mo-Fr closed"
        )
        self.assertEqual(
            render(rule.replace(modifier=Modifier.UNKNOWN)), "Mo-Fr unknown"
        )
        self.assertEqual(
            render(rule.replace(modifier=Modifier.COMMENT)), "Mo-Fr"
        )
        self.assertEqual(render(RuleSequence(modifier=Modifier.CLOSED)), "closed")

    def test_modifier_comment(self):
        self.assertEqual(
            render(RuleSequence(
                weekdays=wdays(MO_FR), modifier=Modifier.CLOSED,
                modifier_comment="on appointment"
            )),
            'Mo-Fr closed "on appointment"'
        )
        self.assertEqual(
            render(RuleSequence(
                modifier=Modifier.COMMENT, modifier_comment="on appointment"
            )),
            '"on appointment"'
        )

    def test_separator_for_readability(self):
        rule = RuleSequence(
            months=[MonthdayRange(MonthDay(month=Month.DEC, day_num=25))],
            times=[span((9, 0), (12, 0))],
            separator_for_readability=True
        )
        self.assertEqual(render(rule), "Dec 25: 09:00-12:00")
        self.assertEqual(
            render(rule.replace(times=[], modifier=Modifier.CLOSED)),
            "Dec 25: closed"
        )
        self.assertEqual(
            render(rule.replace(separator_for_readability=False)),
            "Dec 25 09:00-12:00"
        )

    def test_comment(self):
        rule = RuleSequence(
            weekdays=wdays(MO_FR), times=[span((9, 0), (12, 0))],
            comment="Christmas", modifier=Modifier.CLOSED
        )
        self.assertTrue(rule.has_comment())
        self.assertEqual(render(rule), "Christmas: closed")
        self.assertEqual(
            render(rule.replace(modifier=Modifier.DEFAULT_OPEN)), "Christmas:"
        )

    def test_empty(self):
        rule = RuleSequence()
        self.assertTrue(rule.is_empty())
        self.assertEqual(render(rule), '')
        self.assertTrue(RuleSequence(comment="Note").is_empty())

    def test_immutable(self):
        rule = RuleSequence(times=[span((9, 0), (12, 0))])
        self.assertIsInstance(rule.times, tuple)
        with self.assertRaises(AttributeError):
            rule.modifier = Modifier.CLOSED
        self.assertEqual(rule, RuleSequence(times=(span((9, 0), (12, 0)),)))
        with self.assertRaises(TypeError):
            RuleSequence(times=["09:00-12:00"])
        with self.assertRaises(TypeError):
            RuleSequence(comment=None)


class TestRuleSequences(unittest.TestCase):
    maxDiff = None

    def setUp(self):
        self.week = RuleSequence(
            weekdays=wdays(MO_FR), times=[span((9, 0), (18, 0))],
            any_separator=';'
        )
        self.saturday = RuleSequence(
            weekdays=wdays(WeekdayRange(Weekday.SATURDAY)),
            times=[span((10, 0), (12, 0))],
            any_separator=','
        )
        self.holidays = RuleSequence(
            weekdays=wdays(holidays=[Holiday(plural=True)]),
            modifier=Modifier.CLOSED
        )

    def test_separators(self):
        self.assertEqual(
            render([self.week, self.saturday, self.holidays]),
            "Mo-Fr 09:00-18:00; Sa 10:00-12:00, PH closed"
        )

    def test_fallback(self):
        week = self.week.replace(any_separator="||")
        fallback = RuleSequence(modifier_comment="on appointment")
        self.assertEqual(
            render([week, fallback]),
            'Mo-Fr 09:00-18:00 || "on appointment"'
        )

    def test_last_separator(self):
        self.assertEqual(render([self.week]), "Mo-Fr 09:00-18:00")
        self.assertEqual(render([]), '')
        self.assertEqual(
            rendering.render_rule_sequences((self.saturday, self.week)),
            "Sa 10:00-12:00, Mo-Fr 09:00-18:00"
        )

    def test_write(self):
        rules = [self.week, self.saturday, self.holidays]
        sink = io.StringIO()
        self.assertIs(write(rules, sink), sink)
        self.assertEqual(sink.getvalue(), render(rules))
        write(Holiday(), sink)
        self.assertEqual(sink.getvalue(), render(rules) + "SH")

    def test_other_lists(self):
        self.assertEqual(
            render([
                MonthDay(month=Month.DEC, day_num=25),
                MonthDay(month=Month.DEC, day_num=26),
            ]),
            "Dec 25, Dec 26"
        )
        self.assertEqual(
            render([
                NthWeekdayOfTheMonthEntry(NthDayOfTheMonth.FIRST),
                NthWeekdayOfTheMonthEntry(NthDayOfTheMonth.THIRD),
            ]),
            "1,3"
        )
        self.assertEqual(render([Weekday.MONDAY, Weekday.FRIDAY]), "Mo, Fr")

    def test_unknown_type(self):
        with self.assertRaises(TypeError):
            render("Mo-Fr")
        with self.assertRaises(TypeError):
            render([1, 2])


class TestResolvers(unittest.TestCase):
    def test_fixed(self):
        resolver = FixedEventResolver({
            "dawn": datetime.time(7, 30),
            "sunrise": datetime.time(8, 0),
            "sunset": datetime.time(21, 30),
            "dusk": datetime.time(22, 0),
        })
        self.assertEqual(resolver.resolve(Event.DUSK), hm(22))
        self.assertEqual(
            Time.from_event(Event.DAWN, -30).get_duration(resolver),
            datetime.timedelta(hours=7)
        )
        with self.assertRaises(ValueError):
            FixedEventResolver({"noon": datetime.time(12)})
        with self.assertRaises(TypeError):
            FixedEventResolver({"sunrise": "08:00"})

    def test_fixed_missing_event(self):
        resolver = FixedEventResolver({"sunrise": datetime.time(8, 0)})
        with self.assertRaises(EventResolutionError):
            Time.from_event(Event.SUNSET).get_hours(resolver)

    def test_null(self):
        self.assertEqual(NullEventResolver().resolve(Event.SUNRISE), Time())

    def test_astral_coordinates(self):
        resolver = AstralEventResolver(48.85, 2.35)
        sunrise = resolver.resolve(Event.SUNRISE, datetime.date(2018, 6, 21))
        self.assertEqual(sunrise.get_hours(), 3)
        self.assertTrue(sunrise.is_hours_minutes())
        resolver = AstralEventResolver(48.85, 2.35, tz="Europe/Paris")
        self.assertEqual(resolver.tz, pytz.timezone("Europe/Paris"))
        time = Time.from_event(Event.SUNRISE, 60)
        self.assertEqual(
            time.get_hours(resolver, datetime.date(2018, 6, 21)), 6
        )

    def test_astral_location(self):
        location = astral.LocationInfo(
            "London", "England", "Europe/London", 51.5, -0.116
        )
        resolver = AstralEventResolver(location=location)
        sunset = resolver.resolve(Event.SUNSET, datetime.date(2018, 6, 21))
        self.assertEqual(sunset.get_hours(), 21)

    def test_astral_errors(self):
        with self.assertRaises(ValueError):
            AstralEventResolver()
        resolver = AstralEventResolver(78.2, 15.6)
        with self.assertRaises(EventResolutionError):
            resolver.resolve(Event.SUNRISE, datetime.date(2018, 12, 21))
        with self.assertRaises(EventResolutionError):
            resolver.resolve(Event.NONE, datetime.date(2018, 12, 21))


class TestValidators(unittest.TestCase):
    def test_valid(self):
        rules = [
            RuleSequence(
                weekdays=wdays(MO_FR), times=[span((9, 0), (18, 0))],
                any_separator=';'
            ),
            RuleSequence(
                weekdays=wdays(holidays=[Holiday(plural=True)]),
                modifier=Modifier.CLOSED
            ),
        ]
        self.assertTrue(is_valid(rules))
        self.assertIsNone(validate(rules[0]))
        self.assertTrue(is_valid(RuleSequence(twenty_four_hours=True)))
        self.assertTrue(is_valid(RuleSequence(modifier=Modifier.CLOSED)))
        self.assertTrue(is_valid(WeekRange(1, 53, 2)))
        self.assertTrue(is_valid(YearRange(2020, plus=True)))
        self.assertTrue(is_valid(MonthdayRange(
            MonthDay(month=Month.DEC, day_num=24), MonthDay(day_num=26)
        )))
        self.assertTrue(is_valid(WeekdayRange(
            Weekday.SUNDAY,
            nths=[NthWeekdayOfTheMonthEntry(NthDayOfTheMonth.FIRST)],
            offset=-1
        )))
        self.assertTrue(is_valid(Timespan(
            Time.from_event(Event.SUNRISE, -60), Time.from_event(Event.SUNSET)
        )))

    def test_invalid(self):
        with self.assertRaises(ValidationError):
            validate(WeekRange(60))
        with self.assertRaises(ValidationError):
            validate(YearRange(2030, 2020))
        with self.assertRaises(ValidationError):
            validate(YearRange(2020, period=2))
        with self.assertRaises(ValidationError):
            validate(Time.from_hours(49))
        with self.assertRaises(ValidationError):
            validate(Time())
        with self.assertRaises(ValidationError):
            validate(Timespan(hm(9), period=Time.from_minutes(30)))
        with self.assertRaises(ValidationError):
            validate(MO_FR.replace(
                nths=[NthWeekdayOfTheMonthEntry(NthDayOfTheMonth.FIRST)]
            ))
        with self.assertRaises(ValidationError):
            validate(MonthDay(month=Month.FEB, day_num=32))
        with self.assertRaises(ValidationError):
            validate(RuleSequence())
        with self.assertRaises(ValidationError):
            validate(RuleSequence(modifier=Modifier.OPEN, any_separator='/'))
        with self.assertRaises(ValidationError):
            validate([RuleSequence(weekdays=wdays(WeekdayRange()))])

    def test_errors(self):
        self.assertTrue(issubclass(ValidationError, COHError))
        self.assertTrue(issubclass(ValidationError, ValueError))
        try:
            validate(WeekRange(60))
        except ValidationError as e:
            self.assertIn("'60'", str(e))
        with self.assertRaises(TypeError):
            validate("Mo-Fr")

    def test_minutes_out_of_range(self):
        too_long = Time(75, have_hours=False, have_minutes=True)
        self.assertEqual(render(too_long), "15")
        self.assertFalse(is_valid(too_long))
        self.assertEqual(render(Time.from_minutes(60)), "00")
        self.assertFalse(is_valid(Time.from_minutes(60)))
        self.assertTrue(is_valid(Time.from_minutes(59)))
        self.assertFalse(is_valid(Time(-5, have_minutes=True)))

    def test_quotes_in_modifier_comment(self):
        rule = RuleSequence(
            comment="Christmas", modifier=Modifier.CLOSED,
            modifier_comment='say "hi"'
        )
        self.assertEqual(render(rule), 'Christmas: closed "say "hi""')
        self.assertFalse(is_valid(rule))
        self.assertTrue(is_valid(rule.replace(modifier_comment="say hi")))
        self.assertFalse(is_valid(RuleSequence(
            twenty_four_hours=True, modifier_comment='"'
        )))

    def test_missing_rule_separator(self):
        rules = [
            RuleSequence(
                weekdays=wdays(WeekdayRange(Weekday.MONDAY)),
                times=[span((9, 0), (12, 0))]
            ),
            RuleSequence(
                weekdays=wdays(WeekdayRange(Weekday.TUESDAY)),
                times=[span((9, 0), (12, 0))]
            ),
        ]
        self.assertEqual(render(rules), "Mo 09:00-12:00 Tu 09:00-12:00")
        self.assertFalse(is_valid(rules))
        rules[0] = rules[0].replace(any_separator=';')
        self.assertTrue(is_valid(rules))
        self.assertEqual(render(rules), "Mo 09:00-12:00; Tu 09:00-12:00")

    def test_list_of_other_types(self):
        with self.assertRaises(TypeError):
            validate([Holiday()])
        with self.assertRaises(TypeError):
            is_valid([RuleSequence(twenty_four_hours=True), WeekRange(1)])

    def test_is_valid_logs(self):
        with self.assertLogs(
            "canonical_opening_hours.validators", level="DEBUG"
        ) as logs:
            self.assertFalse(is_valid(WeekRange(60)))
        self.assertEqual(len(logs.output), 1)


if __name__ == '__main__':
    unittest.main()
    exit(0)
