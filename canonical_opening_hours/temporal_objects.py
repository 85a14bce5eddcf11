import datetime
import enum


HOUR = datetime.timedelta(hours=1)


class BaseValue:
    """Base class of the objects of the model.

    Values are immutable: they are built once (by a parser or by hand)
    and only read after. Use `replace()` to get a modified copy.
    """
    _fields = ()

    def __setattr__(self, name, value):
        raise AttributeError(
            "{} objects are immutable.".format(self.__class__.__name__)
        )

    def __delattr__(self, name):
        raise AttributeError(
            "{} objects are immutable.".format(self.__class__.__name__)
        )

    def _set(self, name, value):
        object.__setattr__(self, name, value)

    def replace(self, **changes):
        """Returns a copy of the object with some fields replaced."""
        values = {field: getattr(self, field) for field in self._fields}
        for field in changes:
            if field not in values:
                raise TypeError(
                    "{} has no field {!r}.".format(
                        self.__class__.__name__, field
                    )
                )
        values.update(changes)
        return self.__class__(**values)

    def _key(self):
        return tuple(getattr(self, field) for field in self._fields)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((self.__class__.__name__,) + self._key())

    def __repr__(self):
        return "<{name} {fields}>".format(
            name=self.__class__.__name__,
            fields=' '.join(
                "{}={!r}".format(field, getattr(self, field))
                for field in self._fields
            )
        )

    def __str__(self):
        from canonical_opening_hours.rendering import render
        return render(self)


def check_type(value, expected, name):
    if not isinstance(value, expected):
        raise TypeError(
            "{!r} must be a {}, not {!r}.".format(
                name, getattr(expected, "__name__", expected), value
            )
        )
    return value


def to_enum(enum_class, value, name):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            "{!r} must be a {}, not {!r}.".format(
                name, enum_class.__name__, value
            )
        )
    return enum_class(value)


def to_duration(value, name):
    """Returns a timedelta from a timedelta or a number of minutes."""
    if isinstance(value, datetime.timedelta):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return datetime.timedelta(minutes=value)
    raise TypeError(
        "{!r} must be a timedelta or a number of minutes, not {!r}.".format(
            name, value
        )
    )


def split_duration(duration):
    """Returns the signed (hours, minutes) of a timedelta.

    Both are truncated toward zero and carry the sign of the duration.

    >>> split_duration(datetime.timedelta(minutes=-90))
    (-1, -30)
    """
    total_minutes = int(duration.total_seconds() / 60)
    sign = -1 if total_minutes < 0 else 1
    hours, minutes = divmod(abs(total_minutes), 60)
    return (sign * hours, sign * minutes)


class Event(enum.IntEnum):
    NONE = 0
    SUNRISE = 1
    SUNSET = 2
    DAWN = 3
    DUSK = 4


class TimeKind(enum.Enum):
    UNSET = "unset"
    MINUTES = "minutes"
    HOURS_MINUTES = "hours_minutes"
    EVENT = "event"
    EVENT_OFFSET = "event_offset"


class Time(BaseValue):
    """A moment of the day.

    It can be a fixed "hh:mm" time, a number of minutes (in a period,
    like the "/90" of "10:00-16:00/90"), an event (like "sunrise"),
    or an event with an offset (like "(sunrise+01:00)").

    Parameters
    ----------
    duration : datetime.timedelta or int, optional
        The signed duration since midnight (or the offset from the event).
        Integers are read as minutes.
        An event offset is added to the time of the event, so
        "(sunset-01:00)" is stored as -60 minutes.
    have_hours : bool, optional
        Whether the hours are part of the time.
    have_minutes : bool, optional
        Whether the minutes are part of the time.
    event : Event, optional
        The event the time is relative to.

    The `from_hours()`, `from_minutes()`, `from_hours_minutes()`
    and `from_event()` constructors set the flags consistently
    and should be preferred.
    """
    _fields = ("duration", "have_hours", "have_minutes", "event")

    def __init__(
        self, duration=datetime.timedelta(), have_hours=False,
        have_minutes=False, event=Event.NONE
    ):
        self._set("duration", to_duration(duration, "duration"))
        self._set("have_hours", bool(have_hours))
        self._set("have_minutes", bool(have_minutes))
        self._set("event", to_enum(Event, event, "event"))

    @classmethod
    def from_hours(cls, hours, event=Event.NONE):
        """Returns a time with hours and minutes."""
        return cls(
            datetime.timedelta(hours=hours),
            have_hours=True, have_minutes=True, event=event
        )

    @classmethod
    def from_minutes(cls, minutes, event=Event.NONE):
        """Returns a time from a number of minutes.

        The hours are part of the time only when the duration
        exceeds one hour.
        """
        duration = to_duration(minutes, "minutes")
        return cls(
            duration, have_hours=abs(duration) > HOUR, have_minutes=True,
            event=event
        )

    @classmethod
    def from_hours_minutes(cls, hours, minutes):
        return cls.from_hours(hours) + cls.from_minutes(minutes)

    @classmethod
    def from_event(cls, event, offset=datetime.timedelta()):
        """Returns an event time, like "sunset" or "(sunset-01:00)"."""
        if not offset:
            return cls(event=event)
        return cls.from_minutes(offset, event=event)

    def _with_minutes(self, duration):
        return Time(
            duration,
            have_hours=self.have_hours or abs(duration) > HOUR,
            have_minutes=True,
            event=self.event
        )

    def is_event(self):
        return self.event != Event.NONE

    def is_event_offset(self):
        return self.is_event() and bool(self.duration)

    def is_hours_minutes(self):
        return not self.is_event() and self.have_hours and self.have_minutes

    def is_minutes(self):
        return (
            not self.is_event() and self.have_minutes and not self.have_hours
        )

    def is_time(self):
        return self.is_hours_minutes() or self.is_event()

    def has_value(self):
        return self.is_event() or self.is_time() or self.is_minutes()

    @property
    def kind(self):
        if self.is_event_offset():
            return TimeKind.EVENT_OFFSET
        if self.is_event():
            return TimeKind.EVENT
        if self.is_hours_minutes():
            return TimeKind.HOURS_MINUTES
        if self.is_minutes():
            return TimeKind.MINUTES
        return TimeKind.UNSET

    def get_duration(self, resolver=None, date=None):
        """Returns the duration since midnight.

        Events are placed with the given resolver (see
        `canonical_opening_hours.resolvers`), then shifted by their offset.
        Without resolver, events are placed at midnight.

        Parameters
        ----------
        resolver : EventResolver, optional
            The object giving the time of the events.
        date : datetime.date, optional
            The day for which to place the events.

        Returns
        -------
        datetime.timedelta
            The signed duration since midnight.
        """
        if not self.is_event():
            return self.duration
        if resolver is None:
            event_duration = datetime.timedelta()
        else:
            event_duration = resolver.resolve(self.event, date).duration
        return event_duration + self.duration

    def get_hours(self, resolver=None, date=None):
        return split_duration(self.get_duration(resolver, date))[0]

    def get_minutes(self, resolver=None, date=None):
        return split_duration(self.get_duration(resolver, date))[1]

    def __add__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        return self._with_minutes(self.duration + other.duration)

    def __sub__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        return self._with_minutes(self.duration - other.duration)

    def __neg__(self):
        return self.replace(duration=-self.duration)


class Timespan(BaseValue):
    """A period of the day, like "10:00-12:00", "10:00+" or "10:00-16:00/90".

    An unset end makes the timespan open ("10:00").
    """
    _fields = ("start", "end", "period", "plus")

    def __init__(self, start=Time(), end=Time(), period=Time(), plus=False):
        self._set("start", check_type(start, Time, "start"))
        self._set("end", check_type(end, Time, "end"))
        self._set("period", check_type(period, Time, "period"))
        self._set("plus", bool(plus))

    def is_empty(self):
        return not self.has_start() and not self.has_end()

    def is_open(self):
        return self.has_start() and not self.has_end()

    def has_start(self):
        return self.start.has_value()

    def has_end(self):
        return self.end.has_value()

    def has_plus(self):
        return self.plus

    def has_period(self):
        return self.period.has_value()
