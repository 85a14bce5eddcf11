"""Provides the objects placing the events (sunrise, sunset, dawn, dusk)
at a time of the day.

The model only knows the events by their name: a resolver is given
to `Time.get_duration()` (and `get_hours()` / `get_minutes()`)
when a real time is needed.

>>> resolver = FixedEventResolver({"sunrise": datetime.time(8, 0)})
>>> Time.from_event(Event.SUNRISE, 90).get_hours(resolver)
9
"""

import datetime
import logging

import astral
import astral.sun
import pytz

from canonical_opening_hours.temporal_objects import Event, Time
from canonical_opening_hours.exceptions import EventResolutionError

logger = logging.getLogger(__name__)

# Names of the events in the dicts returned by 'astral.sun.sun()'.
ASTRAL_EVENTS = {
    Event.SUNRISE: "sunrise",
    Event.SUNSET: "sunset",
    Event.DAWN: "dawn",
    Event.DUSK: "dusk",
}


def time_from_datetime(moment):
    """Returns a Time object from a datetime.time or a datetime.datetime."""
    return Time.from_hours_minutes(moment.hour, moment.minute)


class EventResolver:  # pragma: no cover
    """Base class of the event resolvers."""

    def resolve(self, event, date=None):
        """Returns the time of an event.

        Parameters
        ----------
        event : Event
            The event to place.
        date : datetime.date, optional
            The day of the event. Resolvers may use the current day
            when it's not given.

        Returns
        -------
        Time
            The time of the event.
        """
        raise NotImplementedError()

    def __repr__(self):
        return "<{}>".format(self.__class__.__name__)


class NullEventResolver(EventResolver):
    """Places all the events at midnight."""

    def resolve(self, event, date=None):
        return Time()


class FixedEventResolver(EventResolver):
    """Places the events at fixed times, whatever the day.

    Parameters
    ----------
    solar_hours : dict{str or Event: datetime.time or Time}
        The times of the events. Names like "sunrise" can be used as keys.
    """

    def __init__(self, solar_hours):
        self.solar_hours = {}
        for event, moment in solar_hours.items():
            if isinstance(event, str):
                try:
                    event = Event[event.upper()]
                except KeyError:
                    raise ValueError(
                        "{!r} is not a valid event.".format(event)
                    ) from None
            if isinstance(moment, datetime.time):
                moment = time_from_datetime(moment)
            if not isinstance(moment, Time):
                raise TypeError(
                    "The time of {!r} must be a datetime.time "
                    "or a Time, not {!r}.".format(event, moment)
                )
            self.solar_hours[Event(event)] = moment

    def resolve(self, event, date=None):
        moment = self.solar_hours.get(event)
        if moment is None:
            raise EventResolutionError(
                "No time is given for {!r}.".format(event)
            )
        return moment

    def __repr__(self):
        return "<FixedEventResolver {!r}>".format(self.solar_hours)


class AstralEventResolver(EventResolver):
    """Computes the events from a location, with Astral.

    Raises
    ------
    ValueError
        When neither coordinates nor a location are given.

    Parameters
    ----------
    latitude : float, optional
    longitude : float, optional
        The coordinates of the point.
    tz : pytz.timezone or str, optional
        The timezone of the returned times. UTC by default.
    location : astral.LocationInfo, optional
        The location of the point, instead of coordinates. Its timezone
        is used.
    """

    def __init__(
        self, latitude=None, longitude=None, tz=pytz.utc, location=None
    ):
        if location is not None:
            self.observer = location.observer
            tz = location.timezone
        elif latitude is not None and longitude is not None:
            self.observer = astral.Observer(
                latitude=latitude, longitude=longitude
            )
        else:
            raise ValueError(
                "One keyword argument (coordinates or astral location) "
                "must be given."
            )
        if isinstance(tz, str):
            tz = pytz.timezone(tz)
        self.tz = tz

    def resolve(self, event, date=None):
        """Returns the time of an event, at the given day.

        Raises
        ------
        EventResolutionError
            When the event doesn't happen at this day
            (near the poles, for example).
        """
        if event not in ASTRAL_EVENTS:
            raise EventResolutionError(
                "{!r} is not an event.".format(event)
            )
        if date is None:
            date = datetime.datetime.now(self.tz).date()
        try:
            solar_hours = astral.sun.sun(
                self.observer, date=date, tzinfo=self.tz
            )
        except ValueError as e:
            raise EventResolutionError(
                "Can't compute the {} of {} at {!r}: {}".format(
                    ASTRAL_EVENTS[event], date.isoformat(), self.observer, e
                )
            ) from e
        moment = solar_hours[ASTRAL_EVENTS[event]]
        logger.debug(
            "Resolved %s on %s to %s.",
            ASTRAL_EVENTS[event], date.isoformat(), moment.isoformat()
        )
        return time_from_datetime(moment)

    def __repr__(self):
        return "<AstralEventResolver {!r} ({})>".format(
            self.observer, self.tz
        )
