"""Exception types raised by the fleet registry."""


class FleetError(Exception):
    """Base class for all fleet errors."""


class SourceUnavailable(FleetError):
    """A coordinate source could not be opened."""


class MalformedData(FleetError):
    """A coordinate source did not hold two numeric fields."""


class UnknownLocation(FleetError):
    """A route was requested for an id with no known location."""

    def __init__(self, missing_ids):
        self.missing_ids = list(missing_ids)
        super().__init__(f"Unknown location id(s): {', '.join(self.missing_ids)}")


class RoutingUnavailable(FleetError):
    """The routing service could not be reached or returned an error."""


class OutputWriteFailed(FleetError):
    """A route artifact could not be written."""


class DivisionUndefined(FleetError, ZeroDivisionError):
    """Usage efficiency requested for a vehicle with zero fuel efficiency."""
