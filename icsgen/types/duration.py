"""Library for encoding DURATION values."""

import datetime

from .data_types import DATA_TYPE

_WEEK = 7


def _time_parts(seconds: int) -> str:
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return "".join(
        f"{amount}{unit}"
        for amount, unit in ((hours, "H"), (minutes, "M"), (seconds, "S"))
        if amount
    )


@DATA_TYPE.register("DURATION")
class DurationEncoder:
    """Class that can encode DURATION values.

    Whole weeks are written with the week designator, e.g. `P2W`, and
    anything else as days and time, e.g. `-P1DT2H30M`.
    """

    @classmethod
    def __property_type__(cls) -> type:
        return datetime.timedelta

    @classmethod
    def __encode_property_value__(cls, duration: datetime.timedelta) -> str:
        """Serialize a time delta as a DURATION ICS value."""
        sign = ""
        if duration < datetime.timedelta(0):
            sign = "-"
            duration = -duration
        if not duration.days and not duration.seconds:
            return "PT0S"
        if not duration.seconds and duration.days % _WEEK == 0:
            return f"{sign}P{duration.days // _WEEK}W"
        value = f"{sign}P"
        if duration.days:
            value += f"{duration.days}D"
        if duration.seconds:
            value += "T" + _time_parts(duration.seconds)
        return value
