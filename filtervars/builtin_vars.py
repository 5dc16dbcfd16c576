"""Variables that need no request input: random numbers, constants and clock values."""

from __future__ import annotations

import random
import time
from datetime import datetime
from typing import Any, MutableMapping, Optional

from filtervars.registry import SimpleBuilder, Variable, register

RAND = "rand"
SUCCESS = "success"
SUCCESS_VALUE = 1

TIMESTAMP = "timestamp"
TS_SIMPLE = "ts_simple"
SECOND = "second"
MINUTE = "minute"
HOUR = "hour"
DAY = "day"
MONTH = "month"
YEAR = "year"
WDAY = "wday"
DATE = "date"
TIME = "time"

TIME_NAMES = (
    TIMESTAMP,
    TS_SIMPLE,
    SECOND,
    MINUTE,
    HOUR,
    DAY,
    MONTH,
    YEAR,
    WDAY,
    DATE,
    TIME,
)


class Rand(Variable):
    """A random integer in [1, 100], drawn anew on every evaluation."""

    name = RAND
    cacheable = False

    def value(self, ctx: Any, data: Any, cache: Optional[MutableMapping[str, Any]]) -> int:
        return random.randint(1, 100)


class Success(Variable):
    """Always evaluates to 1."""

    name = SUCCESS
    cacheable = True

    def value(self, ctx: Any, data: Any, cache: Optional[MutableMapping[str, Any]]) -> int:
        return SUCCESS_VALUE


class TimeField(Variable):
    """One representation of the current local time."""

    cacheable = False

    def __init__(self, name: str) -> None:
        self.name = name

    def value(self, ctx: Any, data: Any, cache: Optional[MutableMapping[str, Any]]) -> Any:
        now = datetime.now()
        if self.name == TIMESTAMP:
            return int(time.time())
        if self.name == TS_SIMPLE:
            return int(now.strftime("%Y%m%d%H%M%S"))
        if self.name == SECOND:
            return now.second
        if self.name == MINUTE:
            return now.minute
        if self.name == HOUR:
            return now.hour
        if self.name == DAY:
            return now.day
        if self.name == MONTH:
            return now.month
        if self.name == YEAR:
            return now.year
        if self.name == WDAY:
            return now.isoweekday() % 7
        if self.name == DATE:
            return now.strftime("%Y-%m-%d")
        return now.strftime("%Y-%m-%d %H:%M:%S")


register(SimpleBuilder(Rand()))
register(SimpleBuilder(Success()))
for _name in TIME_NAMES:
    register(SimpleBuilder(TimeField(_name)))