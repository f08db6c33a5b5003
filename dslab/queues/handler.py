"""The service unit that processes requests from the two queues."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

EPS = 1e-4


class RequestType(Enum):
    """Kind of request held by the service unit."""

    NONE = 0
    ONE = 1
    TWO = 2


@dataclass
class Handler:
    """Service unit state and counters."""

    type1_processed: int = 0
    type2_processed: int = 0
    time_standby: float = 0.0
    in_process: RequestType = RequestType.NONE
    time_finish: float = 0.0

    def add(self, kind: RequestType, cur_time: float, process_time: float) -> None:
        """Start processing a request of the given kind at cur_time."""
        if kind is RequestType.ONE:
            self.type1_processed += 1
        elif kind is RequestType.TWO:
            self.type2_processed += 1

        self.in_process = kind if abs(process_time) > EPS else RequestType.NONE
        self.time_finish = cur_time + process_time