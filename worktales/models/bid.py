# worktales/models/bid.py
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class BidStatus(str, Enum):
    # conventional values only; the API stores whatever the client sends
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COMPLETE = "complete"


class BidSortField(str, Enum):
    STATUS = "status"
    DEADLINE = "deadline"
    PRICE = "price"
    JOB_TITLE = "job_title"
    CATEGORY = "category"
    USER_EMAIL = "userEmail"
    EMPLOYER_EMAIL = "employerEmail"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def direction(self) -> int:
        return 1 if self is SortOrder.ASC else -1


class BidStatusUpdate(BaseModel):
    status: Optional[Any] = None

    def is_conventional(self) -> bool:
        # list membership: the status may be an unhashable JSON value
        return self.status in [s.value for s in BidStatus]
