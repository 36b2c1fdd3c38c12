from dataclasses import dataclass
from datetime import datetime
from typing import Optional


class TimelineEventType:
    """Kinds of audit events recorded against a detection"""

    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"

    ALL = (ADD, EDIT, DELETE)


@dataclass(frozen=True)
class TimelineEvent:
    """
    Immutable audit record of a user action on a detection.

    detection_id keeps the detection's former identity after it is deleted.
    """

    id: Optional[str]
    detection_id: Optional[str]
    inspection_number: str
    type: str
    author: str
    comment: str
    created_at: datetime
