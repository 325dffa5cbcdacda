from __future__ import annotations

from enum import Enum


class StaffStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class LeaveType(str, Enum):
    """Paid leave categories, each backed by its own annual balance."""

    CASUAL = "CASUAL"
    SICK = "SICK"


class RequestStatus(str, Enum):
    """Approval workflow state of a leave request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class CalculatorKind(str, Enum):
    STANDARD = "standard"
    CAPPED = "capped"
