from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty, require_non_negative
from ..core.constants import DEFAULT_ANNUAL_CASUAL_LEAVES, DEFAULT_ANNUAL_SICK_LEAVES
from ..core.enums import LeaveType, StaffStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Staff
from .repository import StaffRepository

log = logging.getLogger(__name__)

_EDITABLE_FIELDS = ("name", "email", "role", "department", "salary", "annual_casual_leaves", "annual_sick_leaves", "joining_date")


class StaffService:
    def __init__(self, staff: StaffRepository):
        self._staff = staff

    def get_staff(self, staff_id: int) -> Staff:
        member = self._staff.get_by_id(int(staff_id))
        if not member:
            raise NotFoundError(f"Staff {staff_id} does not exist")
        return member

    def list_staff(self, *, active_only: bool = False) -> Sequence[Staff]:
        return self._staff.list_all(status=StaffStatus.ACTIVE if active_only else None)

    def create_staff(
        self,
        *,
        name: str,
        salary,
        annual_casual_leaves=DEFAULT_ANNUAL_CASUAL_LEAVES,
        annual_sick_leaves=DEFAULT_ANNUAL_SICK_LEAVES,
        email: Optional[str] = None,
        role: Optional[str] = None,
        department: Optional[str] = None,
        joining_date: Optional[date] = None,
    ) -> int:
        staff_id = self._staff.create(
            name=require_non_empty(name, "Name"),
            salary=require_non_negative(salary, "Salary"),
            annual_casual_leaves=int(require_non_negative(annual_casual_leaves, "Casual leave balance")),
            annual_sick_leaves=int(require_non_negative(annual_sick_leaves, "Sick leave balance")),
            email=optional_text(email, "Email"),
            role=optional_text(role, "Role"),
            department=optional_text(department, "Department"),
            joining_date=joining_date,
        )
        log.info("created staff %s (%s)", staff_id, name)
        return staff_id

    def update_staff(self, staff_id: int, **changes) -> Staff:
        current = self.get_staff(staff_id)

        unknown = set(changes) - set(_EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown staff fields: {', '.join(sorted(unknown))}")

        if "name" in changes:
            changes["name"] = require_non_empty(changes["name"], "Name")
        for key in ("email", "role", "department"):
            if key in changes:
                changes[key] = optional_text(changes[key], key.capitalize())
        if "joining_date" in changes and not isinstance(changes["joining_date"], (date, type(None))):
            raise ValidationError("Joining date must be a date")
        if "salary" in changes:
            changes["salary"] = require_non_negative(changes["salary"], "Salary")
        for key in ("annual_casual_leaves", "annual_sick_leaves"):
            if key in changes:
                changes[key] = int(require_non_negative(changes[key], "Leave balance"))

        updated = replace(current, **changes)
        self._staff.update(updated)
        return updated

    def deactivate_staff(self, staff_id: int) -> Staff:
        current = self.get_staff(staff_id)
        updated = replace(current, status=StaffStatus.INACTIVE)
        self._staff.update(updated)
        return updated

    def consume_leave(self, *, staff_id: int, leave_type: LeaveType, days: int) -> Staff:
        """Deduct approved leave days from the matching annual balance."""
        member = self.get_staff(staff_id)
        days = int(days)

        casual = member.annual_casual_leaves
        sick = member.annual_sick_leaves
        if leave_type == LeaveType.CASUAL:
            if casual < days:
                raise ValidationError(f"Insufficient casual leave balance ({casual} left, {days} requested)")
            casual -= days
        else:
            if sick < days:
                raise ValidationError(f"Insufficient sick leave balance ({sick} left, {days} requested)")
            sick -= days

        self._staff.update_leave_balances(staff_id=member.staff_id, annual_casual_leaves=casual, annual_sick_leaves=sick)
        return replace(member, annual_casual_leaves=casual, annual_sick_leaves=sick)
