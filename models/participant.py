# -*- coding: utf-8 -*-
"""
NDIS participant entity model.

Participants have no table of their own: each one is an NDIS plan row
(``type = 'ndis'``) in the insurance policies table.
"""

from dataclasses import dataclass
from typing import List, Optional

from utils.helpers import parse_date

DEFAULT_FUNDING_CATEGORIES = [
    {"category": "Core", "amount": "25000", "used": "0"},
    {"category": "Capacity Building", "amount": "15000", "used": "0"},
    {"category": "Capital", "amount": "8500", "used": "0"},
]


@dataclass
class Participant:
    """A participant whose NDIS plan is managed."""

    id: Optional[str] = None
    user_id: Optional[str] = None
    name: str = ""
    ndis_number: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    plan_start_date: Optional[str] = None
    plan_end_date: Optional[str] = None
    support_coordinator: Optional[str] = None
    status: str = "active"  # active, inactive, pending
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for list views."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "ndis_number": self.ndis_number,
            "email": self.email,
            "phone": self.phone,
            "plan_start_date": self.plan_start_date,
            "plan_end_date": self.plan_end_date,
            "support_coordinator": self.support_coordinator,
            "status": self.status,
            "notes": self.notes,
        }

    def validate(self) -> List[str]:
        """Problems that block saving; empty when the participant is complete."""
        if (not self.name.strip() or not self.ndis_number
                or not self.plan_start_date or not self.plan_end_date):
            return ["Please fill in all required fields"]
        start = parse_date(self.plan_start_date)
        end = parse_date(self.plan_end_date)
        if start is None or end is None:
            return ["Dates must be entered as YYYY-MM-DD"]
        if end < start:
            return ["Plan end date must be after the start date"]
        return []

    def to_policy_patch(self) -> dict:
        """Plan columns an edit of this participant changes."""
        return {
            "provider": self.name,
            "policy_number": self.ndis_number,
            "ndis_number": self.ndis_number,
            "status": self.status,
            "start_date": self.plan_start_date,
            "renewal_date": self.plan_end_date,
            "plan_start_date": self.plan_start_date,
            "plan_end_date": self.plan_end_date,
            "email": self.email,
            "phone": self.phone,
            "support_coordinator": self.support_coordinator,
            "notes": self.notes,
        }

    def to_policy_row(self, user_id: str) -> dict:
        """Plan row to insert for a new participant."""
        row = self.to_policy_patch()
        row.update({
            "user_id": user_id,
            "type": "ndis",
            "plan_manager": "agency",
            "funding_categories": [dict(c) for c in DEFAULT_FUNDING_CATEGORIES],
        })
        return row

    @classmethod
    def from_dict(cls, data: dict) -> "Participant":
        """Create Participant from dictionary."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})

    @classmethod
    def from_policy(cls, row: dict) -> "Participant":
        """Build a participant from an NDIS plan row."""
        status = row.get("status")
        if status not in ("active", "pending"):
            status = "inactive"
        return cls(
            id=row.get("id"),
            user_id=row.get("user_id"),
            name=row.get("provider") or "NDIS Participant",
            ndis_number=row.get("ndis_number") or row.get("policy_number"),
            email=row.get("email"),
            phone=row.get("phone"),
            plan_start_date=row.get("plan_start_date") or row.get("start_date"),
            plan_end_date=row.get("plan_end_date") or row.get("renewal_date"),
            support_coordinator=row.get("support_coordinator"),
            status=status,
            notes=row.get("notes"),
        )
