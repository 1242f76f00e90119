# -*- coding: utf-8 -*-
"""
NDIS service agreement entity model.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional
from datetime import date

from utils.helpers import parse_amount, parse_date


@dataclass
class ServiceAgreement:
    """
    Service agreement between a participant and a provider.

    Participant and provider names are copied onto the row so lists can
    be rendered without joining.
    """

    id: Optional[str] = None
    user_id: Optional[str] = None
    participant_id: Optional[str] = None
    participant_name: str = ""
    provider_id: Optional[str] = None
    provider_name: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    total_amount: Decimal = Decimal("0")
    services: List[str] = field(default_factory=list)
    status: str = "draft"  # draft, active, expired, cancelled
    signed_date: Optional[date] = None
    signed_by: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to a store row."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "participant_id": self.participant_id,
            "participant_name": self.participant_name,
            "provider_id": self.provider_id,
            "provider_name": self.provider_name,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "total_amount": float(self.total_amount),
            "services": list(self.services),
            "status": self.status,
            "signed_date": self.signed_date.isoformat() if self.signed_date else None,
            "signed_by": self.signed_by,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ServiceAgreement":
        """Create ServiceAgreement from a store row."""
        data = dict(data)
        for field_name in ["start_date", "end_date", "signed_date"]:
            data[field_name] = parse_date(data.get(field_name))

        data["total_amount"] = parse_amount(data.get("total_amount"))
        if data.get("services") is None:
            data["services"] = []

        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
