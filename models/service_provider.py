# -*- coding: utf-8 -*-
"""
NDIS service provider entity model.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ServiceProvider:
    """A registered NDIS service provider."""

    id: Optional[str] = None
    user_id: Optional[str] = None
    name: str = ""
    services: List[str] = field(default_factory=list)
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    agreement_status: str = "none"  # active, pending, expired, none

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "services": list(self.services),
            "contact_name": self.contact_name,
            "email": self.email,
            "phone": self.phone,
            "agreement_status": self.agreement_status,
        }

    def validate(self) -> List[str]:
        """Problems that block saving; empty when the provider is complete."""
        if not self.name.strip():
            return ["Provider name is required"]
        if any(not s.strip() for s in self.services):
            return ["All services must have a name"]
        return []

    def to_row(self, user_id: str) -> dict:
        """Row to insert or patch; the id stays with the store."""
        row = self.to_dict()
        row.pop("id")
        row["user_id"] = user_id
        return row

    @classmethod
    def from_dict(cls, data: dict) -> "ServiceProvider":
        """Create ServiceProvider from dictionary."""
        data = dict(data)
        if data.get("services") is None:
            data["services"] = []
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
