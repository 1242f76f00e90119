# -*- coding: utf-8 -*-
"""
Legal document entity model.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from datetime import datetime
import json


@dataclass
class LegalDocument:
    """
    A row of the legal documents table.

    Wizard-created documents hold the serialised draft in ``content``;
    uploaded documents hold ``{"file_path": ...}``.
    """

    id: Optional[str] = None
    user_id: Optional[str] = None
    title: str = ""
    type: str = ""  # will, trust, poa, living_will, healthcare_directive
    status: str = "draft"
    content: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def type_display(self) -> str:
        """Get display name for document type."""
        types = {
            "will": "Will",
            "trust": "Trust",
            "poa": "Power of Attorney",
            "living_will": "Living Will",
            "healthcare_directive": "Healthcare Directive",
        }
        return types.get(self.type, self.type)

    @property
    def parsed_content(self) -> Dict[str, Any]:
        """Content decoded from JSON; empty dict when absent or unreadable."""
        if not self.content:
            return {}
        if isinstance(self.content, dict):
            return self.content
        try:
            value = json.loads(self.content)
        except ValueError:
            return {}
        return value if isinstance(value, dict) else {}

    @property
    def file_path(self) -> Optional[str]:
        """Blob path of an uploaded document."""
        return self.parsed_content.get("file_path")

    @property
    def is_uploaded(self) -> bool:
        return bool(self.file_path)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "type": self.type,
            "status": self.status,
            "content": self.content,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LegalDocument":
        """Create LegalDocument from a store row."""
        data = dict(data)
        for field_name in ["created_at", "updated_at"]:
            if isinstance(data.get(field_name), str):
                data[field_name] = _parse_timestamp(data[field_name])

        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


def _parse_timestamp(value: str) -> Optional[datetime]:
    # Hosted store timestamps end in "Z" or carry an offset
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
