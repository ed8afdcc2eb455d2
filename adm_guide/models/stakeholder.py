"""
Stakeholder registry model.

A stakeholder is a free-form, user-entered record describing a person or
role with an influence and an interest level. The phase association is
free text and is not validated against the phase catalog.
"""

import uuid
from datetime import datetime, timezone

from adm_guide.models import db

LEVELS = ("high", "medium", "low")


def _token() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Stakeholder(db.Model):
    __tablename__ = "stakeholders"

    id = db.Column(db.String(32), primary_key=True, default=_token)
    seq = db.Column(db.Integer, nullable=False, index=True, comment="Creation order, assigned by the service")
    name = db.Column(db.String(200), nullable=False)
    role = db.Column(db.String(200), nullable=False)
    organization = db.Column(db.String(200), default="")
    concerns = db.Column(db.JSON, nullable=False, default=list, comment="Ordered list of free-text concerns")
    influence = db.Column(db.String(10), nullable=False, default="medium", comment="high | medium | low")
    interest = db.Column(db.String(10), nullable=False, default="medium", comment="high | medium | low")
    phase = db.Column(db.String(200), default="", comment="Free-text phase association")
    notes = db.Column(db.Text, default="")

    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role,
            "organization": self.organization or "",
            "concerns": list(self.concerns or []),
            "influence": self.influence,
            "interest": self.interest,
            "phase": self.phase or "",
            "notes": self.notes or "",
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Stakeholder {self.id}: {self.name}>"
