"""
Wizard session model.

Stores one learner's position in the (phase, step) grid and the set of
step ids they have marked complete. completed_steps is kept as a sorted
JSON list; order carries no meaning.
"""

import uuid
from datetime import datetime, timezone

from adm_guide.models import db


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WizardSession(db.Model):
    __tablename__ = "wizard_sessions"

    id = db.Column(db.String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    current_phase_index = db.Column(db.Integer, nullable=False, default=0)
    current_step_index = db.Column(db.Integer, nullable=False, default=0)
    completed_steps = db.Column(db.JSON, nullable=False, default=list)

    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    def __repr__(self):
        return (
            f"<WizardSession {self.id}: "
            f"phase={self.current_phase_index} step={self.current_step_index}>"
        )
