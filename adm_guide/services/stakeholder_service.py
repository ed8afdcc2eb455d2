"""
Stakeholder Registry Service.

Business logic for the free-form stakeholder registry and the
influence/interest quadrant view.

Functions:
    - classify:                     Pure 4-quadrant partition (no DB)
    - create_stakeholder:           Create with validated name/role/levels
    - list_stakeholders:            List in creation order, optional level filters
    - get_stakeholder:              Get single by id
    - update_stakeholder:           Partial update, same validation as create
    - delete_stakeholder:           Remove by id
    - add_concern / remove_concern: Edit the ordered concern list
    - get_stakeholder_matrix:       Quadrants for the registry, with labels
    - seed_default_stakeholders:    Insert the example record into an empty registry
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from sqlalchemy import func, select

from adm_guide.core.exceptions import NotFoundError, ValidationError
from adm_guide.models import db
from adm_guide.models.stakeholder import Stakeholder

logger = logging.getLogger(__name__)


class Level(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


_VALID_LEVELS = {lvl.value for lvl in Level}


# ── Quadrant classification ──────────────────────────────────────────────────


@dataclass
class StakeholderQuadrants:
    """Stakeholders grouped by (influence, interest), input order kept."""
    high_high: list = field(default_factory=list)
    high_low: list = field(default_factory=list)
    low_high: list = field(default_factory=list)
    low_low: list = field(default_factory=list)


# (influence, interest) -> quadrant attribute, label, engagement guidance
QUADRANTS: dict[tuple[str, str], tuple[str, str, str]] = {
    ("high", "high"): ("high_high", "High Influence / High Interest", "Key Players - Manage Closely"),
    ("high", "low"): ("high_low", "High Influence / Low Interest", "Keep Satisfied"),
    ("low", "high"): ("low_high", "Low Influence / High Interest", "Keep Informed"),
    ("low", "low"): ("low_low", "Low Influence / Low Interest", "Monitor"),
}


def _level_of(item: Any, attr: str) -> str:
    value = item.get(attr) if isinstance(item, dict) else getattr(item, attr)
    # Enum members hash by name, so compare on the plain value
    return value.value if isinstance(value, Level) else value


def classify(stakeholders: Iterable[Any]) -> StakeholderQuadrants:
    """Partition stakeholders into the four influence/interest quadrants.

    Accepts model instances or dicts carrying ``influence`` and
    ``interest``. Anything rated medium on either axis lands in no
    quadrant; medium is never rounded up or down.
    """
    result = StakeholderQuadrants()
    for item in stakeholders:
        key = (_level_of(item, "influence"), _level_of(item, "interest"))
        quadrant = QUADRANTS.get(key)
        if quadrant is not None:
            getattr(result, quadrant[0]).append(item)
    return result


# ── Validation helpers ───────────────────────────────────────────────────────


def _required_text(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Stakeholder {key} is required.", details={key: "required"})
    return value.strip()[:200]


def _optional_text(data: dict, key: str, limit: int | None = 200) -> str:
    value = data.get(key) or ""
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string.", details={key: "invalid"})
    return value[:limit] if limit else value


def _level(value: Any, key: str) -> str:
    if not isinstance(value, str) or value not in _VALID_LEVELS:
        raise ValidationError(
            f"{key} must be one of: {', '.join(sorted(_VALID_LEVELS))}",
            details={key: value},
        )
    return value


def _clean_concerns(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(c, str) for c in value):
        raise ValidationError("concerns must be a list of strings.", details={"concerns": "invalid"})
    return [c.strip() for c in value if c.strip()]


def _get_or_404(stakeholder_id: str) -> Stakeholder:
    s = db.session.get(Stakeholder, stakeholder_id)
    if s is None:
        raise NotFoundError(resource="Stakeholder", resource_id=stakeholder_id)
    return s


# ── Stakeholder CRUD ─────────────────────────────────────────────────────────


def create_stakeholder(data: dict) -> dict:
    """Create a stakeholder. The id is assigned here, never by the caller.

    Args:
        data: name and role (required); organization, concerns, influence,
              interest, phase, notes (optional). Levels default to medium.

    Returns:
        Serialized Stakeholder dict.

    Raises:
        ValidationError: Missing name/role, invalid level or concerns.
    """
    stakeholder = Stakeholder(
        seq=_next_seq(),
        name=_required_text(data, "name"),
        role=_required_text(data, "role"),
        organization=_optional_text(data, "organization"),
        concerns=_clean_concerns(data.get("concerns")),
        influence=_level(data.get("influence", Level.MEDIUM.value), "influence"),
        interest=_level(data.get("interest", Level.MEDIUM.value), "interest"),
        phase=_optional_text(data, "phase"),
        notes=_optional_text(data, "notes", limit=None),
    )
    db.session.add(stakeholder)
    db.session.commit()
    logger.info(
        "Stakeholder created",
        extra={"stakeholder_id": stakeholder.id, "event_type": "stakeholder_created"},
    )
    return stakeholder.to_dict()


def _next_seq() -> int:
    current = db.session.execute(select(func.max(Stakeholder.seq))).scalar()
    return (current or 0) + 1


def _ordered_query():
    return select(Stakeholder).order_by(Stakeholder.seq)


def list_stakeholders(influence: str | None = None, interest: str | None = None) -> list[dict]:
    """List stakeholders in creation order, optionally filtered by level.

    Raises:
        ValidationError: If a filter value is not a valid level.
    """
    stmt = _ordered_query()
    if influence:
        stmt = stmt.where(Stakeholder.influence == _level(influence, "influence"))
    if interest:
        stmt = stmt.where(Stakeholder.interest == _level(interest, "interest"))
    items = db.session.execute(stmt).scalars().all()
    return [s.to_dict() for s in items]


def get_stakeholder(stakeholder_id: str) -> dict:
    return _get_or_404(stakeholder_id).to_dict()


def update_stakeholder(stakeholder_id: str, data: dict) -> dict:
    """Update the supplied fields only.

    Raises:
        NotFoundError: Unknown id.
        ValidationError: Blank name/role, invalid level or concerns.
    """
    s = _get_or_404(stakeholder_id)

    # Validate everything before touching the row
    changes: dict[str, Any] = {}
    for key in ("name", "role"):
        if key in data:
            changes[key] = _required_text(data, key)
    for key in ("influence", "interest"):
        if key in data:
            changes[key] = _level(data[key], key)
    if "concerns" in data:
        changes["concerns"] = _clean_concerns(data["concerns"])
    for key in ("organization", "phase"):
        if key in data:
            changes[key] = _optional_text(data, key)
    if "notes" in data:
        changes["notes"] = _optional_text(data, "notes", limit=None)

    for key, value in changes.items():
        setattr(s, key, value)

    db.session.commit()
    logger.info(
        "Stakeholder updated",
        extra={"stakeholder_id": stakeholder_id, "event_type": "stakeholder_updated"},
    )
    return s.to_dict()


def delete_stakeholder(stakeholder_id: str) -> None:
    s = _get_or_404(stakeholder_id)
    db.session.delete(s)
    db.session.commit()
    logger.info(
        "Stakeholder deleted",
        extra={"stakeholder_id": stakeholder_id, "event_type": "stakeholder_deleted"},
    )


def add_concern(stakeholder_id: str, concern: str) -> dict:
    """Append a trimmed concern to the end of the list.

    Raises:
        ValidationError: If the concern is blank.
    """
    text = (concern or "").strip() if isinstance(concern, str) else ""
    if not text:
        raise ValidationError("Concern text is required.", details={"concern": "required"})
    s = _get_or_404(stakeholder_id)
    s.concerns = [*(s.concerns or []), text]
    db.session.commit()
    return s.to_dict()


def remove_concern(stakeholder_id: str, position: int) -> dict:
    """Remove the concern at a 0-based position.

    Raises:
        ValidationError: If position is outside the concern list.
    """
    s = _get_or_404(stakeholder_id)
    concerns = list(s.concerns or [])
    if not 0 <= position < len(concerns):
        raise ValidationError(
            f"Concern position {position} is out of range.",
            details={"position": position, "count": len(concerns)},
        )
    del concerns[position]
    s.concerns = concerns
    db.session.commit()
    return s.to_dict()


# ── Matrix ───────────────────────────────────────────────────────────────────


def get_stakeholder_matrix() -> dict:
    """Return the influence/interest quadrants for the whole registry.

    Returns:
        Dict with ``quadrants`` (keyed high_high / high_low / low_high /
        low_low, each with label, strategy and stakeholder summaries),
        ``total`` and ``unclassified`` (medium on either axis).
    """
    stakeholders = db.session.execute(_ordered_query()).scalars().all()
    grouped = classify(stakeholders)

    quadrants = {}
    placed = 0
    for key, label, strategy in QUADRANTS.values():
        members = getattr(grouped, key)
        placed += len(members)
        quadrants[key] = {
            "label": label,
            "strategy": strategy,
            "stakeholders": [
                {"id": s.id, "name": s.name, "role": s.role, "organization": s.organization or ""}
                for s in members
            ],
        }

    return {
        "quadrants": quadrants,
        "total": len(stakeholders),
        "unclassified": len(stakeholders) - placed,
    }


# ── Seeding ──────────────────────────────────────────────────────────────────


DEFAULT_STAKEHOLDERS = [
    {
        "name": "Example: CIO",
        "role": "Chief Information Officer",
        "organization": "IT Leadership",
        "concerns": ["Strategic alignment", "Cost management", "Risk mitigation"],
        "influence": "high",
        "interest": "high",
        "phase": "All Phases",
        "notes": "Key sponsor for the architecture initiative",
    },
]


def seed_default_stakeholders() -> int:
    """Insert the example stakeholders when the registry is empty.

    Returns:
        Number of records created (0 if the registry already had data).
    """
    if db.session.execute(select(Stakeholder.id).limit(1)).first() is not None:
        return 0
    for data in DEFAULT_STAKEHOLDERS:
        create_stakeholder(data)
    return len(DEFAULT_STAKEHOLDERS)
