"""
ADM Study Guide
Blueprint registry.
"""

from adm_guide.blueprints.catalog_bp import catalog_bp
from adm_guide.blueprints.health_bp import health_bp
from adm_guide.blueprints.stakeholder_bp import stakeholder_bp
from adm_guide.blueprints.wheel_bp import wheel_bp
from adm_guide.blueprints.wizard_bp import wizard_bp

ALL_BLUEPRINTS = (catalog_bp, wizard_bp, stakeholder_bp, wheel_bp, health_bp)
