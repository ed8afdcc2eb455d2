"""
ADM Study Guide
Database models package.

Only user-owned, mutable state is persisted: the stakeholder registry and
wizard sessions. The phase catalog is static and lives in memory
(adm_guide.services.catalog_service).
"""

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
