"""
WSGI / Flask CLI entry point.

Usage:
    gunicorn wsgi:app
    flask --app wsgi seed-stakeholders
    flask --app wsgi db upgrade      # Flask-Migrate, once migrations/ exists
"""

from adm_guide import create_app

app = create_app()
