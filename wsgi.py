"""WSGI entry point for the task store service."""

import os

from store_app import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))
