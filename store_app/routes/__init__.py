"""
Routes package for the Task Store service.

This package contains route blueprints:
- api: REST API endpoints for programmatic access
"""
