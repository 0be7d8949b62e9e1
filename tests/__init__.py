"""
Test suite for the Task Store service.

This package contains:
- unit/: Store, validation, model and rate limiter tests
- integration/: HTTP API tests driven through the Flask test client
"""
