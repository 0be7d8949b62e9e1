"""Unit tests for store, validation, model and limiter logic."""
