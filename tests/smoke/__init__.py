"""
SMOKE Tests - Critical Path Health Checks

These tests verify the package imports, configuration loads and the app
answers its health check.

Usage:
    pytest -m smoke
    pytest tests/smoke/
"""
