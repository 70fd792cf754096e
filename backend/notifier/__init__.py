# backend/notifier/__init__.py
"""
Birthday notifier package.

This package contains:
- clock: injectable "today" sources
- people: subject schema
- notifications: birthday rule, generators, aggregation service, presenter
- main: FastAPI application entrypoint
- runner: CLI entrypoint
"""
