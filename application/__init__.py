"""
Application layer for FitCoach API.

This package contains:
- ports/: Protocol interfaces for the catalog and repositories
- exceptions: Domain errors raised by services and infrastructure
"""
