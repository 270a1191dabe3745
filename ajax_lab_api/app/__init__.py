"""
Application package initializer.

The service is organised in layers: ``core`` (configuration, logging,
database access and errors), ``schemas`` (request and response
models), ``services`` (the calculation history, likes and comments,
and the verification demo) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
