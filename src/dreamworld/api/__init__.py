"""Dreamworld Image Generator: FastAPI REST API layer.

Modules
-------
main
    FastAPI application with route handlers, error mapping, and the
    ``main()`` CLI entry point.
models
    Pydantic models for API request and response validation.
"""
