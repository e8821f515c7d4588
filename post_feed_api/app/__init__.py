"""
Application package initializer.

The application is organised the usual way: ``core`` holds settings,
logging, errors and the in‑memory post store; ``schemas`` holds the
pydantic models that define the wire format; ``services`` holds the
operations run against the store; ``api`` exposes them over HTTP.
"""
