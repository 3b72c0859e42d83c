"""
Shared error handling package.

Wires the translator into FastAPI so that domain errors
are consistently translated into API responses.
"""
