"""
Application layer package.

Contains the translator that validates, classifies and maps
domain errors onto HTTP outcomes. Depends on the domain layer only.
"""
