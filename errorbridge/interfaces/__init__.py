"""
Interfaces layer package.

Contains the output adapters that deliver a translated outcome
(reply builder and boxed HTTP error) and their Pydantic schemas.
No classification logic belongs here.
"""
