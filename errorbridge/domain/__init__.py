"""
Domain layer package.

Contains the error taxonomy, the static kind-to-HTTP mapping table
and the value objects it produces. This layer has ZERO external
dependencies. No framework imports, no IO, no side effects.
"""
