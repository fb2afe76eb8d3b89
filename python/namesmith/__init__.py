"""
namesmith - Offline naming generation engine

Turns a short Chinese and/or English description into convention-correct
programming identifiers (camelCase, PascalCase, snake_case, ...) without any
network call.
"""

__version__ = "0.1.0"

# DO NOT import the engine here - pypinyin and the optional spaCy tagger are
# loaded lazily so that importing the package stays cheap for callers that
# only need the casing helpers in namesmith.naming.

__all__ = ["__version__"]
