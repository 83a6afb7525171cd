"""
Domain layer package.

Contains entities and port interfaces. This layer has ZERO external
dependencies: no framework imports, no IO, no side effects.
"""
