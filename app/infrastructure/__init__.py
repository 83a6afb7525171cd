"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports defined in
the domain layer, plus the database engine and session management.
"""
