"""
Infrastructure adapters for the item resource.

ORM model and the SQLAlchemy implementation of ItemRepository.
"""
