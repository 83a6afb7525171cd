"""Use cases for the item resource."""
