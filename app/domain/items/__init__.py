"""Item resource: entity and repository port."""
