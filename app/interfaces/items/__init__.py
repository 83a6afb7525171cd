"""HTTP interface for the item resource."""
