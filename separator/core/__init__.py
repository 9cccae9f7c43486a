"""Internal implementation modules of the separator package."""
