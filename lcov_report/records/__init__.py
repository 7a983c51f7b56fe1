"""Coverage record types: branches and functions."""
