"""Dataset parsing and the read-only pronunciation table."""
