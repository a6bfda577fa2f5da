"""Static reference data: the career catalog and the mapping tables."""
