"""Domain records, state container and game formulas."""
