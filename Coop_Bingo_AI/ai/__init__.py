"""Move scoring and suggestion."""
