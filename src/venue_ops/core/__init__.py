"""Domain types, errors, results, clock and configuration."""
