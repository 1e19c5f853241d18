"""Domain types and constants."""
