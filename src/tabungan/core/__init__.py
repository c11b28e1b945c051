"""Configuration, database and logging plumbing."""
