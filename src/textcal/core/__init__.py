"""Core infrastructure for textcal: configuration."""
