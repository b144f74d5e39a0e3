"""Configuration, logging and base errors."""
