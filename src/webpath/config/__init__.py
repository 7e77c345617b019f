"""Configuration loading and file locations."""
