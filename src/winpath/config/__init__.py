"""Configuration loading and location helpers."""
