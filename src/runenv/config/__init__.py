"""Configuration - settings and log levels."""
