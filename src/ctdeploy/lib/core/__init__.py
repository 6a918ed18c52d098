"""Paths, configuration and typed project settings."""
