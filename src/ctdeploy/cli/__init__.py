"""Command-line interface for ctdeploy."""
