"""Adapters for the console, configuration and external tools."""
