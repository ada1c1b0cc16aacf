"""Adapters – integrations with third-party frameworks."""
