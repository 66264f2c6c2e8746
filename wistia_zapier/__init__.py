"""Wistia integration app: API-key auth, project/video triggers and a create-project action."""

__version__ = "1.0.0"
