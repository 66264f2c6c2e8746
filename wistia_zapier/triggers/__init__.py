"""Polling triggers."""

from wistia_zapier.triggers.projects import projects_trigger
from wistia_zapier.triggers.publish import publish_trigger

__all__ = ["projects_trigger", "publish_trigger"]
