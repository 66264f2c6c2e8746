"""Create actions."""

from wistia_zapier.creates.upload import upload_create

__all__ = ["upload_create"]
