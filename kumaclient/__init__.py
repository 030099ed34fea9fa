"""Tag and status page models, errors and a tag service for Uptime Kuma."""

__version__ = "0.1.0"
__all__ = ["errors", "statuspage", "tag", "tags"]