"""fileshare - resource sharing service with graded per-user access."""

__version__ = "0.1.0"
