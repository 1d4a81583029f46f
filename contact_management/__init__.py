"""Contact management REST service."""
