"""subtrack — users and subscriptions served from an in-memory table store."""

__version__ = "1.0.0"
