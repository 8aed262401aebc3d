"""Top-level package for the Madde management dashboard client."""

# Lazy import keeps ``import dashboard`` free of settings and httpx side effects

__all__ = ["create_dashboard", "Dashboard"]


def __getattr__(name):
    """Lazy import of the application factory."""
    if name in ("create_dashboard", "Dashboard"):
        from dashboard.app import main

        return getattr(main, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
