"""Layered note-keeping backend: configuration, domain, errors, services, presenters and controllers."""

__version__ = "0.1.0"
__all__ = ["config", "domain", "errors", "presenters", "services", "web"]