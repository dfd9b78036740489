"""Herald: multi-tenant system notification banner service."""

__version__ = "1.0.0"
