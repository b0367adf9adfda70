"""Version information for domain-kernel."""

__version__ = "0.1.0"
