"""Named, cacheable variables resolved from a request context, request data and the clock."""

__version__ = "0.1.0"
__all__ = ["__version__"]