"""
Campus Backend
GraphQL service over an in-memory academic dataset
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
