"""
Workforce API
GraphQL service for employee records and user accounts
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
