"""
Provider admin API client.
"""
from .api_client import ProviderAdminClient

__all__ = ["ProviderAdminClient"]
