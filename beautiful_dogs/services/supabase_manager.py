"""
Supabase client holder.

The client is built on first access and nothing in the app consumes it yet.
"""
from typing import Optional

from loguru import logger
from supabase import Client, create_client


class SupabaseManager:
    def __init__(self, url: str, key: str):
        if not url or not key:
            raise ValueError("Supabase url and key are required")
        self.url = url
        self._key = key
        self._client: Optional[Client] = None

    @property
    def connected(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> Client:
        if self._client is None:
            logger.info(f"Creating Supabase client for {self.url}")
            self._client = create_client(self.url, self._key)
        return self._client
