"""
Supabase client configuration for the storage service.
Handles Supabase initialization with proper error handling.
"""

import logging
from typing import Optional

from supabase import Client, create_client
from supabase.lib.client_options import ClientOptions

from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


class SupabaseManager:
    """
    Supabase client manager used by the image storage client.
    """
    
    def __init__(self, settings: Optional[Settings] = None):
        self._client: Optional[Client] = None
        self.settings = settings or get_settings()
    
    @property
    def client(self) -> Client:
        """Get or create Supabase client with lazy initialization."""
        if self._client is None:
            self._client = self._create_client()
        return self._client
    
    def _create_client(self) -> Client:
        """Create Supabase client with the service role key."""
        if not self.settings.storage_enabled:
            raise ConnectionError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        
        try:
            client_options = ClientOptions(
                headers={
                    "User-Agent": f"ELearningAPI/{self.settings.APP_VERSION}",
                },
                storage_client_timeout=30,
            )
            
            client = create_client(
                self.settings.SUPABASE_URL,
                self.settings.SUPABASE_SERVICE_ROLE_KEY,
                options=client_options
            )
            
            logger.info("Supabase client initialized successfully")
            return client
            
        except Exception as e:
            logger.error(f"Failed to initialize Supabase client: {e}")
            raise ConnectionError(f"Supabase initialization failed: {e}")
    
    def get_storage_bucket(self):
        """Get the storage bucket handle for media uploads."""
        return self.client.storage.from_(self.settings.SUPABASE_STORAGE_BUCKET)
