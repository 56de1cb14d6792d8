"""
Supabase client initialization.
Single point of database connection.
"""

from supabase import create_client, Client
import asyncio
import concurrent.futures
import logging
from functools import wraps
from typing import Optional

from config.settings import settings

logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def get_supabase() -> Client:
    """Create the client on first use from SUPABASE_URL / SUPABASE_SERVICE_KEY (or SUPABASE_KEY)"""
    global _client
    if _client is not None:
        return _client

    url, key = settings.supabase_credentials
    if not url or not key:
        logger.error(
            "Supabase credentials not configured! "
            f"SUPABASE_URL: {'set' if url else 'MISSING'}, "
            f"SUPABASE_KEY: {'set' if key else 'MISSING'}"
        )
        raise RuntimeError("Supabase credentials not configured")

    # Schema isolation: staging uses its own schema, production uses public
    if settings.db_schema != "public":
        from supabase.lib.client_options import ClientOptions
        _client = create_client(url, key, options=ClientOptions(schema=settings.db_schema))
    else:
        _client = create_client(url, key)
    return _client


# Bounded thread pool for blocking Supabase calls
_db_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=10,
    thread_name_prefix="supabase-db",
)


def run_sync(func):
    """
    Decorator to run synchronous Supabase operations in async context.
    Supabase Python SDK is synchronous, so we need this wrapper.
    Uses a dedicated bounded thread pool instead of the default executor.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_db_executor, lambda: func(*args, **kwargs))
    return wrapper
