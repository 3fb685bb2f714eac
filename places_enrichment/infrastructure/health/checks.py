"""Health check functions for places enrichment.

Tests connectivity to Supabase.
"""

import asyncio
from typing import Any, Dict

from places_enrichment.config import config
from places_enrichment.infrastructure.database import SupabaseClient


async def test_supabase_connection(timeout: float = 2.0) -> Dict[str, Any]:
    """Test Supabase connectivity with minimal query.

    Returns:
        Dict with status ("healthy", "unconfigured", "timeout", "unavailable")
        and optional error message
    """
    try:
        database = SupabaseClient()
        if not database.is_configured():
            return {"status": "unconfigured", "error": "Supabase credentials not set"}

        supabase = database.client

        await asyncio.wait_for(
            asyncio.to_thread(
                lambda: supabase.table(config.enriched_table()).select("*").limit(1).execute()
            ),
            timeout=timeout,
        )

        return {"status": "healthy", "database": "connected"}

    except asyncio.TimeoutError:
        return {"status": "timeout", "error": f"Request timed out after {timeout:g}s"}

    except Exception as e:
        return {"status": "unavailable", "error": str(e)[:100]}
