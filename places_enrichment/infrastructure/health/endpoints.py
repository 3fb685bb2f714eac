"""Health check endpoint handler for places enrichment."""

from typing import Any, Dict

from places_enrichment.infrastructure.health.checks import test_supabase_connection


async def get_health_status(service_name: str = "places-enrichment") -> Dict[str, Any]:
    """Get health status including the Supabase dependency.

    Args:
        service_name: Service name for response

    Returns:
        Dict with overall status and dependency health
    """
    try:
        supabase_health = await test_supabase_connection()
    except Exception as e:
        supabase_health = {"status": "error", "error": str(e)}

    overall_status = "healthy" if supabase_health.get("status") == "healthy" else "degraded"

    return {
        "status": overall_status,
        "service": service_name,
        "version": "1.0.0",
        "dependencies": {"supabase": supabase_health},
    }
