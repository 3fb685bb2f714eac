"""Main entry point for places enrichment.

Usage:
    Development: uvicorn places_enrichment.main:app --reload --port 8000
    Production: uvicorn places_enrichment.main:app --host 0.0.0.0 --port 8000
"""

from places_enrichment.api import create_app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "places_enrichment.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
