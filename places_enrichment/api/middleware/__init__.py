"""Middleware for places enrichment."""

from places_enrichment.api.middleware.request_id import request_id_middleware

__all__ = ["request_id_middleware"]
