"""Edge Function invoker for places enrichment.

Calls the remote enrichment function for a single candidate.
"""

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Optional

from supabase import Client

from places_enrichment.config import config
from places_enrichment.core.logging import logger
from places_enrichment.infrastructure.database.client import SupabaseClient
from places_enrichment.infrastructure.database.models import EnrichmentCandidate


@dataclass
class InvocationResult:
    """Outcome of one enrichment call, as reported by the function."""

    success: bool
    error: Optional[str] = None

    @classmethod
    def from_response(cls, response: Any) -> "InvocationResult":
        """Interpret a function response body.

        A body carrying a truthy "error" or "success": false is a reported failure.
        Anything else (including an empty body) counts as success.
        """
        if isinstance(response, (bytes, bytearray)):
            response = response.decode("utf-8", errors="replace")
        if isinstance(response, str):
            try:
                response = json.loads(response) if response.strip() else {}
            except ValueError:
                return cls(success=True)

        if isinstance(response, dict):
            error = response.get("error")
            if error:
                if isinstance(error, dict):
                    error = error.get("message") or json.dumps(error)
                return cls(success=False, error=str(error))
            if response.get("success") is False:
                return cls(success=False, error="function reported success=false")

        return cls(success=True)


class EnrichmentInvoker:
    """Invokes the enrichment Edge Function through the Supabase client."""

    def __init__(self, function_name: Optional[str] = None, client: Optional[Client] = None):
        """Initialize invoker.

        Args:
            function_name: Edge Function name. Defaults to config.enrichment_function()
            client: Explicit Supabase client (defaults to the shared singleton)
        """
        self.function_name = function_name or config.enrichment_function()
        self._override = client

    @property
    def db(self) -> Client:
        if self._override is not None:
            return self._override
        return SupabaseClient().client

    async def invoke(self, candidate: EnrichmentCandidate) -> InvocationResult:
        """Enrich one candidate.

        Args:
            candidate: Record to enrich

        Returns:
            InvocationResult describing a reported success or failure

        Raises:
            Exception: Transport and non-2xx errors propagate to the caller
        """
        logger.debug(
            "enrichment_invoked",
            function=self.function_name,
            candidate_id=candidate.id,
        )
        response = await asyncio.to_thread(
            self.db.functions.invoke,
            self.function_name,
            invoke_options={"body": candidate.to_request(), "responseType": "json"},
        )
        return InvocationResult.from_response(response)
