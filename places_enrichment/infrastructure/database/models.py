"""Database models for places enrichment.

Type-safe dataclasses representing database records.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# Columns selected from the candidates table
CANDIDATE_COLUMNS = 'id, "Namn", "Adress", "Latitud", "Longitud"'
LATITUDE_COLUMN = "Latitud"
LONGITUDE_COLUMN = "Longitud"

# Enriched table columns
ENRICHED_KEY_COLUMN = "preschool_id"
ENRICHED_UPDATED_COLUMN = "updated_at"


@dataclass(frozen=True)
class EnrichmentCandidate:
    """A location record eligible for enrichment."""

    id: str
    name: Optional[str]
    address: Optional[str]
    latitude: float
    longitude: float

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "EnrichmentCandidate":
        """Build a candidate from a candidates table row."""
        return cls(
            id=str(row["id"]),
            name=row.get("Namn"),
            address=row.get("Adress"),
            latitude=float(row[LATITUDE_COLUMN]),
            longitude=float(row[LONGITUDE_COLUMN]),
        )

    def to_request(self) -> Dict[str, Any]:
        """Request body expected by the enrichment Edge Function."""
        return {
            "preschoolId": self.id,
            "lat": self.latitude,
            "lng": self.longitude,
            "address": self.address,
            "name": self.name,
        }
