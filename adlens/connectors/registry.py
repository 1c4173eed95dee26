"""AdLens — Extractor Registry.

Maps platform keys to extractors. A new platform is added by registering a
new PlatformExtractor subclass here.
"""

from typing import Any, Dict, Optional

from adlens.connectors.base import PlatformExtractor
from adlens.connectors.google.extractor import GoogleExtractor
from adlens.connectors.meta.extractor import MetaExtractor
from adlens.core.errors import UnknownPlatformError
from adlens.models.normalized_models import IdentityHints, NormalizedPerformanceRecord

EXTRACTORS: Dict[str, PlatformExtractor] = {
    extractor.platform: extractor for extractor in (MetaExtractor(), GoogleExtractor())
}


def get_extractor(platform: str) -> PlatformExtractor:
    """Look up the extractor for a platform key ("meta" | "google")."""
    extractor = EXTRACTORS.get(platform)
    if extractor is None:
        raise UnknownPlatformError(platform)
    return extractor


def extract(
    platform: str, raw: Any, hints: Optional[IdentityHints] = None
) -> Optional[NormalizedPerformanceRecord]:
    """Normalize a raw payload with the extractor for ``platform``."""
    return get_extractor(platform).extract(raw, hints)
