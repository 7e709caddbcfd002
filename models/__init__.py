from .serp_response import OrganicResult, SerpResponse
from .profile_lookup_result import ProfileLookupResult
from .lookup_outcome import LookupOutcome, LookupStatus

__all__ = [
    "OrganicResult",
    "SerpResponse",
    "ProfileLookupResult",
    "LookupOutcome",
    "LookupStatus",
]
