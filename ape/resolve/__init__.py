from .registry import PlaylistEntry, PlaylistRegistry, RegistryResult, build_registry
from .membership import MembershipResult, resolve_membership
from .lookup import LookupResult, lookup_audio

__all__ = [
    "PlaylistEntry",
    "PlaylistRegistry",
    "RegistryResult",
    "build_registry",
    "MembershipResult",
    "resolve_membership",
    "LookupResult",
    "lookup_audio",
]
