"""Request type vocabularies and the mapping between them."""

from typing import Dict, FrozenSet, List

# Types used by filter list projects (AdBlock Plus, uBlock Origin, AdGuard).
# The engine understands these directly.
UNIFIED_REQUEST_TYPES: FrozenSet[str] = frozenset(
    [
        "beacon",
        "csp_report",
        "document",
        "font",
        "image",
        "media",
        "object",
        "ping",
        "script",
        "stylesheet",
        "sub_frame",
        "websocket",
        "xhr",
        "other",
        "speculative",
        "web_manifest",
        "xbl",
        "xml_dtd",
        "xslt",
    ]
)

# Blink's names from Resource::ResourceTypeToString, plus the initiator type
# names that Chromium reports, which all fall into "other".
VENDOR_REQUEST_TYPE_MAPPING: Dict[str, str] = {
    "Attribution resource": "other",
    "Audio": "media",
    "CSS resource": "stylesheet",
    "CSS stylesheet": "stylesheet",
    "Dictionary": "other",
    "Document": "document",
    "Fetch": "xhr",
    "Font": "font",
    "Icon": "other",
    "Image": "image",
    "Internal resource": "other",
    "Link element resource": "other",
    "Link prefetch resource": "speculative",
    "Manifest": "web_manifest",
    "Mock": "other",
    "Other resource": "other",
    "Processing instruction": "other",
    "Script": "script",
    "SpeculationRule": "speculative",
    "SVG document": "media",
    "SVG Use element resource": "media",
    "Text track": "other",
    "Track": "other",
    "User Agent CSS resource": "stylesheet",
    "Video": "media",
    "XML resource": "document",
    "XMLHttpRequest": "xhr",
    "XSL stylesheet": "xslt",
}

VENDOR_REQUEST_TYPES: FrozenSet[str] = frozenset(VENDOR_REQUEST_TYPE_MAPPING)


def normalize_request_type(token: str) -> str:
    """Translate a vendor request type to the engine's vocabulary.

    Unified and unknown tokens are returned unchanged; the engine decides
    what an unknown type means. Lookups are case sensitive.
    """
    return VENDOR_REQUEST_TYPE_MAPPING.get(token, token)


def request_type_choices() -> List[str]:
    """All accepted ``--type`` values, unified types first."""
    return sorted(UNIFIED_REQUEST_TYPES) + sorted(VENDOR_REQUEST_TYPES)
