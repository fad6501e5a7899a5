from __future__ import annotations

import pytest

from adblock_check.request_types import (
    UNIFIED_REQUEST_TYPES,
    VENDOR_REQUEST_TYPE_MAPPING,
    VENDOR_REQUEST_TYPES,
    normalize_request_type,
    request_type_choices,
)


@pytest.mark.parametrize(
    ("vendor", "unified"),
    [
        ("Audio", "media"),
        ("Fetch", "xhr"),
        ("CSS stylesheet", "stylesheet"),
        ("Link prefetch resource", "speculative"),
        ("Image", "image"),
        ("Manifest", "web_manifest"),
        ("XSL stylesheet", "xslt"),
    ],
)
def test_vendor_types_map_to_unified(vendor: str, unified: str) -> None:
    assert normalize_request_type(vendor) == unified


def test_every_vendor_type_maps_into_unified_vocabulary() -> None:
    for vendor, unified in VENDOR_REQUEST_TYPE_MAPPING.items():
        assert normalize_request_type(vendor) == unified
        assert unified in UNIFIED_REQUEST_TYPES


def test_unified_types_are_identity() -> None:
    for token in UNIFIED_REQUEST_TYPES:
        assert normalize_request_type(token) == token


def test_vocabularies_are_disjoint() -> None:
    assert not UNIFIED_REQUEST_TYPES & VENDOR_REQUEST_TYPES


@pytest.mark.parametrize("token", ["", "IMAGE", "fetch", "Beacon", "made-up"])
def test_unknown_types_pass_through(token: str) -> None:
    assert normalize_request_type(token) == token
    assert token not in request_type_choices()


def test_choices_cover_both_vocabularies() -> None:
    choices = request_type_choices()
    assert set(choices) == UNIFIED_REQUEST_TYPES | VENDOR_REQUEST_TYPES
    assert len(choices) == len(set(choices))
    assert choices.index("xslt") < choices.index("Audio")
