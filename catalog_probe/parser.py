"""
Content inspection for product and search pages.
Plain substring scanning: the first occurrence of each marker wins,
and a missing marker yields an empty result rather than an error.
"""

from catalog_probe.core import CatalogConfig
from catalog_probe.models import HTTP_OK, NOT_FOUND, ProbeOutcome, SearchOutcome

_DEFAULT_CONFIG = CatalogConfig()


def is_soft_404(body, config=_DEFAULT_CONFIG):
    """True when a 200 page is really the catalog's 'product not found' page."""
    return config.not_found_marker in body


def extract_model_name(body, config=_DEFAULT_CONFIG):
    """
    Model name embedded in the structured description field.

    Steps:
    1. find the description marker; missing -> ""
    2. after it, find the model label; missing -> ""
    3. take everything up to the next double quote; missing -> ""
    4. cut at the first escaped <br>, then strip whitespace
    """
    desc_start = body.find(config.description_marker)
    if desc_start == -1:
        return ""
    value_start = desc_start + len(config.description_marker)

    label_start = body.find(config.model_marker, value_start)
    if label_start == -1:
        return ""
    name_start = label_start + len(config.model_marker)

    name_end = body.find('"', name_start)
    if name_end == -1:
        return ""
    extracted = body[name_start:name_end]

    br_index = extracted.find(config.line_break_entity)
    if br_index != -1:
        extracted = extracted[:br_index]

    return extracted.strip()


def extract_page(status, body, config=_DEFAULT_CONFIG):
    """
    Turn a page probe into a ProbeOutcome.
    Only a 200 body is inspected; any other status passes through untouched.
    """
    if status != HTTP_OK:
        return ProbeOutcome(status)
    if is_soft_404(body, config):
        return ProbeOutcome(NOT_FOUND)
    return ProbeOutcome(status, extract_model_name(body, config))


def verify_search(status, body, code, config=_DEFAULT_CONFIG):
    """
    200 only if the result list is populated AND links to /<code>.
    Non-200 statuses and sentinels are returned unchanged.
    """
    if status != HTTP_OK:
        return SearchOutcome(status)
    if config.search_hit_marker in body and f"/{code}" in body:
        return SearchOutcome(HTTP_OK)
    return SearchOutcome(NOT_FOUND)
