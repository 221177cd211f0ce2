"""
Sequential consistency checker for one product catalog.
Flags codes whose page, image and search listing disagree.
"""

from catalog_probe.classifier import classify
from catalog_probe.core import CatalogConfig, ConfigurationError
from catalog_probe.engine import CatalogChecker
from catalog_probe.models import Classification, ProductCode
from catalog_probe.reporter import Reporter
from catalog_probe.sequencer import CodeSequence, parse_start_code

__all__ = [
    "CatalogChecker",
    "CatalogConfig",
    "Classification",
    "CodeSequence",
    "ConfigurationError",
    "ProductCode",
    "Reporter",
    "classify",
    "parse_start_code",
]
