"""
FILE DESCRIPTION: Per-code driver that wires probe, parser and classifier together.
KEY FUNCTIONS/CLASSES: CatalogChecker
"""

import logging
import time

from catalog_probe.classifier import classify_signals
from catalog_probe.core import CatalogConfig
from catalog_probe.fetcher import HttpProbe
from catalog_probe.models import ProbeOutcome, ProductSignals, ProductUrls
from catalog_probe.parser import extract_page, verify_search

logger = logging.getLogger(__name__)


class CatalogChecker:
    """
    FLOW: For each code -> builds page/image/search URLs -> probes them one after another ->
    inspects page and search bodies -> classifies the three signals -> yields the result.
    Sequential on purpose; one slow probe only delays the run.
    """

    def __init__(self, config=None, probe=None, sleep=time.sleep):
        self.config = config or CatalogConfig.from_env()
        self.probe = probe or HttpProbe.from_config(self.config)
        self.sleep = sleep

    def build_urls(self, code):
        values = {"host": self.config.host, "code": str(code)}
        return ProductUrls(
            page=self.config.page_url_template.format(**values),
            image=self.config.image_url_template.format(**values),
            search=self.config.search_url_template.format(**values),
        )

    def check(self, code):
        urls = self.build_urls(code)

        fetched = self.probe.probe(urls.page, read_body=True)
        page = extract_page(fetched.status, fetched.body, self.config)

        # The image body is never inspected
        image = ProbeOutcome(self.probe.probe(urls.image).status)

        fetched = self.probe.probe(urls.search, read_body=True)
        search = verify_search(fetched.status, fetched.body, code, self.config)

        return ProductSignals(code=code, urls=urls, page=page, image=image, search=search)

    def run(self, codes):
        """Yield (signals, classification) for every code, in sequence order."""
        for i, code in enumerate(codes):
            if i and self.config.delay > 0:
                self.sleep(self.config.delay)
            signals = self.check(code)
            classification = classify_signals(signals)
            logger.debug(f"[CHECK] {code} -> {classification.value}")
            yield signals, classification
