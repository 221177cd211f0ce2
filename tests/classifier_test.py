import unittest

from catalog_probe.classifier import classify, classify_signals
from catalog_probe.models import (
    BODY_READ_ERROR,
    NETWORK_ERROR,
    Classification,
    ProbeOutcome,
    ProductCode,
    ProductSignals,
    ProductUrls,
    SearchOutcome,
)


class TestClassify(unittest.TestCase):
    def test_classification_table(self):
        table = [
            ((404, 200, 404), Classification.DISCONTINUED_OR_REDIRECTED),
            ((NETWORK_ERROR, 200, 404), Classification.DISCONTINUED_OR_REDIRECTED),
            ((200, 200, 404), Classification.OUT_OF_STOCK_OR_HIDDEN),
            ((200, 200, 200), Classification.NORMAL),
            ((404, 404, 404), Classification.NORMAL),
        ]
        for statuses, expected in table:
            with self.subTest(statuses=statuses):
                self.assertEqual(classify(*statuses), expected)

    def test_redirected_page_with_live_image(self):
        self.assertEqual(classify(301, 200, 200), Classification.DISCONTINUED_OR_REDIRECTED)

    def test_search_sentinels_count_as_missing(self):
        for search in (NETWORK_ERROR, BODY_READ_ERROR, 500):
            self.assertEqual(classify(200, 200, search), Classification.OUT_OF_STOCK_OR_HIDDEN)

    def test_dead_image_is_never_flagged(self):
        for page, search in ((200, 404), (404, 200), (NETWORK_ERROR, NETWORK_ERROR)):
            self.assertEqual(classify(page, 404, search), Classification.NORMAL)
            self.assertEqual(classify(page, NETWORK_ERROR, search), Classification.NORMAL)

    def test_deterministic(self):
        results = {classify(200, 200, 404) for _ in range(10)}
        self.assertEqual(results, {Classification.OUT_OF_STOCK_OR_HIDDEN})

    def test_classify_signals(self):
        signals = ProductSignals(
            code=ProductCode("ab", 1),
            urls=ProductUrls("p", "i", "s"),
            page=ProbeOutcome(404),
            image=ProbeOutcome(200),
            search=SearchOutcome(404),
        )
        self.assertEqual(classify_signals(signals), Classification.DISCONTINUED_OR_REDIRECTED)


if __name__ == "__main__":
    unittest.main()
