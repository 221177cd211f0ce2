"""
Report output for the checker.
One colon-joined line per code on stdout, plus a block for each anomaly.
"""

import sys
from collections import Counter

from catalog_probe.models import Classification

ANOMALY_LABELS = {
    Classification.DISCONTINUED_OR_REDIRECTED: "discontinued/redirected",
    Classification.OUT_OF_STOCK_OR_HIDDEN: "out of stock/hidden",
}


def format_line(signals):
    return ":".join([
        str(signals.code),
        str(signals.page.status),
        str(signals.image.status),
        str(signals.search.status),
        signals.model_name,
    ])


def format_anomaly(signals, classification):
    """Diagnostic lines for a non-NORMAL code (empty list for NORMAL)."""
    if classification is Classification.NORMAL:
        return []
    lines = [
        f"--detected ({ANOMALY_LABELS[classification]})",
        signals.urls.page,
        signals.urls.image,
    ]
    if classification is Classification.OUT_OF_STOCK_OR_HIDDEN:
        lines.append(f"search URL: {signals.urls.search}")
    lines.append("--")
    return lines


class Reporter:
    """
    Writes report lines in the order codes are handed in and keeps run tallies.
    """

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout
        self.tally = Counter()

    def report(self, signals, classification):
        self.tally["checked"] += 1
        self.tally[classification.value] += 1
        self._write(format_line(signals))
        for line in format_anomaly(signals, classification):
            self._write(line)

    def summary(self):
        return {
            "checked": self.tally["checked"],
            "discontinued_or_redirected": self.tally[Classification.DISCONTINUED_OR_REDIRECTED.value],
            "out_of_stock_or_hidden": self.tally[Classification.OUT_OF_STOCK_OR_HIDDEN.value],
        }

    def _write(self, line):
        print(line, file=self.stream, flush=True)
