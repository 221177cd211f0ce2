"""
Product code sequencing.
Splits a start code into prefix + numeric suffix and walks a contiguous range.
"""

from catalog_probe.core import CODE_WIDTH, ConfigurationError
from catalog_probe.models import ProductCode


def parse_start_code(text, width=CODE_WIDTH):
    """
    Split `text` into prefix and a `width`-digit suffix.
    The code must be strictly longer than the suffix, so a prefix is always present.
    """
    if len(text) <= width:
        raise ConfigurationError(
            f"product code '{text}' needs at least {width + 1} characters "
            f"(a prefix and {width} digits)"
        )
    prefix, digits = text[:-width], text[-width:]
    if not (digits.isascii() and digits.isdigit()):
        raise ConfigurationError(f"could not parse the numeric part of product code '{text}'")
    return ProductCode(prefix, int(digits), width)


def parse_range(text):
    try:
        count = int(text)
    except (TypeError, ValueError):
        count = 0
    if count <= 0:
        raise ConfigurationError(f"range '{text}' must be a positive integer")
    return count


class CodeSequence:
    """
    Finite, restartable sequence of `count` codes starting at `start`.
    Each iteration starts again from `start`.
    """

    def __init__(self, start, count):
        if count < 1:
            raise ConfigurationError(f"range must be positive, got {count}")
        self.start = start
        self.count = count

    @property
    def last(self):
        return self.start.advance(self.count - 1)

    def __len__(self):
        return self.count

    def __iter__(self):
        for i in range(self.count):
            yield self.start.advance(i)
