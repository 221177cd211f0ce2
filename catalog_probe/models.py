from enum import Enum
from dataclasses import dataclass

# Sentinel statuses. Real HTTP statuses are always positive.
NETWORK_ERROR = -1
BODY_READ_ERROR = -2

HTTP_OK = 200
# Reported for a soft-404 page and for a search page that does not list the code
NOT_FOUND = 404


class Classification(Enum):
    NORMAL = "NORMAL"
    DISCONTINUED_OR_REDIRECTED = "DISCONTINUED_OR_REDIRECTED"
    OUT_OF_STOCK_OR_HIDDEN = "OUT_OF_STOCK_OR_HIDDEN"


@dataclass(frozen=True)
class ProductCode:
    """
    Catalog identifier: free-form prefix + zero-padded numeric suffix.
    Invariant: width is constant across a run; only number changes.
    """
    prefix: str
    number: int
    width: int = 5

    def __str__(self):
        # Numbers wider than `width` keep their extra digits
        return f"{self.prefix}{self.number:0{self.width}d}"

    def advance(self, step=1):
        return ProductCode(self.prefix, self.number + step, self.width)


@dataclass(frozen=True)
class ProductUrls:
    page: str
    image: str
    search: str


@dataclass(frozen=True)
class FetchResult:
    """
    Raw output of one probe.
    body is only populated when the caller asked for it and the status was 200.
    """
    status: int
    body: str = ""


@dataclass(frozen=True)
class ProbeOutcome:
    status: int
    model_name: str = ""


@dataclass(frozen=True)
class SearchOutcome:
    status: int

    @property
    def hit(self):
        return self.status == HTTP_OK


@dataclass(frozen=True)
class ProductSignals:
    """
    The three observations for one code.
    TRANSIENT: built by the driver, read by classifier and reporter, then dropped.
    """
    code: ProductCode
    urls: ProductUrls
    page: ProbeOutcome
    image: ProbeOutcome
    search: SearchOutcome

    @property
    def model_name(self):
        return self.page.model_name
