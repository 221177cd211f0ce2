"""
FILE DESCRIPTION: Foundational module for run configuration and logging.
KEY FUNCTIONS/CLASSES: CatalogConfig, ConfigurationError, CompanyFormatter, setup_logger
"""

import logging
import os
import sys
from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

# === CONFIGURATION SECTION ===

# Load .env from the repository root before reading any setting
load_dotenv(Path(__file__).resolve().parents[1] / '.env')

# Catalog host probed by every URL template
CATALOG_HOST = os.getenv("CATALOG_HOST", "d-rw.com")

# Network timeout for each probe (seconds)
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", 5))

# Width of the zero-padded numeric suffix of a product code
CODE_WIDTH = int(os.getenv("CODE_WIDTH", 5))

# Pause between two codes (seconds). 0 keeps the plain sequential pace.
PROBE_DELAY = float(os.getenv("PROBE_DELAY", 0))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
USER_AGENT = os.getenv(
    "USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36",
)

PAGE_URL_TEMPLATE = "https://{host}/Form/Product/ProductDetail.aspx?pid={code}"
IMAGE_URL_TEMPLATE = "https://{host}/Contents/ProductImages/0/{code}_LL.jpg"
SEARCH_URL_TEMPLATE = (
    "https://{host}/Form/Product/ProductList.aspx"
    "?shop=0&cat=&dpcnt=51&img=2&sort=10&swrd={code}&udns=2&fpfl=0&sfl=0&pno=1"
)

# Page markers
NOT_FOUND_MARKER = "商品が見つかりません"
DESCRIPTION_MARKER = '"description": "'
MODEL_MARKER = "モデル…"
LINE_BREAK_ENTITY = "&lt;br&gt;"
# Start of a populated result list on the search page (whitespace is significant)
SEARCH_HIT_MARKER = '<ul class="itemList4">           <li>'


class ConfigurationError(ValueError):
    """Raised for an unusable start code or range. Nothing is probed."""


@dataclass(frozen=True)
class CatalogConfig:
    """
    Everything a run needs to know about the catalog, injected into the
    probe, parser and driver instead of being read from module globals.
    """
    host: str = CATALOG_HOST
    page_url_template: str = PAGE_URL_TEMPLATE
    image_url_template: str = IMAGE_URL_TEMPLATE
    search_url_template: str = SEARCH_URL_TEMPLATE
    not_found_marker: str = NOT_FOUND_MARKER
    description_marker: str = DESCRIPTION_MARKER
    model_marker: str = MODEL_MARKER
    line_break_entity: str = LINE_BREAK_ENTITY
    search_hit_marker: str = SEARCH_HIT_MARKER
    request_timeout: float = REQUEST_TIMEOUT
    code_width: int = CODE_WIDTH
    user_agent: str = USER_AGENT
    delay: float = PROBE_DELAY

    @classmethod
    def from_env(cls, **overrides):
        """Build a config from the (.env aware) module settings plus explicit overrides."""
        config = cls(
            host=os.getenv("CATALOG_HOST", CATALOG_HOST),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", REQUEST_TIMEOUT)),
            code_width=int(os.getenv("CODE_WIDTH", CODE_WIDTH)),
            user_agent=os.getenv("USER_AGENT", USER_AGENT),
            delay=float(os.getenv("PROBE_DELAY", PROBE_DELAY)),
        )
        return replace(config, **overrides)


# === LOGGING SECTION ===

class CompanyFormatter(logging.Formatter):
    """
    FLOW: Receives a log record -> Extracts timestamp -> Formats according to company standard
    (e.g., [ Tue Jan 06 05:32:41 AM UTC 2026 ]) -> Prepends level and context -> Returns final string.
    """
    def format(self, record):
        dt = datetime.fromtimestamp(record.created)
        timestamp = dt.strftime("%a %b %d %I:%M:%S %p UTC %Y")
        context = getattr(record, 'context', 'root')
        return f"[ {timestamp} ] : {record.levelname} : {context} : {record.getMessage()}"


def setup_logger(name="catalog_probe", log_file=None, level=LOG_LEVEL):
    """
    FLOW: Initializes/Retrieves logger -> Checks for existing handlers to prevent duplicates ->
    Sets propagation for child loggers -> Attaches Console (stderr) and optional File handlers.

    stdout is reserved for report lines, so the console handler writes to stderr.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if name != "catalog_probe":
        logger.propagate = True
        setup_logger("catalog_probe", log_file=log_file, level=level)
        return logger

    formatter = CompanyFormatter()

    if not any(getattr(h, "_catalog_console", False) for h in logger.handlers):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler._catalog_console = True
        logger.addHandler(console_handler)

    # File handler (optional), attached once per path
    if log_file:
        target = os.path.abspath(log_file)
        if not any(getattr(h, "baseFilename", None) == target for h in logger.handlers):
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


# Global logger instance
logger = setup_logger()
