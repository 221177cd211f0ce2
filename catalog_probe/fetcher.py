"""
HTTP probing for the checker.
One GET per probe, fresh connection each time, redirects returned as-is.
Transport failures come back as sentinel statuses, never as exceptions.
"""

import logging
import time

import requests

from catalog_probe.core import REQUEST_TIMEOUT, USER_AGENT
from catalog_probe.models import BODY_READ_ERROR, HTTP_OK, NETWORK_ERROR, FetchResult

logger = logging.getLogger(__name__)


class HttpProbe:
    """
    FLOW: Opens a new connection -> Sends GET without following redirects ->
    Optionally reads the body of a 200 response -> Returns FetchResult.
    """

    def __init__(self, timeout=REQUEST_TIMEOUT, user_agent=USER_AGENT, allow_redirects=False):
        self.timeout = timeout
        self.allow_redirects = allow_redirects
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
            "Accept-Language": "ja,en-US;q=0.9,en;q=0.8",
            # No keep-alive: every probe gets its own connection
            "Connection": "close",
        }

    @classmethod
    def from_config(cls, config):
        return cls(timeout=config.request_timeout, user_agent=config.user_agent)

    def probe(self, url, read_body=False):
        """
        Fetch `url` once.
        Returns FetchResult(status, body); body is read only when read_body is set
        and the status is 200.
        """
        start_time = time.time()
        try:
            r = requests.get(
                url,
                timeout=self.timeout,
                headers=self.headers,
                allow_redirects=self.allow_redirects,
                stream=True,
            )
        except requests.exceptions.Timeout:
            logger.warning(f"[PROBE] timeout after {self.timeout}s: {url}")
            return FetchResult(NETWORK_ERROR)
        except requests.exceptions.ConnectionError as e:
            logger.warning(f"[PROBE] connection error for {url}: {e}")
            return FetchResult(NETWORK_ERROR)
        except requests.exceptions.RequestException as e:
            logger.warning(f"[PROBE] request error for {url}: {e}")
            return FetchResult(NETWORK_ERROR)

        with r:
            status = r.status_code
            body = ""
            if read_body and status == HTTP_OK:
                try:
                    body = r.content.decode("utf-8", errors="replace")
                except requests.exceptions.RequestException as e:
                    logger.warning(f"[PROBE] body read failed for {url}: {e}")
                    return FetchResult(BODY_READ_ERROR)

        fetch_time_ms = int((time.time() - start_time) * 1000)
        logger.debug(f"[PROBE] {status} {url} ({fetch_time_ms}ms)")
        return FetchResult(status, body)
