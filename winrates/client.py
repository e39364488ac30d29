"""
Plain GET requests with failures turned into NetworkError.

There are no retries and no timeouts: one failed request fails the batch
it belongs to.
"""

import logging

import requests

from openingbook.errors import NetworkError

from .config import HEADERS

logger = logging.getLogger(__name__)


def get(url: str) -> requests.Response:
    """
    GET a URL and require a success status.

    Raises:
        NetworkError: On a transport failure or a non-2xx status
    """
    logger.debug(f"GET {url}")
    try:
        response = requests.get(url, headers=HEADERS)
    except requests.exceptions.RequestException as e:
        raise NetworkError(f"Request to {url} failed: {e}", url=url) from e

    if not response.ok:
        raise NetworkError(
            f"Failed to fetch {url}: {response.status_code} {response.reason or ''}".rstrip(),
            url=url,
            status_code=response.status_code
        )

    return response
