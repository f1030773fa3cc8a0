#!/usr/bin/env python3
"""
Snapshot Source Fetcher

Downloads the CSV export of the published balance spreadsheet.
A single request per sync: no retries, no partial results.
"""

import logging

import requests

from ..core.exceptions import NetworkError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30


def fetch_snapshot_text(url: str, timeout: int = DEFAULT_TIMEOUT_SECONDS) -> str:
    """
    Fetch raw snapshot text from the source URL.

    Args:
        url: Published CSV link of the spreadsheet
        timeout: Request timeout in seconds

    Returns:
        Response body as text

    Raises:
        NetworkError: If the request fails or returns a non-success status
    """
    logger.info(f"Fetching snapshot from {url}")
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        logger.error(f"Snapshot request failed: {e}")
        raise NetworkError(f"Could not reach the snapshot source: {e}") from e

    if not response.ok:
        status = response.status_code
        logger.error(f"Snapshot source returned HTTP {status}")
        if status == 404:
            raise NetworkError("File not found (404). Check the link.", status_code=status)
        if status == 403:
            raise NetworkError("Access denied (403). The sheet may not be public.", status_code=status)
        raise NetworkError(f"Network error ({status})", status_code=status)

    # Without a charset requests falls back to ISO-8859-1; published sheets are UTF-8
    if not response.encoding or response.encoding.lower() == "iso-8859-1":
        response.encoding = "utf-8"
    return response.text
