#!/usr/bin/env python3
"""
Portfolio Sync

Fetches the spreadsheet export, parses it, and replaces the stored
portfolio. Nothing is written unless both steps succeed, so a failed sync
leaves the previous holdings and history in place.

Concurrent syncs are not guarded against; callers run one at a time.
"""

import logging
from collections.abc import Callable

from .datastore import PortfolioStore
from .fetcher import DEFAULT_TIMEOUT_SECONDS, fetch_snapshot_text
from .models import ParsedSnapshot
from .parser import parse_snapshot

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, int], str]


def sync_portfolio(
    url: str | None,
    store: PortfolioStore,
    fetcher: Fetcher = fetch_snapshot_text,
    timeout: int = DEFAULT_TIMEOUT_SECONDS,
) -> ParsedSnapshot | None:
    """
    Replace the stored portfolio with a fresh snapshot.

    Args:
        url: Snapshot source URL; nothing happens when empty
        store: Destination store
        fetcher: Callable returning raw CSV text for (url, timeout)
        timeout: Request timeout in seconds

    Returns:
        The parsed snapshot, or None when no URL is configured

    Raises:
        NetworkError: If fetching fails
        SourceFormatError: If the fetched text is not a usable table
    """
    if not url:
        logger.info("No snapshot source configured, skipping sync")
        return None

    try:
        snapshot = parse_snapshot(fetcher(url, timeout))
    except Exception as e:
        logger.error(f"Portfolio sync failed, stored portfolio left unchanged: {e}")
        raise

    store.save(snapshot)
    logger.info(f"Portfolio sync complete: {len(snapshot.holdings)} holding(s), total {snapshot.total}")
    return snapshot
