#!/usr/bin/env python3
"""
Shared Playwright browser session.

One Chromium instance serves every state page of a run. Heavy subresources
(images, fonts, stylesheets) are aborted once at session start.

Usage:
    with BrowserSession(headless=True) as session:
        session.page.goto(url)
"""

import logging
from fnmatch import fnmatch
from typing import List, Optional
from urllib.parse import urlsplit

from playwright.sync_api import sync_playwright

from ..constants import BLOCKED_RESOURCE_TYPES, BLOCKED_URL_PATTERNS

logger = logging.getLogger(__name__)


class BrowserSession:
    """Chromium session with subresource blocking, usable as a context manager."""

    LAUNCH_ARGS = [
        '--disable-gpu',
        '--blink-settings=imagesEnabled=false',
    ]

    def __init__(self, headless: bool = False,
                 blocked_resource_types: Optional[List[str]] = None,
                 blocked_url_patterns: Optional[List[str]] = None):
        self.headless = headless
        self.blocked_resource_types = set(
            BLOCKED_RESOURCE_TYPES if blocked_resource_types is None else blocked_resource_types
        )
        self.blocked_url_patterns = list(
            BLOCKED_URL_PATTERNS if blocked_url_patterns is None else blocked_url_patterns
        )
        self._playwright = None
        self.browser = None
        self.context = None
        self._page = None

    @property
    def page(self):
        """The session's page, shared by all fetches."""
        if self._page is None:
            raise RuntimeError("Browser session not started")
        return self._page

    def should_block(self, resource_type: str, url: str) -> bool:
        """Return True if a request should be aborted."""
        if resource_type in self.blocked_resource_types:
            return True
        path = urlsplit(url).path.lower()
        return any(fnmatch(path, pattern) for pattern in self.blocked_url_patterns)

    def _route_filter(self, route) -> None:
        request = route.request
        if self.should_block(request.resource_type, request.url):
            logger.debug(f"Blocked {request.resource_type}: {request.url}")
            route.abort()
        else:
            route.continue_()

    def start(self) -> 'BrowserSession':
        """Launch the browser and install the resource filter."""
        logger.info(f"Starting Chromium (headless={self.headless})")
        self._playwright = sync_playwright().start()
        try:
            self.browser = self._playwright.chromium.launch(
                headless=self.headless,
                args=self.LAUNCH_ARGS,
            )
            self.context = self.browser.new_context()
            self.context.route('**/*', self._route_filter)
            self._page = self.context.new_page()
        except Exception:
            self.stop()
            raise
        return self

    def stop(self) -> None:
        """Close the browser. Safe to call more than once."""
        self._page = None
        context, browser, playwright = self.context, self.browser, self._playwright
        self.context = self.browser = self._playwright = None

        # Each step runs even if an earlier close fails
        try:
            if context:
                context.close()
        finally:
            try:
                if browser:
                    browser.close()
            finally:
                if playwright:
                    playwright.stop()
                    logger.info("Browser closed")

    def __enter__(self) -> 'BrowserSession':
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
