# scraper.py
import logging
from typing import Any, Dict, List
from playwright.async_api import async_playwright, Page, Browser, BrowserContext
from .constants import *
from .expander import expand_all
from .models import ErrorReport
from .report import collect_reports
from .session import login, logout
from .surface import PlaywrightSurface

logger = logging.getLogger(__name__)

INSECURE_ARGS = ['--disable-features=HttpsFirstBalancedModeAutoEnable']
HEADFUL_ARGS = ['--start-maximized']

class GraphicsErrorScraper:
    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.timeout_ms = config.get('timeout_ms', DEFAULT_TIMEOUT_MS)
        self.playwright = None
        self.browser: Browser | None = None
        self.context: BrowserContext | None = None
        self.page: Page | None = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.cleanup()

    def launch_options(self) -> Dict[str, Any]:
        headless = self.config.get('headless', True)
        args = [] if headless else list(HEADFUL_ARGS)
        if self.config.get('ignore_ssl'):
            args.extend(INSECURE_ARGS)
        return {'headless': headless, 'args': args, 'timeout': self.timeout_ms}

    def context_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {'ignore_https_errors': bool(self.config.get('ignore_ssl'))}
        if not self.config.get('headless', True):
            options['no_viewport'] = True
        return options

    async def initialize(self):
        self.playwright = await async_playwright().start()
        self.browser = await self.playwright.chromium.launch(**self.launch_options())
        self.context = await self.browser.new_context(**self.context_options())
        self.page = await self.context.new_page()
        self.page.set_default_timeout(self.timeout_ms)
        self.page.set_default_navigation_timeout(self.timeout_ms)

    async def cleanup(self):
        if self.context:
            await self.context.close()
        if self.browser:
            await self.browser.close()
        if self.playwright:
            await self.playwright.stop()

    async def run(self) -> List[ErrorReport]:
        nav_frame = await login(self.page, self.config)
        surface = PlaywrightSurface(self.page, nav_frame, self.timeout_ms)

        logger.info("Expanding geographic tree nodes...")
        await expand_all(surface)

        logger.info("Checking for errors...")
        reports = await collect_reports(surface)
        logger.info(f"Error reports collected: {len(reports)}")
        return reports

    async def logout(self):
        await logout(self.page, self.timeout_ms)
