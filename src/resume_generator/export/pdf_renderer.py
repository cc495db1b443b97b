from __future__ import annotations

import logging

from resume_generator.config import RenderConfig
from resume_generator.errors import RenderError

logger = logging.getLogger(__name__)


async def render_pdf(html: str, config: RenderConfig | None = None) -> bytes:
    """Print HTML to PDF bytes with headless Chromium.

    The browser is closed on every exit path, including failures while
    loading the page or printing.
    """
    from playwright.async_api import Error as PlaywrightError
    from playwright.async_api import async_playwright

    config = config or RenderConfig()
    try:
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=True)
            try:
                page = await browser.new_page()
                await page.set_content(html, wait_until="networkidle")
                pdf = await page.pdf(
                    format=config.page_format,
                    print_background=config.print_background,
                    margin=config.margins,
                )
            finally:
                await browser.close()
    except PlaywrightError as exc:
        logger.error("PDF export failed: %s", exc)
        raise RenderError(f"PDF generation failed: {exc}") from exc

    logger.info("PDF generated (%d bytes)", len(pdf))
    return pdf
