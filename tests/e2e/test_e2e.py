"""
End-to-end browser tests using Playwright.

Mark: @pytest.mark.e2e
Run with: pytest -m e2e [--headed]
"""
import re

import pytest

pytest.importorskip('playwright.sync_api')
from playwright.sync_api import Page, expect  # noqa: E402

pytestmark = pytest.mark.e2e


def test_page_title(page: Page, base_url: str):
    page.goto(f'{base_url}/')
    expect(page).to_have_title(re.compile(r'System Information'))
    expect(page.locator('h1')).to_have_text('FastFetch System Information')


def test_output_block_is_visible(page: Page, base_url: str):
    page.goto(f'{base_url}/')
    pre = page.locator('pre.fastfetch-output')
    expect(pre).to_be_visible()
    expect(pre).to_contain_text('Debian GNU/Linux 12')


def test_colored_spans_render_with_css_color(page: Page, base_url: str):
    page.goto(f'{base_url}/')
    first = page.locator('pre.fastfetch-output span').first
    expect(first).to_have_text('root')
    expect(first).to_have_css('color', 'rgb(255, 0, 0)')
    expect(page.locator('pre span', has_text='Shell:')).to_have_css('color', 'rgb(255, 255, 102)')


def test_angle_brackets_shown_as_text(page: Page, base_url: str):
    page.goto(f'{base_url}/')
    expect(page.locator('pre.fastfetch-output')).to_contain_text('bash <5.2>')
