# job_blueprint/sources/url.py
from __future__ import annotations

import requests
from bs4 import BeautifulSoup
from requests.exceptions import HTTPError

from job_blueprint.errors import FetchError
from job_blueprint.models import JobPosting
from job_blueprint.sources.base import (
    BENEFIT_HEADERS,
    REQUIREMENT_HEADERS,
    RESPONSIBILITY_HEADERS,
    PostingSource,
    extract_section,
)
from job_blueprint.utils import html_to_text


DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
DEFAULT_TITLE = "Job Position"
DEFAULT_COMPANY = "Company"

# HTML pages label their sections a little more loosely than pasted text.
HTML_REQUIREMENT_HEADERS = REQUIREMENT_HEADERS + ["must have"]
HTML_RESPONSIBILITY_HEADERS = RESPONSIBILITY_HEADERS + ["about the role"]

TITLE_SELECTOR = "h1, .job-title, [data-job-title]"
COMPANY_SELECTOR = "[data-company], .company-name, .company"


def first_element_text(soup: BeautifulSoup, selector: str) -> str:
    """Whitespace-collapsed text of the first element matching selector, or ""."""
    node = soup.select_one(selector)
    if node is None:
        return ""
    return " ".join(node.get_text(" ", strip=True).split())


def parse_html(html: str) -> JobPosting:
    """
    Best-effort extraction. Malformed markup never raises; missing pieces
    fall back to defaults.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()

    text = html_to_text(html)
    title = first_element_text(soup, TITLE_SELECTOR) or DEFAULT_TITLE
    company = first_element_text(soup, COMPANY_SELECTOR) or DEFAULT_COMPANY

    return JobPosting(
        title=title,
        company=company,
        description=text,
        requirements=extract_section(text, HTML_REQUIREMENT_HEADERS),
        responsibilities=extract_section(text, HTML_RESPONSIBILITY_HEADERS),
        benefits=extract_section(text, BENEFIT_HEADERS),
        raw_text=html,
    )


class UrlPostingSource(PostingSource):
    """
    Fetch a posting page over HTTP and extract it.
    Any failure to retrieve the page is fatal (FetchError, no retry).
    """

    def __init__(self, url: str, timeout: float = 10, user_agent: str = DEFAULT_USER_AGENT):
        self.url = (url or "").strip()
        self.timeout = timeout
        self.user_agent = user_agent

    def fetch_posting(self) -> JobPosting:
        try:
            response = requests.get(
                self.url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise FetchError(f"Failed to fetch URL: {e}", url=self.url, status_code=status) from e
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch URL: {e}", url=self.url) from e

        if response.status_code != 200:
            raise FetchError("Failed to fetch URL: unexpected status", url=self.url, status_code=response.status_code)

        return parse_html(response.text)
