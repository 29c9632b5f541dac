# job_blueprint/sources/text.py
from __future__ import annotations

from typing import Optional

from job_blueprint.models import JobPosting
from job_blueprint.sources.base import (
    BENEFIT_HEADERS,
    REQUIREMENT_HEADERS,
    RESPONSIBILITY_HEADERS,
    PostingSource,
    extract_section,
)


DEFAULT_TITLE = "Unspecified Position"
DEFAULT_COMPANY = "Not specified"


class TextPostingSource(PostingSource):
    """
    Posting pasted as plain text. Sections are pulled from bulleted lists
    under common headers ("Requirements:", "Benefits:", ...).
    """

    def __init__(self, text: str, title: Optional[str] = None):
        self.text = text or ""
        self.title = (title or "").strip() or None

    def fetch_posting(self) -> JobPosting:
        return JobPosting(
            title=self.title or DEFAULT_TITLE,
            company=DEFAULT_COMPANY,
            description=self.text,
            requirements=extract_section(self.text, REQUIREMENT_HEADERS),
            responsibilities=extract_section(self.text, RESPONSIBILITY_HEADERS),
            benefits=extract_section(self.text, BENEFIT_HEADERS),
            raw_text=self.text,
        )
