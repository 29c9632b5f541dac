import re
from abc import ABC, abstractmethod
from typing import List, Sequence

from job_blueprint.models import JobPosting


REQUIREMENT_HEADERS = ["requirements", "qualifications", "required skills"]
RESPONSIBILITY_HEADERS = ["responsibilities", "what you'll do", "key duties"]
BENEFIT_HEADERS = ["benefits", "perks", "what we offer"]

_BULLETS = ("•", "-", "*")
_header_re = re.compile(r"^[a-z\s]+:")
_bullet_prefix_re = re.compile(r"^[\s•\-*]+")


def extract_section(text: str, headers: Sequence[str]) -> List[str]:
    """
    Collect bullet lines that follow a header line.

    A line containing any of `headers` opens the section. Lines starting
    with a bullet marker are collected with the marker stripped. The first
    "Something:" line that does not mention one of `headers` ends it.
    """
    items: List[str] = []
    in_section = False

    for line in (text or "").splitlines():
        t = line.strip().lower()

        if any(h in t for h in headers):
            in_section = True
            continue

        if in_section and _header_re.match(t):
            break

        if in_section and t.startswith(_BULLETS):
            item = _bullet_prefix_re.sub("", line).strip()
            if item:
                items.append(item)

    return items


class PostingSource(ABC):
    @abstractmethod
    def fetch_posting(self) -> JobPosting:
        pass
