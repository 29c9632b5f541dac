from job_blueprint.sources.base import PostingSource, extract_section
from job_blueprint.sources.text import TextPostingSource
from job_blueprint.sources.url import UrlPostingSource, parse_html

__all__ = [
    "PostingSource",
    "TextPostingSource",
    "UrlPostingSource",
    "extract_section",
    "parse_html",
]
