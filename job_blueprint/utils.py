# job_blueprint/utils.py
import re
import html


_ws_re = re.compile(r"\s+")
_tag_re = re.compile(r"<[^>]+>")
_li_re = re.compile(r"<li\b[^>]*>", re.IGNORECASE)
_block_tag_re = re.compile(r"</?(?:p|div|ul|ol|br|h[1-6]|tr|section|article|header|footer)\b[^>]*>|</li\s*>", re.IGNORECASE)
_script_style_re = re.compile(r"<(script|style|noscript)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_comment_re = re.compile(r"<!--.*?-->", re.DOTALL)

# Sentence punctuation that never occurs inside a keyword pattern.
# ". + # / -" are left alone ("node.js", "c++", "c#", "ci/cd", "e-commerce").
_separator_re = re.compile(r"[,;:()!?\"'\[\]{}|]")
# A period that ends a sentence, not one inside "node.js" or ".net".
_sentence_end_re = re.compile(r"\.(?=\s|$)")


def normalize_text(text: str) -> str:
    """Lowercase and collapse whitespace."""
    if not text:
        return ""
    text = html.unescape(text)
    text = _ws_re.sub(" ", text).strip().lower()
    return text


def search_text(*parts: str) -> str:
    """
    Build the haystack the keyword patterns run against.

    Each part is normalized, list separators become spaces and the result is
    padded on both sides so whitespace-suffixed patterns ("aws ", "go ")
    still hit at the end of a list or of the text.
    """
    joined = " ".join(normalize_text(p) for p in parts)
    joined = _separator_re.sub(" ", joined)
    joined = _sentence_end_re.sub(" ", joined)
    joined = _ws_re.sub(" ", joined).strip()
    return f" {joined} "


def html_to_text(maybe_html: str) -> str:
    """
    Strip HTML tags using stdlib-only approach.
    Block-level tags become line breaks so bulleted sections survive.
    """
    if not maybe_html:
        return ""
    s = _comment_re.sub(" ", maybe_html)
    s = _script_style_re.sub(" ", s)
    s = _li_re.sub("\n- ", s)
    s = _block_tag_re.sub("\n", s)
    s = _tag_re.sub(" ", s)
    s = html.unescape(s)
    lines = [_ws_re.sub(" ", line).strip() for line in s.splitlines()]
    return "\n".join(line for line in lines if line)

