"""
SEO tools: meta tags, keyword density, SERP preview and a page audit.
"""

import asyncio
import html
import logging
import re
from collections import Counter
from typing import Any, Dict, List, Optional
from urllib.parse import urldefrag, urljoin, urlparse

import requests
from bs4 import BeautifulSoup

from ..config import get_config

logger = logging.getLogger(__name__)

# Lengths search engines typically display
MAX_TITLE_LENGTH = 60
MAX_DESCRIPTION_LENGTH = 160
MIN_TITLE_LENGTH = 10
MIN_DESCRIPTION_LENGTH = 50


def _require_string(value: Any, field_name: str, tool_name: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValueError(f"{tool_name}: {field_name} must be a non-empty string")
    return value


def _require_url(url: Any, tool_name: str) -> str:
    """Any absolute URL (data:, mailto: and the like included)."""
    if not isinstance(url, str):
        raise ValueError(f"{tool_name}: Invalid URL provided")
    parsed = urlparse(url.strip())
    if not re.match(r"^[a-z][a-z0-9+.-]*$", parsed.scheme) or not (parsed.netloc or parsed.path):
        raise ValueError(f"{tool_name}: Invalid URL provided")
    return url


def _require_web_url(url: Any, tool_name: str) -> str:
    """An http(s) URL with a host, for tools that fetch it."""
    _require_url(url, tool_name)
    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"{tool_name}: Invalid URL provided")
    return url


def meta_tag_generator(
    title: str, description: str, keywords: str, image_url: Optional[str] = None
) -> Dict[str, Optional[str]]:
    """
    Generate meta, Open Graph and Twitter Card tags.

    Title and description are cut to the lengths search engines display.
    """
    _require_string(title, "Title", "Meta Tag Generator")
    _require_string(description, "Description", "Meta Tag Generator")
    _require_string(keywords, "Keywords", "Meta Tag Generator")
    if image_url:
        _require_url(image_url, "Meta Tag Generator")

    trimmed_title = title[:MAX_TITLE_LENGTH]
    trimmed_description = description[:MAX_DESCRIPTION_LENGTH]

    return {
        "title": trimmed_title,
        "description": trimmed_description,
        "keywords": keywords.lower(),
        "ogTitle": trimmed_title,
        "ogDescription": trimmed_description,
        "ogImage": image_url,
        "twitterCard": "summary_large_image" if image_url else "summary",
        "twitterTitle": trimmed_title,
        "twitterDescription": trimmed_description,
    }


def keyword_density(text: str, max_density: float = 3) -> List[Dict[str, Any]]:
    """
    Top 10 keywords by count, with density in percent of all words.

    Words of two characters or fewer are not reported but still count
    towards the total.
    """
    _require_string(text, "Text", "Keyword Density")

    words = re.findall(r"\b\w+\b", text.lower())
    total = len(words)
    if total == 0:
        return []

    counts = Counter(word for word in words if len(word) > 2)
    results = []
    for word, count in counts.most_common(10):
        density = count / total * 100
        results.append(
            {
                "word": word,
                "count": count,
                "density": round(density, 2),
                "isOverused": density > max_density,
            }
        )
    return results


def serp_preview(title: str, description: str, url: str) -> Dict[str, Any]:
    """Render a search result snippet and report whether lengths are in range."""
    _require_string(title, "Title", "SERP Preview")
    _require_string(description, "Description", "SERP Preview")
    _require_url(url, "SERP Preview")

    title_length = len(title)
    description_length = len(description)
    is_optimized = (
        MIN_TITLE_LENGTH <= title_length <= MAX_TITLE_LENGTH
        and MIN_DESCRIPTION_LENGTH <= description_length <= MAX_DESCRIPTION_LENGTH
    )

    display_title = title if title_length <= MAX_TITLE_LENGTH else title[:57] + "..."
    display_description = (
        description
        if description_length <= MAX_DESCRIPTION_LENGTH
        else description[:157] + "..."
    )

    preview = (
        '<div class="serp-preview">'
        f'<a href="{html.escape(url)}">{html.escape(display_title)}</a>'
        f"<p>{html.escape(url)}</p>"
        f"<p>{html.escape(display_description)}</p>"
        "</div>"
    )

    return {
        "html": preview,
        "titleLength": title_length,
        "descriptionLength": description_length,
        "isOptimized": is_optimized,
    }


def _parse(page: str) -> BeautifulSoup:
    return BeautifulSoup(page, "lxml")


def _page_title(soup: BeautifulSoup) -> str:
    # Inline SVG icons carry their own <title> labels
    title = soup.find(lambda tag: tag.name == "title" and tag.find_parent("svg") is None)
    return title.get_text(strip=True) if title else ""


def internal_links(page: str, base_url: str) -> List[str]:
    """Absolute http(s) links on ``page`` that point at the same host as ``base_url``."""
    host = urlparse(base_url).netloc
    links = []
    for anchor in _parse(page).find_all("a", href=True):
        link, _ = urldefrag(urljoin(base_url, anchor["href"]))
        parsed = urlparse(link)
        if parsed.scheme in ("http", "https") and parsed.netloc == host:
            links.append(link)
    return list(dict.fromkeys(links))


def audit_html(page: str, broken_links: Optional[List[str]] = None) -> List[Dict[str, str]]:
    """
    Run the audit checks against an HTML document.

    Args:
        page: HTML source
        broken_links: Links already found to be unreachable, reported as one issue

    Returns:
        Issues with type (error/warning), message and details
    """
    soup = _parse(page)
    issues = []

    title = _page_title(soup)
    if not title or len(title) > MAX_TITLE_LENGTH:
        issues.append(
            {
                "type": "error",
                "message": "Page title is missing or too long",
                "details": "Titles should be between 10 and 60 characters.",
            }
        )

    meta = soup.find("meta", attrs={"name": re.compile(r"^description$", re.I)})
    description = (meta.get("content") or "").strip() if meta else ""
    if not description or len(description) > MAX_DESCRIPTION_LENGTH:
        issues.append(
            {
                "type": "error",
                "message": "Meta description is missing or too long",
                "details": "Descriptions should be between 50 and 160 characters.",
            }
        )

    h1_count = len(soup.find_all("h1"))
    if h1_count != 1:
        issues.append(
            {
                "type": "warning",
                "message": f"Page has {h1_count} H1 tags",
                "details": "A page should have exactly one H1 tag for proper structure.",
            }
        )

    images_without_alt = [
        img for img in soup.find_all("img") if not (img.get("alt") or "").strip()
    ]
    if images_without_alt:
        issues.append(
            {
                "type": "warning",
                "message": f"Found {len(images_without_alt)} images without alt text",
                "details": "All images should have descriptive alt text for accessibility and SEO.",
            }
        )

    if broken_links:
        issues.append(
            {
                "type": "error",
                "message": f"Found {len(broken_links)} broken links",
                "details": f"Broken links: {', '.join(broken_links)}",
            }
        )

    return issues


def _fetch_page(url: str) -> str:
    config = get_config()
    response = requests.get(
        url,
        timeout=config.seo.request_timeout,
        headers={"User-Agent": config.seo.user_agent},
    )
    response.raise_for_status()
    return response.text


def _find_broken_links(links: List[str]) -> List[str]:
    config = get_config()
    broken = []
    for link in links[: config.seo.max_links_checked]:
        try:
            response = requests.head(
                link,
                timeout=config.seo.request_timeout,
                headers={"User-Agent": config.seo.user_agent},
                allow_redirects=True,
            )
        except requests.RequestException as e:
            logger.info(f"Link check failed for {link}: {e}")
            broken.append(link)
            continue
        if response.status_code >= 400:
            broken.append(link)
    return broken


async def seo_audit(url: str) -> Dict[str, List[Dict[str, str]]]:
    """
    Fetch a page and report basic on-page SEO issues.

    Same-host links are checked with HEAD requests. Errors fetching the page
    itself propagate to the caller.
    """
    _require_web_url(url, "SEO Audit Tool")
    logger.info(f"Auditing {url}")
    page = await asyncio.to_thread(_fetch_page, url)
    broken = await asyncio.to_thread(_find_broken_links, internal_links(page, url))
    return {"issues": audit_html(page, broken)}
