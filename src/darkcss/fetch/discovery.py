"""Find the stylesheets linked from an HTML page."""
from __future__ import annotations

from urllib.parse import urljoin

from bs4 import BeautifulSoup

from darkcss.fetch.http import FetchedDocument

__all__ = ["extract_stylesheet_hrefs", "resolve_stylesheet_urls"]


def extract_stylesheet_hrefs(html: str) -> list[str]:
    """``href`` of every ``<link rel="stylesheet">``, in document order."""
    soup = BeautifulSoup(html, "html.parser")
    hrefs = []
    for link in soup.find_all("link"):
        rel = [r.lower() for r in link.get("rel") or []]
        href = link.get("href")
        if "stylesheet" in rel and href:
            hrefs.append(href)
    return hrefs


def resolve_stylesheet_urls(document: FetchedDocument) -> list[str]:
    """Absolute stylesheet URLs, resolved against the page's final URL."""
    return [urljoin(document.final_url, href) for href in extract_stylesheet_hrefs(document.text)]
