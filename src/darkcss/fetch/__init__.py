from darkcss.fetch.discovery import extract_stylesheet_hrefs, resolve_stylesheet_urls
from darkcss.fetch.http import FetchedDocument, HttpClient

__all__ = [
    "extract_stylesheet_hrefs",
    "resolve_stylesheet_urls",
    "FetchedDocument",
    "HttpClient",
]
