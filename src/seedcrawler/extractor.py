"""
HTML parsing: link extraction and page metadata.
"""
from __future__ import annotations

from typing import Callable, List, Optional

from bs4 import BeautifulSoup, Tag

from seedcrawler.models import DEFAULT_DESCRIPTION, DEFAULT_TITLE, PageMetadata
from seedcrawler.sink import LogSink

NodePredicate = Callable[[Tag], bool]


def parse_document(html: str) -> BeautifulSoup:
    """Parse *html* into a navigable tree (lenient lxml parser)."""
    return BeautifulSoup(html or "", "lxml")


def all_descendants(root: Tag, predicate: NodePredicate) -> List[Tag]:
    """Return every element below *root* matching *predicate*, in document order."""
    return [node for node in root.descendants if isinstance(node, Tag) and predicate(node)]


def attribute(node: Tag, name: str) -> Optional[str]:
    """Return the value of attribute *name* on *node*, or None if absent."""
    value = node.get(name)
    if isinstance(value, list):
        # Multi-valued attributes (class, rel) come back as lists
        return " ".join(value)
    return value


def named(tag_name: str) -> NodePredicate:
    """Predicate matching elements with tag name *tag_name*."""
    return lambda node: node.name == tag_name


def is_heading(node: Tag) -> bool:
    """Match two-character tag names starting with "h" (h1..h6, and also hr)."""
    return len(node.name) == 2 and node.name.startswith("h")


class HtmlExtractor:
    """
    Extracts URLs and metadata from raw HTML.

    Both operations parse their input independently and never raise; a
    failure is logged to the error log and an empty result is returned.
    """

    def __init__(self, sink: LogSink) -> None:
        self.sink = sink

    def extract_links(self, html: str) -> List[str]:
        """Anchor hrefs followed by image srcs, skipping absent or empty values."""
        try:
            document = parse_document(html)
            hrefs = [attribute(a, "href") for a in all_descendants(document, named("a"))]
            srcs = [attribute(img, "src") for img in all_descendants(document, named("img"))]
            return [href for href in hrefs if href] + [src for src in srcs if src]
        except Exception as e:
            self.sink.error(f"Failed to extract URLs: {e}")
            return []

    def extract_metadata(self, html: str, url: str) -> Optional[PageMetadata]:
        """Title, meta description and headings of *html*, or None on failure."""
        try:
            document = parse_document(html)

            title_node = document.find("title")
            title = title_node.get_text() if title_node is not None else DEFAULT_TITLE

            description = DEFAULT_DESCRIPTION
            meta_node = document.find("meta", attrs={"name": "description"})
            if meta_node is not None:
                content = attribute(meta_node, "content")
                if content is not None:
                    description = content

            headings = [
                (node.name, node.get_text().strip())
                for node in all_descendants(document, is_heading)
            ]
            return PageMetadata(
                url=url,
                title=title,
                meta_description=description,
                headings=headings,
            )
        except Exception as e:
            self.sink.error(f"Failed to extract metadata for URL {url}: {e}")
            return None
