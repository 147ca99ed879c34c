"""
Page Surface

Wraps the parsed page (BeautifulSoup tree) and exposes the only operations the
renderers need: optional lookups, whole-region replacement, page metadata and
the error banner. The Surface is written, never read back for merging.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from bs4 import BeautifulSoup, Tag

from folio.contexts.rendering.logger import _log_debug
from folio.contexts.rendering.markup_classes import BannerClasses

HTML_PARSER = "html.parser"


class Surface:
    """
    Pre-existing page structure with named insertion points.

    Every lookup may return None; absence is a supported condition.
    """

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def from_markup(cls, markup: str) -> "Surface":
        return cls(BeautifulSoup(markup, HTML_PARSER))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Surface":
        return cls.from_markup(Path(path).read_text(encoding="utf-8"))

    # Lookups

    def find_region(self, region_id: str) -> Optional[Tag]:
        """Element with the given id, or None."""
        return self.soup.find(id=region_id)

    def select(self, selector: str) -> Optional[Tag]:
        """First element matching a CSS selector, or None."""
        return self.soup.select_one(selector)

    def select_all(self, selector: str) -> List[Tag]:
        return self.soup.select(selector)

    def region_presence(self, layout) -> Dict[str, bool]:
        """
        Map each section region in the layout to whether the page provides it.

        Args:
            layout: SurfaceLayout

        Returns:
            Dict like {"skills": True, "experience": False, ...}
        """
        return {
            section: self.find_region(region_id) is not None
            for section, region_id in layout.regions.items()
        }

    # Writes

    def replace_content(self, region: Tag, markup: str) -> None:
        """
        Replace everything inside a region with freshly rendered markup.

        The markup is parsed into nodes and grafted into the tree, so text it
        contains stays escaped on serialization.
        """
        fragment = BeautifulSoup(markup, HTML_PARSER)
        region.clear()
        for node in list(fragment.contents):
            region.append(node.extract())

    def set_title(self, text: str) -> None:
        """Overwrite the page title, creating <title> inside <head> if needed."""
        title = self.soup.title
        if title is None:
            head = self.soup.head
            if head is None:
                _log_debug("Page has no <head>; title not set")
                return
            title = self.soup.new_tag("title")
            head.append(title)
        title.string = text

    def set_meta_content(self, selector: str, content: str) -> bool:
        """
        Set the content attribute of a meta tag.

        Returns:
            True if the tag exists and was updated
        """
        meta = self.select(selector)
        if meta is None:
            _log_debug(f"Meta tag not found: {selector}")
            return False
        meta["content"] = content
        return True

    def show_banner(self, markup: str) -> None:
        """
        Prepend a banner to the page body, replacing any previous banner.

        Falls back to the document root when the page has no <body>.
        """
        for old in self.select_all(f".{BannerClasses.ERROR_MESSAGE}"):
            old.decompose()

        container = self.soup.body or self.soup
        fragment = BeautifulSoup(markup, HTML_PARSER)
        for position, node in enumerate(list(fragment.contents)):
            container.insert(position, node.extract())

    # Output

    def region_markup(self, region_id: str) -> Optional[str]:
        """Serialized inner markup of a region, or None if it is absent."""
        region = self.find_region(region_id)
        return None if region is None else region.decode_contents()

    def serialize(self) -> str:
        return str(self.soup)
