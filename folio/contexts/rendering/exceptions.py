"""Custom exceptions for the rendering context. All are recovered locally."""

from typing import Optional

from folio.contexts.loading.exceptions import FolioError


class RegionMissing(FolioError):
    """
    The page does not provide an insertion point a renderer needs.

    Attributes:
        section: Renderer that looked for it (e.g., 'skills')
        region_id: Identifier or selector that was not found
    """

    def __init__(self, section: str, region_id: str):
        self.section = section
        self.region_id = region_id
        super().__init__(f"{section.capitalize()} container not found: {region_id}")


class DataMissing(FolioError):
    """
    The profile document lacks a slice that is expected to be present.

    Attributes:
        section: Slice name (e.g., 'stats')
    """

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"No {section} data found")


class SectionRenderError(FolioError):
    """
    Unexpected failure inside one section renderer.

    Attributes:
        section: Renderer that failed
        original_error: The exception it raised
    """

    def __init__(self, section: str, original_error: Optional[Exception] = None):
        self.section = section
        self.original_error = original_error

        message = f"Failed to render {section} section"
        if original_error:
            message += f"\nOriginal error: {original_error!r}"

        super().__init__(message)
