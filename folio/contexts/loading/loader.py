"""
Profile Loader

Fetches the profile document from a Source once and validates it into a
ProfileDocument. The fetch is the pipeline's only suspension point.
"""

import json
import time
from typing import Any

from omegaconf import OmegaConf

from folio.contexts.loading.exceptions import MalformedDocument
from folio.contexts.loading.logger import log_load_result, log_load_start
from folio.contexts.loading.profile_data_structure import ProfileDocument


def parse_profile_text(text: str, document_format: str = "json") -> ProfileDocument:
    """
    Parse raw document text and validate its shape.

    Args:
        text: Document body
        document_format: "json" or "yaml"

    Returns:
        ProfileDocument

    Raises:
        MalformedDocument: If the body does not parse or has the wrong shape
    """
    data: Any
    if document_format == "yaml":
        try:
            data = OmegaConf.to_container(OmegaConf.create(text), resolve=False)
        except Exception as e:
            raise MalformedDocument(f"Profile data is not valid YAML: {e}", snippet=text) from e
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedDocument(f"Profile data is not valid JSON: {e}", snippet=text) from e

    return ProfileDocument.from_dict(data)


class ProfileLoader:
    """
    Loads the profile document from a Source.

    Args:
        source: Object with `location`, `document_format` and an async `fetch()`
    """

    def __init__(self, source):
        self.source = source

    async def load(self) -> ProfileDocument:
        """
        Fetch and validate the document.

        Raises:
            SourceUnavailable: If the Source fails
            MalformedDocument: If the body is not a valid profile document
        """
        log_load_start(self.source.location)
        start_time = time.time()

        text = await self.source.fetch()
        document = parse_profile_text(text, self.source.document_format)

        log_load_result(self.source.location, document, time.time() - start_time)
        return document
