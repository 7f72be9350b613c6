import logging
from pypdf import PdfReader as PypdfReader
from .base import BaseReader
from minigrep.core.errors import FileReadError

logger = logging.getLogger(__name__)

class PdfReader(BaseReader):
    def read(self, path: str) -> str:
        try:
            reader = PypdfReader(path)
            text = []
            for i, page in enumerate(reader.pages):
                extracted = page.extract_text()
                if extracted and extracted.strip():
                    text.append(extracted)
                else:
                    # Scanned/image-only page, nothing to search.
                    logger.debug(f"No text layer on page {i+1} of {path}")
        except Exception as e:
            raise FileReadError(path, e) from e

        return "\n".join(text)
