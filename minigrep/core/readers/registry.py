import logging
from pathlib import Path
from typing import Dict, Optional
from .base import BaseReader
from .plain import PlainTextReader
from .pdf import PdfReader
from .docx import DocxReader

logger = logging.getLogger(__name__)

class ReaderRegistry:
    """
    Maps file suffixes to readers. Anything not registered (or disabled in
    the `readers` settings section) is read as plain text.
    """

    def __init__(self, config: Optional[dict] = None):
        self._readers: Dict[str, BaseReader] = {}
        self.config = config or {}
        self.features = self.config.get("readers", {})
        self.fallback = PlainTextReader(self.config)

        self.register_defaults()

    def register(self, ext: str, reader: BaseReader):
        self._readers[ext.lower()] = reader

    def get(self, ext: str) -> BaseReader:
        return self._readers.get(ext.lower(), self.fallback)

    def for_path(self, path: str) -> BaseReader:
        reader = self.get(Path(path).suffix)
        logger.debug(f"Using {reader.__class__.__name__} for {path}")
        return reader

    def register_defaults(self):
        if self.features.get("docx", True):
            self.register(".docx", DocxReader(self.config))

        if self.features.get("pdf", True):
            self.register(".pdf", PdfReader(self.config))
