import sys
import logging
from typing import Dict, Any, List, Optional, TextIO

from minigrep.core.config import Config
from minigrep.core.errors import FileReadError
from minigrep.core.readers.registry import ReaderRegistry
from minigrep.core.search.engine import search, search_case_intensive

logger = logging.getLogger(__name__)

def read_corpus(file_path: str, settings: Optional[Dict[str, Any]] = None) -> str:
    """
    Reads the whole target file as text, picking a reader by suffix.
    A file a document reader cannot parse (e.g. plain text named notes.pdf)
    is read again as plain text.
    Raises FileReadError if the file cannot be read or decoded.
    """
    registry = ReaderRegistry(settings)
    reader = registry.for_path(file_path)
    try:
        contents = reader.read(file_path)
    except FileReadError as document_error:
        if reader is registry.fallback:
            raise
        logger.info(f"{reader.__class__.__name__} could not parse {file_path} ({document_error.cause}), reading as plain text")
        contents = _read_as_plain_text(registry, file_path, document_error)

    logger.debug(f"Read {len(contents)} characters from {file_path}")
    return contents

def _read_as_plain_text(registry: ReaderRegistry, file_path: str, document_error: FileReadError) -> str:
    try:
        return registry.fallback.read(file_path)
    except FileReadError as e:
        # Missing/unreadable file: the OS error is the real reason.
        if isinstance(e.cause, OSError):
            raise
    # Not text either, so the document parser's error is the better report.
    raise document_error

def select_matches(config: Config, contents: str) -> List[str]:
    if config.ignore_case:
        return search_case_intensive(config.query, contents)
    return search(config.query, contents)

def run(config: Config, out: Optional[TextIO] = None, settings: Optional[Dict[str, Any]] = None) -> None:
    """
    Reads `config.file_path`, filters its lines and writes each match to `out`
    (stdout by default). A failed write propagates immediately.
    """
    if out is None:
        out = sys.stdout

    contents = read_corpus(config.file_path, settings)
    matches = select_matches(config, contents)

    logger.info(f"{len(matches)} matching lines for {config.query!r} in {config.file_path} (ignore_case={config.ignore_case})")

    for line in matches:
        out.write(line + "\n")
