import os
import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from minigrep.core.errors import MissingQuery, MissingFilePath

logger = logging.getLogger(__name__)

IGNORE_CASE_ENV = "IGNORE_CASE"


@dataclass(frozen=True)
class Config:
    query: str
    file_path: str
    ignore_case: bool = False

    @classmethod
    def build(cls, args: Iterable[str], environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Builds a Config from positional arguments:
          0   program name (discarded)
          1   query
          2   file path
          3.. ignored
        Arguments are pulled one at a time, so a lazy iterator is never
        consumed past the file path.
        """
        it = iter(args)
        next(it, None)

        query = next(it, None)
        if query is None:
            raise MissingQuery()

        file_path = next(it, None)
        if file_path is None:
            raise MissingFilePath()

        if environ is None:
            environ = os.environ
        # Presence is enough: IGNORE_CASE="" and IGNORE_CASE=0 both count.
        ignore_case = IGNORE_CASE_ENV in environ

        logger.debug("Config built: query=%r file_path=%r ignore_case=%s", query, file_path, ignore_case)
        return cls(query=query, file_path=file_path, ignore_case=ignore_case)
