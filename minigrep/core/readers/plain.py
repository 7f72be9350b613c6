from .base import BaseReader
from minigrep.core.errors import FileReadError

class PlainTextReader(BaseReader):
    def read(self, path: str) -> str:
        try:
            # newline="" keeps CRLF intact; the search engine strips the "\r".
            with open(path, 'r', encoding=self.encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(path, e) from e
