from docx import Document
from .base import BaseReader
from minigrep.core.errors import FileReadError

class DocxReader(BaseReader):
    def read(self, path: str) -> str:
        try:
            doc = Document(path)
        except Exception as e:
            raise FileReadError(path, e) from e
        return "\n".join(para.text for para in doc.paragraphs)
