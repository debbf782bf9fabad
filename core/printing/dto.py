"""
Data Transfer Objects for the Printing Framework
"""

from dataclasses import dataclass
from typing import Optional


PDF_CONTENT_TYPE = "application/pdf"


@dataclass(frozen=True)
class PdfResult:
    """
    Result of PDF rendering operation.

    Contains the PDF bytes, the name the document should be saved under and,
    when it was written to disk, the path it was written to.
    """

    pdf_bytes: bytes
    filename: str
    content_type: str = PDF_CONTENT_TYPE
    path: Optional[str] = None

    def __len__(self) -> int:
        """Return the size of PDF in bytes"""
        return len(self.pdf_bytes)
