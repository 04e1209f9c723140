"""Text extraction from uploaded resume documents."""

import io

import pdfplumber
from docx import Document

SUPPORTED_EXTENSIONS = (".pdf", ".docx")


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_document_text(filename: str, content: bytes) -> str:
    """Dispatch on file extension; raises ValueError for unsupported types."""
    name = filename.lower()
    if name.endswith(".pdf"):
        return extract_text(content)
    if name.endswith(".docx"):
        return extract_text_docx(content)
    raise ValueError(f"Unsupported document type: {filename}")
