# Document processing service

import os
import logging

import PyPDF2
from docx import Document as DocxDocument

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME = "application/msword"
TXT_MIME = "text/plain"
DEFAULT_MIME = "application/octet-stream"

MIME_TYPES = {
    ".pdf": PDF_MIME,
    ".docx": DOCX_MIME,
    ".doc": DOC_MIME,
    ".txt": TXT_MIME,
}

ALLOWED_MIME_TYPES = {PDF_MIME, DOC_MIME, DOCX_MIME, TXT_MIME}


class TextExtractionError(Exception):
    pass


def mime_type_for(filename: str) -> str:
    ext = os.path.splitext(filename or "")[1].lower()
    return MIME_TYPES.get(ext, DEFAULT_MIME)


def word_count(text: str) -> int:
    return len(text.split())


class DocumentProcessor:
    def extract_text_from_pdf(self, file_path: str) -> str:
        try:
            with open(file_path, "rb") as pdf_file:
                pdf_reader = PyPDF2.PdfReader(pdf_file)
                text = ""
                for page in pdf_reader.pages:
                    text += (page.extract_text() or "") + "\n"
                return text
        except Exception as e:
            logger.error(f"PDF extraction error: {e}")
            raise TextExtractionError("Failed to extract text from PDF") from e

    def extract_text_from_docx(self, file_path: str) -> str:
        try:
            doc = DocxDocument(file_path)
            text = ""
            for paragraph in doc.paragraphs:
                text += paragraph.text + "\n"
            return text
        except Exception as e:
            logger.error(f"DOCX extraction error: {e}")
            raise TextExtractionError("Failed to extract text from DOCX") from e

    def extract_text_from_txt(self, file_path: str) -> str:
        try:
            with open(file_path, "r", encoding="utf-8", errors="replace") as file:
                return file.read()
        except Exception as e:
            logger.error(f"TXT extraction error: {e}")
            raise TextExtractionError("Failed to extract text from TXT") from e

    def extract_text(self, file_path: str, mime_type: str) -> str:
        """Extract raw text from a stored upload based on its MIME type"""
        if mime_type == PDF_MIME:
            return self.extract_text_from_pdf(file_path)
        if mime_type == DOCX_MIME:
            return self.extract_text_from_docx(file_path)
        if mime_type == TXT_MIME:
            return self.extract_text_from_txt(file_path)

        logger.error(f"Text extraction failed: unsupported type {mime_type}")
        raise TextExtractionError("Unsupported file type for text extraction")
