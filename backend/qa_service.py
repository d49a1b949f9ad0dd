# Q&A service tying documents, text extraction and answer composition together

import os
import uuid
import logging
from datetime import datetime
from typing import List, Optional

from answer_composer import AnswerComposer
from database import DatabaseService
from document_processor import DocumentProcessor, TextExtractionError, word_count
from models import Document, Query

logger = logging.getLogger(__name__)

MIN_EXTRACTED_LENGTH = 10
PREVIEW_LENGTH = 200


class DocumentNotFoundError(Exception):
    pass


class DocumentNotProcessedError(Exception):
    pass


class MissingTextError(Exception):
    pass


def timestamp() -> str:
    return datetime.now().isoformat(timespec="microseconds")


class QAService:
    def __init__(self, database: DatabaseService, processor: Optional[DocumentProcessor] = None,
                 composer: Optional[AnswerComposer] = None):
        self.database = database
        self.processor = processor or DocumentProcessor()
        self.composer = composer or AnswerComposer()

    def register_upload(self, original_name: str, stored_name: str, file_path: str,
                        file_size: int, mime_type: str) -> Document:
        document = Document(
            id=str(uuid.uuid4()),
            filename=stored_name,
            original_name=original_name,
            file_path=file_path,
            file_size=file_size,
            mime_type=mime_type,
            upload_date=timestamp(),
        )
        self.database.add_document(document)
        logger.info(f"Stored upload {original_name} as {document.id}")
        return document

    def get_document(self, document_id: str) -> Document:
        document = self.database.get_document(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)
        return document

    def process_document(self, document_id: str) -> Document:
        """Extract text from a stored upload and mark the document processed.

        Raises TextExtractionError when nothing meaningful comes out of the
        file; the document stays unprocessed in that case.
        """
        document = self.get_document(document_id)
        if document.processed:
            return document

        extracted_text = self.processor.extract_text(document.file_path, document.mime_type)
        if not extracted_text or len(extracted_text.strip()) < MIN_EXTRACTED_LENGTH:
            raise TextExtractionError("No meaningful text extracted from document")

        words = word_count(extracted_text)
        document = self.database.mark_processed(
            document_id,
            extracted_text=extracted_text,
            word_count=words,
            content=f"Document processed successfully. Extracted {words} words of text.",
        )
        logger.info(f"Processed document {document_id}: {words} words")
        return document

    def ask(self, document_id: str, question: str) -> Query:
        document = self.get_document(document_id)
        if not document.processed:
            raise DocumentNotProcessedError(document_id)
        if not document.extracted_text:
            raise MissingTextError(document_id)

        result = self.composer.compose(question, document.extracted_text)
        query = Query(
            id=str(uuid.uuid4()),
            document_id=document.id,
            question=question,
            answer=result.answer,
            confidence=result.confidence,
            sources=result.sources,
            timestamp=timestamp(),
        )
        self.database.add_query(query)
        logger.info(f"Answered question for {document_id} with confidence {result.confidence}")
        return query

    def delete_document(self, document_id: str) -> Document:
        document = self.database.delete_document(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)

        if document.file_path and os.path.exists(document.file_path):
            try:
                os.remove(document.file_path)
            except OSError as e:
                logger.error(f"Could not remove stored file {document.file_path}: {e}")
        return document

    def query_history(self, document_id: str, limit: Optional[int] = None) -> List[Query]:
        return self.database.list_queries(document_id, limit=limit)


def preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    return text[:length] + "..."
