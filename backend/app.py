# KnowledgeScout document Q&A API

from fastapi import APIRouter, FastAPI, UploadFile, File, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
import os
import time
import random
import asyncio
import logging
from datetime import datetime
from typing import Optional

from config import Settings
from database import DatabaseService
from demo_answers import DemoAnswerPicker
from document_processor import ALLOWED_MIME_TYPES, TextExtractionError, mime_type_for
from models import AskRequest, DemoAskRequest
from qa_service import (
    DocumentNotFoundError,
    DocumentNotProcessedError,
    MissingTextError,
    QAService,
    preview,
)

logger = logging.getLogger(__name__)

SERVICE_NAME = "KnowledgeScout API with Real Text Extraction"
HISTORY_LIMIT = 50
CONTENT_PREVIEW_LENGTH = 1000
UPLOAD_CHUNK_SIZE = 1024 * 1024

router = APIRouter()


def get_qa_service(request: Request) -> QAService:
    return request.app.state.qa_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def stored_filename(original_name: str) -> str:
    """Unique name for an upload on disk, keeping its extension"""
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return unique_suffix + os.path.splitext(original_name)[1].lower()


async def read_upload(document: UploadFile, max_size: int) -> Optional[bytes]:
    """Read an upload in chunks; None once it grows past max_size"""
    if document.size is not None and document.size > max_size:
        return None

    chunks = []
    total = 0
    while True:
        chunk = await document.read(UPLOAD_CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total > max_size:
            return None
        chunks.append(chunk)
    return b"".join(chunks)


def save_upload(file_path: str, content: bytes):
    os.makedirs(os.path.dirname(file_path) or ".", exist_ok=True)
    with open(file_path, "wb") as buffer:
        buffer.write(content)


@router.get("/")
async def root():
    return {"message": "KnowledgeScout Document Q&A API is running", "timestamp": datetime.now().isoformat()}


@router.get("/api/health")
async def health_check(request: Request):
    database = get_qa_service(request).database
    return {
        "status": "OK",
        "timestamp": datetime.now().isoformat(),
        "service": SERVICE_NAME,
        "database": "Connected" if database.is_connected() else "Disconnected",
    }


@router.post("/api/upload")
async def upload_document(request: Request, document: Optional[UploadFile] = File(None)):
    """Store an uploaded PDF, DOCX or TXT file for later processing"""
    settings = get_settings(request)
    qa_service = get_qa_service(request)

    if document is None or not document.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    mime_type = mime_type_for(document.filename)
    if mime_type not in ALLOWED_MIME_TYPES:
        logger.warning(f"Rejected upload {document.filename}: invalid file type")
        raise HTTPException(status_code=400, detail="Invalid file type")

    content = await read_upload(document, settings.max_upload_size)
    if content is None:
        logger.warning(f"Rejected upload {document.filename}: larger than {settings.max_upload_size} bytes")
        raise HTTPException(status_code=400, detail="File too large")

    file_name = stored_filename(document.filename)
    file_path = os.path.join(settings.upload_dir, file_name)
    try:
        await run_in_threadpool(save_upload, file_path, content)

        record = await run_in_threadpool(
            qa_service.register_upload,
            original_name=document.filename,
            stored_name=file_name,
            file_path=file_path,
            file_size=len(content),
            mime_type=mime_type,
        )
    except Exception as e:
        if os.path.exists(file_path):
            os.remove(file_path)
        logger.error(f"Upload error for file {document.filename}: {e}")
        raise HTTPException(status_code=500, detail="Failed to upload file")

    return {
        "message": "File uploaded successfully",
        "document": {
            "id": record.id,
            "filename": record.original_name,
            "size": record.file_size,
            "uploadDate": record.upload_date,
        },
    }


@router.post("/api/process/{doc_id}")
async def process_document(doc_id: str, request: Request):
    """Extract the text of an uploaded document"""
    qa_service = get_qa_service(request)

    try:
        document = await run_in_threadpool(qa_service.process_document, doc_id)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")
    except TextExtractionError as e:
        logger.error(f"Text extraction failed for {doc_id}: {e}")
        raise HTTPException(
            status_code=400,
            detail=f"Failed to process document: {e}. The document may be scanned, encrypted, or contain no extractable text.",
        )
    except Exception as e:
        logger.error(f"Processing error for {doc_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to process document")

    return {
        "message": "Document processed successfully with text extraction",
        "document": {
            "id": document.id,
            "filename": document.original_name,
            "processed": document.processed,
            "wordCount": document.word_count,
            "preview": preview(document.extracted_text or ""),
        },
    }


@router.post("/api/ask")
async def ask_question(body: AskRequest, request: Request):
    """Answer a question from a processed document's text"""
    settings = get_settings(request)
    qa_service = get_qa_service(request)

    question = (body.question or "").strip()
    if not body.documentId or not question:
        raise HTTPException(status_code=400, detail="Document ID and question are required")

    try:
        query = await run_in_threadpool(qa_service.ask, body.documentId, question)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")
    except DocumentNotProcessedError:
        raise HTTPException(status_code=400, detail="Document not processed yet")
    except MissingTextError:
        raise HTTPException(status_code=400, detail="No text content available for analysis")
    except Exception as e:
        logger.error(f"Q&A error for {body.documentId}: {e}")
        raise HTTPException(status_code=500, detail="Failed to process question")

    delay = request.app.state.delay_rng.uniform(settings.answer_delay_min, settings.answer_delay_max)
    if delay > 0:
        await asyncio.sleep(delay)

    return {
        "question": query.question,
        "answer": query.answer,
        "queryId": query.id,
        "confidence": query.confidence,
        "timestamp": query.timestamp,
        "sources": query.sources,
        "analysis": "Real document content analysis",
    }


@router.get("/api/documents")
async def get_documents(request: Request):
    return [document.summary() for document in get_qa_service(request).database.list_documents()]


@router.get("/api/documents/{doc_id}")
async def get_document(doc_id: str, request: Request):
    try:
        document = get_qa_service(request).get_document(doc_id)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")
    return document.summary()


@router.get("/api/documents/{doc_id}/content")
async def get_document_content(doc_id: str, request: Request):
    try:
        document = get_qa_service(request).get_document(doc_id)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")

    text = document.extracted_text
    return {
        "id": document.id,
        "filename": document.original_name,
        "wordCount": document.word_count,
        "content": preview(text, CONTENT_PREVIEW_LENGTH) if text else None,
        "fullContentAvailable": bool(text),
    }


@router.delete("/api/documents/{doc_id}")
async def delete_document(doc_id: str, request: Request):
    """Delete a document, its stored file and its query history"""
    try:
        await run_in_threadpool(get_qa_service(request).delete_document, doc_id)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")
    return {"message": "Document deleted successfully"}


@router.get("/api/documents/{doc_id}/queries")
async def get_document_queries(doc_id: str, request: Request):
    return [query.model_dump() for query in get_qa_service(request).query_history(doc_id)]


@router.get("/api/history/{doc_id}")
async def get_history(doc_id: str, request: Request):
    queries = get_qa_service(request).query_history(doc_id, limit=HISTORY_LIMIT)
    return [query.model_dump() for query in queries]


@router.post("/api/demo/ask")
async def demo_ask(body: DemoAskRequest, request: Request):
    """Demo-mode answer that ignores uploaded documents"""
    question = body.question.strip()
    if not question:
        raise HTTPException(status_code=400, detail="Question is required")

    if body.seed is not None:
        picker = DemoAnswerPicker(random.Random(body.seed))
    else:
        picker = request.app.state.demo_picker

    return {"question": question, "answer": picker.answer(question), "timestamp": datetime.now().isoformat()}


def create_app(settings: Optional[Settings] = None, database: Optional[DatabaseService] = None,
               rng: Optional[random.Random] = None) -> FastAPI:
    """Build the API with its own settings and document store"""
    settings = settings or Settings.from_env()
    database = database or DatabaseService(settings.data_file)
    rng = rng or random.Random()

    app = FastAPI(
        title="KnowledgeScout Document Q&A API",
        description="Document upload and keyword-based question answering",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.qa_service = QAService(database)
    app.state.demo_picker = DemoAnswerPicker(rng)
    app.state.delay_rng = rng
    app.include_router(router)

    logger.info(f"KnowledgeScout API configured with data file {settings.data_file}")
    return app
