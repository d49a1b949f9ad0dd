# Data models for the KnowledgeScout Q&A service

from pydantic import BaseModel, Field
from typing import List, Optional


class Document(BaseModel):
    id: str
    filename: str
    original_name: str
    file_path: str
    file_size: int
    mime_type: str
    upload_date: str
    processed: bool = False
    extracted_text: Optional[str] = None
    word_count: Optional[int] = None
    content: Optional[str] = None

    def summary(self) -> dict:
        """Document fields without the (possibly large) extracted text"""
        return self.model_dump(exclude={"extracted_text"})


class Query(BaseModel):
    id: str
    document_id: str
    question: str
    answer: str
    confidence: float = Field(ge=0.0, le=1.0)
    sources: List[str] = []
    timestamp: str


class AnswerResult(BaseModel):
    answer: str
    confidence: float = Field(ge=0.0, le=1.0)
    sources: List[str] = []


class AskRequest(BaseModel):
    documentId: Optional[str] = None
    question: Optional[str] = None


class DemoAskRequest(BaseModel):
    question: str
    seed: Optional[int] = None
