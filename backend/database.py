# Database service for data persistence

import pickle
import os
import logging
import threading
from typing import Dict, List, Optional

from models import Document, Query

logger = logging.getLogger(__name__)


class DatabaseService:
    """Pickle-backed store for documents and the queries asked about them"""

    def __init__(self, filename: str = "data_knowledgescout.pkl"):
        self.filename = filename
        self.data: Dict[str, Dict[str, dict]] = {
            "documents": {},
            "queries": {},
        }
        self._lock = threading.Lock()
        self._connected = False
        self.load_data()

    def save_data(self, data: Optional[Dict[str, Dict[str, dict]]] = None):
        try:
            with open(self.filename, "wb") as f:
                pickle.dump(self.data if data is None else data, f)
            self._connected = True
        except OSError as e:
            self._connected = False
            logger.error(f"Error saving data: {e}")
            raise

    def _commit(self, **collections: Dict[str, dict]):
        """Write the changed collections, adopting them only once the file is saved"""
        data = dict(self.data)
        data.update(collections)
        self.save_data(data)
        self.data = data

    def load_data(self):
        try:
            if os.path.exists(self.filename):
                with open(self.filename, "rb") as f:
                    loaded_data = pickle.load(f)
                    for key in self.data:
                        self.data[key] = dict(loaded_data.get(key, {}))
            self._connected = True
        except Exception as e:
            self._connected = False
            logger.error(f"Error loading data: {e}")

    def is_connected(self) -> bool:
        return self._connected

    # Documents

    def add_document(self, document: Document) -> Document:
        with self._lock:
            documents = dict(self.data["documents"])
            documents[document.id] = document.model_dump()
            self._commit(documents=documents)
        return document

    def get_document(self, document_id: str) -> Optional[Document]:
        record = self.data["documents"].get(document_id)
        return Document(**record) if record else None

    def list_documents(self) -> List[Document]:
        records = list(self.data["documents"].values())
        # insertion order breaks timestamp ties
        order = sorted(range(len(records)), key=lambda i: (records[i]["upload_date"], i), reverse=True)
        return [Document(**records[i]) for i in order]

    def mark_processed(self, document_id: str, extracted_text: str, word_count: int, content: str) -> Document:
        """Record extraction results; a document is only processed once"""
        with self._lock:
            record = self.data["documents"].get(document_id)
            if record is None:
                raise KeyError(document_id)
            if record.get("processed"):
                raise ValueError(f"Document {document_id} is already processed")

            record = dict(record, processed=True, extracted_text=extracted_text,
                          word_count=word_count, content=content)
            documents = dict(self.data["documents"])
            documents[document_id] = record
            self._commit(documents=documents)
        return Document(**record)

    def delete_document(self, document_id: str) -> Optional[Document]:
        """Remove a document together with its queries"""
        with self._lock:
            record = self.data["documents"].get(document_id)
            if record is None:
                return None
            documents = {doc_id: doc for doc_id, doc in self.data["documents"].items() if doc_id != document_id}
            queries = {
                query_id: query
                for query_id, query in self.data["queries"].items()
                if query["document_id"] != document_id
            }
            self._commit(documents=documents, queries=queries)
        return Document(**record)

    # Queries

    def add_query(self, query: Query) -> Query:
        with self._lock:
            if query.document_id not in self.data["documents"]:
                raise KeyError(query.document_id)
            queries = dict(self.data["queries"])
            queries[query.id] = query.model_dump()
            self._commit(queries=queries)
        return query

    def list_queries(self, document_id: str, limit: Optional[int] = None) -> List[Query]:
        records = [r for r in self.data["queries"].values() if r["document_id"] == document_id]
        order = sorted(range(len(records)), key=lambda i: (records[i]["timestamp"], i), reverse=True)
        queries = [Query(**records[i]) for i in order]
        if limit is not None:
            queries = queries[:limit]
        return queries
