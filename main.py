#!/usr/bin/env python3
"""
Main entry point for the KnowledgeScout Document Q&A backend
"""

import sys
import os
import logging

# Add backend directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'backend'))

from app import create_app
from config import Settings

settings = Settings.from_env()

logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
logger = logging.getLogger(__name__)

app = create_app(settings)

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting KnowledgeScout backend on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
