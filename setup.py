from setuptools import setup

setup(
    name="knowledgescout-document-qa",
    version="1.0.0",
    description="KnowledgeScout document upload and Q&A service",
    package_dir={"": "backend"},
    py_modules=[
        "answer_composer",
        "app",
        "confidence_estimator",
        "config",
        "database",
        "demo_answers",
        "document_processor",
        "fallback_answers",
        "models",
        "qa_service",
        "relevance_scorer",
        "text_segmenter",
    ],
    install_requires=[
        "fastapi",
        "uvicorn[standard]",
        "python-multipart",
        "pydantic>=2",
        "python-dotenv",
        "PyPDF2",
        "python-docx",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    python_requires=">=3.9",
)
