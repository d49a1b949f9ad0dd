# Demo-mode answers that do not look at any document

import random
from typing import Optional

GENERIC_ANSWERS = [
    "Based on the document content, I can tell you that this information is covered in section 3.2. Would you like me to provide more specific details?",
    "The document mentions this topic in the context of the main discussion. The relevant information appears in the second half of the document.",
    "I found several references to this in the document. The most relevant passage states that this is an important aspect of the overall topic.",
    "This question relates to the core subject matter of the document. The author discusses this in detail across multiple sections.",
    "The document provides comprehensive coverage of this topic. Would you like me to focus on a specific aspect of it?",
]

DOCUMENT_ANSWER = "This document appears to be a sample document uploaded for demonstration purposes. It contains various sections that can be queried using this Q&A system."
AUTHOR_ANSWER = "Based on the document metadata, it was created by a user of the KnowledgeScout system. The exact author information would depend on the original document properties."
SUMMARY_ANSWER = "The document covers multiple topics that can be explored through specific questions. For a detailed summary, I would need to analyze the content more thoroughly. Could you ask about a specific section or topic?"
COUNT_ANSWER = "The document contains several sections, but the exact count would depend on the document structure. In a typical document, you might find sections like introduction, methodology, results, and conclusion."


class DemoAnswerPicker:
    """Canned answers for demo mode.

    The generic answer is picked at random; pass a seeded ``random.Random``
    to make the choice reproducible.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def answer(self, question: str) -> str:
        lowered = question.lower()

        if "what" in lowered and "document" in lowered:
            return DOCUMENT_ANSWER
        if "who" in lowered and ("author" in lowered or "created" in lowered):
            return AUTHOR_ANSWER
        if "summary" in lowered or "summarize" in lowered:
            return SUMMARY_ANSWER
        if "how many" in lowered or "number of" in lowered:
            return COUNT_ANSWER

        return self.rng.choice(GENERIC_ANSWERS)
