# Question typing and canned fallback answers

from typing import Dict, Tuple

QUESTION_TYPES = ("what", "how", "why", "when", "where", "who")
GENERAL = "general"

# Keywords that hint a sentence answers a given kind of question
TYPE_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "what": ("is", "are", "means", "definition", "concept"),
    "how": ("process", "method", "steps", "procedure", "works"),
    "why": ("because", "reason", "purpose", "benefit", "advantage"),
    "when": ("date", "time", "period", "schedule", "timeline"),
    "where": ("location", "place", "area", "region", "site"),
}

FALLBACK_ANSWERS = {
    "what": "The document discusses various topics, but I couldn't find specific information about your question. Could you rephrase or ask about a different aspect?",
    "how": "The methodology isn't clearly specified in the accessible content. You might want to check specific sections of the document for procedural details.",
    "why": "The reasoning behind this isn't explicitly stated in the extracted content. The document may contain this information in other sections.",
    GENERAL: "I've reviewed the document content, but couldn't find specific information addressing your question. The document might cover this topic in sections that weren't fully processed.",
}


def question_type(question: str) -> str:
    """Classify a question by the first interrogative word it contains"""
    lowered = (question or "").lower()
    for kind in QUESTION_TYPES:
        if kind in lowered:
            return kind
    return GENERAL


def keywords_for(kind: str) -> Tuple[str, ...]:
    return TYPE_KEYWORDS.get(kind, ())


def fallback_answer(question: str) -> str:
    """Canned answer used when the document offers nothing to quote.

    Only the text is returned; callers that need a full answer record attach
    their own confidence and sources.
    """
    return FALLBACK_ANSWERS.get(question_type(question), FALLBACK_ANSWERS[GENERAL])
