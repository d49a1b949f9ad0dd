# Sentence splitting and question tokenizing

import re
from typing import List, Optional

SENTENCE_DELIMITERS = re.compile(r"[.!?]+")
MIN_SENTENCE_LENGTH = 10
MIN_WORD_LENGTH = 3
MIN_DOCUMENT_LENGTH = 50


def has_usable_text(text: Optional[str]) -> bool:
    """Near-empty documents are never matched against"""
    return bool(text) and len(text.strip()) >= MIN_DOCUMENT_LENGTH


def split_sentences(text: Optional[str]) -> List[str]:
    """Split text on runs of sentence punctuation, keeping substantial fragments"""
    if not text:
        return []
    sentences = []
    for fragment in SENTENCE_DELIMITERS.split(text):
        fragment = fragment.strip()
        if len(fragment) > MIN_SENTENCE_LENGTH:
            sentences.append(fragment)
    return sentences


def significant_words(question: Optional[str]) -> List[str]:
    """Lower-cased whitespace tokens longer than three characters.

    Punctuation stays attached, so "on?" is a token of its own.
    """
    if not question:
        return []
    return [word for word in question.lower().split() if len(word) > MIN_WORD_LENGTH]
