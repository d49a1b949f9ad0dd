# Keyword relevance over candidate sentences

from typing import Iterable, List, Optional, Sequence


def is_relevant(sentence: str, words: Iterable[str]) -> bool:
    # Plain substring containment: "art" matches "start"
    sentence_lower = sentence.lower()
    return any(word in sentence_lower for word in words)


def find_relevant_sentences(sentences: Sequence[str], words: Sequence[str]) -> List[str]:
    """Sentences containing any significant word, in document order"""
    if not words:
        return []
    return [sentence for sentence in sentences if is_relevant(sentence, words)]


def first_sentence_with(sentences: Sequence[str], keywords: Sequence[str]) -> Optional[str]:
    for sentence in sentences:
        if is_relevant(sentence, keywords):
            return sentence
    return None
