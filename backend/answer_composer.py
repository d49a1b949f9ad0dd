# Answer composition over extracted document text
#
# The composer walks an ordered list of rules; the first rule whose
# predicate holds produces the answer.

from dataclasses import dataclass
from typing import Callable, List, Optional

from confidence_estimator import (
    CONTEXT_CONFIDENCE,
    FALLBACK_CONFIDENCE,
    SUMMARY_CONFIDENCE,
    estimate_confidence,
)
from fallback_answers import fallback_answer, keywords_for, question_type
from models import AnswerResult
from relevance_scorer import find_relevant_sentences, first_sentence_with
from text_segmenter import has_usable_text, significant_words, split_sentences

SOURCE_CONTENT = "Document Content Analysis"
SOURCE_INTRODUCTION = "Document Introduction"
SOURCE_SECTION = "Relevant Document Section"
SOURCE_GENERAL = "General Document Analysis"

SUMMARY_TRIGGERS = ("summary", "overview")
MAX_SUPPORTING_SENTENCES = 2
SUMMARY_SENTENCES = 3


@dataclass
class AnswerContext:
    """Everything a rule needs, computed once per question"""
    question: str
    text: str
    sentences: List[str]
    words: List[str]
    relevant: List[str]

    @classmethod
    def build(cls, question: Optional[str], text: Optional[str]) -> "AnswerContext":
        question = question or ""
        text = text or ""
        sentences = split_sentences(text) if has_usable_text(text) else []
        words = significant_words(question)
        return cls(
            question=question,
            text=text,
            sentences=sentences,
            words=words,
            relevant=find_relevant_sentences(sentences, words),
        )


@dataclass(frozen=True)
class AnswerRule:
    name: str
    applies: Callable[[AnswerContext], bool]
    answer: Callable[[AnswerContext], AnswerResult]


def _no_usable_text(ctx: AnswerContext) -> bool:
    return not has_usable_text(ctx.text)


def _has_relevant(ctx: AnswerContext) -> bool:
    return bool(ctx.relevant)


def _asks_for_summary(ctx: AnswerContext) -> bool:
    lowered = ctx.question.lower()
    return any(trigger in lowered for trigger in SUMMARY_TRIGGERS)


def _always(ctx: AnswerContext) -> bool:
    return True


def fallback_result(question: str) -> AnswerResult:
    return AnswerResult(
        answer=fallback_answer(question),
        confidence=FALLBACK_CONFIDENCE,
        sources=[SOURCE_GENERAL],
    )


def _answer_from_relevant(ctx: AnswerContext) -> AnswerResult:
    best = ctx.relevant[0]
    supporting = [s for s in ctx.relevant[1:1 + MAX_SUPPORTING_SENTENCES] if s != best]

    answer = f"Based on the document: {best}"
    if supporting:
        answer += f" Additionally, {' '.join(supporting)}"

    return AnswerResult(
        answer=answer,
        confidence=estimate_confidence(len(ctx.relevant)),
        sources=[SOURCE_CONTENT],
    )


def _answer_summary(ctx: AnswerContext) -> AnswerResult:
    opening = ". ".join(ctx.sentences[:SUMMARY_SENTENCES])
    return AnswerResult(
        answer=f"Document summary: {opening}",
        confidence=SUMMARY_CONFIDENCE,
        sources=[SOURCE_INTRODUCTION],
    )


def _answer_from_context(ctx: AnswerContext) -> AnswerResult:
    keywords = keywords_for(question_type(ctx.question))
    sentence = first_sentence_with(ctx.sentences, keywords)
    if sentence is None and ctx.sentences:
        # No keyword hit: the opening sentence stands in
        sentence = ctx.sentences[0]

    if sentence is None:
        return fallback_result(ctx.question)

    return AnswerResult(
        answer=f"The document mentions: {sentence}",
        confidence=CONTEXT_CONFIDENCE,
        sources=[SOURCE_SECTION],
    )


DEFAULT_RULES = (
    AnswerRule("no_usable_text", _no_usable_text, lambda ctx: fallback_result(ctx.question)),
    AnswerRule("relevant_sentences", _has_relevant, _answer_from_relevant),
    AnswerRule("summary_request", _asks_for_summary, _answer_summary),
    AnswerRule("contextual", _always, _answer_from_context),
)


class AnswerComposer:
    def __init__(self, rules=DEFAULT_RULES):
        self.rules = tuple(rules)

    def select_rule(self, ctx: AnswerContext) -> AnswerRule:
        for rule in self.rules:
            if rule.applies(ctx):
                return rule
        # the final rule always applies, this only guards custom rule lists
        return self.rules[-1]

    def compose(self, question: Optional[str], text: Optional[str]) -> AnswerResult:
        ctx = AnswerContext.build(question, text)
        return self.select_rule(ctx).answer(ctx)


_default_composer = AnswerComposer()


def compose_answer(question: Optional[str], text: Optional[str]) -> AnswerResult:
    """Answer a question from document text; never raises"""
    return _default_composer.compose(question, text)
