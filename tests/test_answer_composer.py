import pytest

from answer_composer import AnswerComposer, AnswerContext, compose_answer
from confidence_estimator import estimate_confidence
from fallback_answers import FALLBACK_ANSWERS, fallback_answer, keywords_for, question_type
from relevance_scorer import find_relevant_sentences
from text_segmenter import has_usable_text, significant_words, split_sentences

from conftest import SAMPLE_TEXT

S1 = "KnowledgeScout is a document analysis tool"
S2 = "The upload process accepts PDF, DOCX and plain text files"
S3 = "Extracted text is stored alongside each document record"
S4 = "Questions are answered by matching keywords against sentences"

CAT_TEXT = "The cat sat on the mat. It was a sunny day outside."


class TestTextSegmenter:
    """Sentence splitting and question tokenizing"""

    def test_split_sentences_drops_short_fragments(self):
        sentences = split_sentences("Hello world!!! Is this long enough? Yes.")
        assert sentences == ["Hello world", "Is this long enough"]

    def test_split_sample_text(self):
        assert split_sentences(SAMPLE_TEXT) == [S1, S2, S3, S4]

    def test_split_empty_text(self):
        assert split_sentences("") == []
        assert split_sentences(None) == []

    def test_significant_words_keep_longer_than_three(self):
        assert significant_words("What did the cat sit on?") == ["what"]
        assert significant_words("Tell me ABOUT sunny weather") == ["tell", "about", "sunny", "weather"]

    def test_usable_text_threshold(self):
        assert not has_usable_text(None)
        assert not has_usable_text("   ")
        assert not has_usable_text("  " + "a" * 49 + "  ")
        assert has_usable_text("a" * 50)


class TestRelevanceScorer:
    """Substring relevance in document order"""

    def test_relevant_sentences_keep_document_order(self):
        relevant = find_relevant_sentences([S1, S2, S3, S4], ["text", "document"])
        assert relevant == [S1, S2, S3]

    def test_partial_word_matches_count(self):
        assert find_relevant_sentences(["Please start the engine now"], ["tart"]) == ["Please start the engine now"]

    def test_no_words_means_no_matches(self):
        assert find_relevant_sentences([S1, S2], []) == []


class TestConfidenceEstimator:
    def test_confidence_grows_and_caps(self):
        assert estimate_confidence(0) == 0.7
        assert estimate_confidence(1) == 0.8
        assert estimate_confidence(2) == 0.9
        assert estimate_confidence(3) == 0.95
        assert estimate_confidence(40) == 0.95

    def test_confidence_is_monotonic(self):
        scores = [estimate_confidence(count) for count in range(20)]
        assert scores == sorted(scores)
        assert all(0.0 <= score <= 1.0 for score in scores)


class TestFallbackAnswers:
    def test_question_type_uses_first_interrogative(self):
        assert question_type("How and why does it work?") == "how"
        assert question_type("Somewhat unclear") == "what"
        assert question_type("Tell me more") == "general"

    def test_shared_general_answer(self):
        for question in ("When was it written?", "Where is it?", "Who wrote it?", "anything"):
            assert fallback_answer(question) == FALLBACK_ANSWERS["general"]

    def test_distinct_answers(self):
        assert fallback_answer("What is it?") == FALLBACK_ANSWERS["what"]
        assert fallback_answer("How is it done?") == FALLBACK_ANSWERS["how"]
        assert fallback_answer("Why is it so?") == FALLBACK_ANSWERS["why"]
        assert len({FALLBACK_ANSWERS[kind] for kind in ("what", "how", "why", "general")}) == 4

    def test_who_has_no_keywords(self):
        assert keywords_for("who") == ()
        assert "process" in keywords_for("how")


class TestAnswerComposer:
    """Ordered answer rules over document text"""

    @pytest.mark.parametrize("text", ["", None, "   ", "Too short.", "x" * 49])
    @pytest.mark.parametrize("question", ["What is this?", "Give me a summary", "anything"])
    def test_short_text_always_falls_back(self, text, question):
        result = compose_answer(question, text)
        assert result.answer == fallback_answer(question)
        assert result.confidence == 0.6
        assert result.sources == ["General Document Analysis"]

    def test_empty_text_general_answer(self):
        result = compose_answer("anything", "")
        assert result.answer == FALLBACK_ANSWERS["general"]

    def test_single_relevant_sentence(self):
        result = compose_answer("Where is the upload stored?", SAMPLE_TEXT)
        assert result.answer == f"Based on the document: {S2}"
        assert result.confidence == 0.8
        assert result.sources == ["Document Content Analysis"]

    def test_supporting_sentences_are_appended(self):
        result = compose_answer("Which document text matters", SAMPLE_TEXT)
        assert result.answer == f"Based on the document: {S1} Additionally, {S2} {S3}"
        assert result.confidence == 0.95

    def test_partial_word_match_answers(self):
        text = "This sentence holds information about nothing much at all. Another filler sentence sits right here."
        result = compose_answer("Describe the form", text)
        assert result.answer.startswith("Based on the document: This sentence holds information")

    def test_sunny_day(self):
        result = compose_answer("Tell me about the sunny weather", CAT_TEXT)
        assert result.answer == "Based on the document: It was a sunny day outside"

    def test_cat_question_uses_context_rule(self):
        # only "what" survives the length filter and it appears in no sentence
        result = compose_answer("What did the cat sit on?", CAT_TEXT)
        assert result.answer == "The document mentions: The cat sat on the mat"
        assert result.confidence == 0.75
        assert result.sources == ["Relevant Document Section"]

    @pytest.mark.parametrize("question", ["Give me an overview", "summary please"])
    def test_summary_request(self, question):
        result = compose_answer(question, SAMPLE_TEXT)
        assert result.answer == f"Document summary: {S1}. {S2}. {S3}"
        assert result.confidence == 0.8
        assert result.sources == ["Document Introduction"]

    def test_relevant_sentences_win_over_summary(self):
        result = compose_answer("summary of the upload", SAMPLE_TEXT)
        assert result.answer.startswith("Based on the document: ")

    def test_context_keyword_match(self):
        result = compose_answer("How does it go?", SAMPLE_TEXT)
        assert result.answer == f"The document mentions: {S2}"
        assert result.confidence == 0.75

    def test_context_without_keyword_uses_first_sentence(self):
        result = compose_answer("Why ok?", SAMPLE_TEXT)
        assert result.answer == f"The document mentions: {S1}"

    def test_no_candidate_sentences_falls_back(self):
        text = "Short one. " * 6
        result = compose_answer("Why ok?", text)
        assert result.answer == FALLBACK_ANSWERS["why"]
        assert result.confidence == 0.6
        assert result.sources == ["General Document Analysis"]

    def test_idempotent(self):
        assert compose_answer("Which document text matters", SAMPLE_TEXT) == compose_answer(
            "Which document text matters", SAMPLE_TEXT
        )

    def test_rule_order(self):
        composer = AnswerComposer()
        assert [rule.name for rule in composer.rules] == [
            "no_usable_text",
            "relevant_sentences",
            "summary_request",
            "contextual",
        ]

    def test_select_rule_in_isolation(self):
        composer = AnswerComposer()
        assert composer.select_rule(AnswerContext.build("anything", "")).name == "no_usable_text"
        assert composer.select_rule(AnswerContext.build("the upload", SAMPLE_TEXT)).name == "relevant_sentences"
        assert composer.select_rule(AnswerContext.build("overview", SAMPLE_TEXT)).name == "summary_request"
        assert composer.select_rule(AnswerContext.build("Why ok?", SAMPLE_TEXT)).name == "contextual"

    def test_summary_without_candidate_sentences_is_empty(self):
        # usable text made only of short fragments leaves nothing to summarize
        result = compose_answer("Give me a summary", "Short one. " * 6)
        assert result.answer == "Document summary: "
        assert result.confidence == 0.8
        assert result.sources == ["Document Introduction"]
