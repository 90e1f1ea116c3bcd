"""
Test suite for the DocScreen preview analyzers.

Covers keyword extraction, abstract selection and summary generation.
"""

import pytest

from docscreen.core.abstract_selector import AbstractSelector
from docscreen.core.keywords import KeywordExtractor
from docscreen.core.summarizer import SummaryGenerator
from docscreen.utils.config import STOP_WORDS


class TestKeywordExtractor:
    """Test cases for KeywordExtractor."""

    def test_ranked_by_frequency(self):
        """Most frequent terms come first."""
        text = "Quantum computing and quantum algorithms. Computing power grows; QUANTUM!"
        keywords = KeywordExtractor().extract_keywords(text)

        assert keywords == ["quantum", "computing", "algorithms", "power", "grows"]

    def test_ties_keep_first_occurrence(self):
        """Equal frequencies keep the order of first occurrence."""
        keywords = KeywordExtractor().extract_keywords("zebra apple mango apple zebra mango")
        assert keywords == ["zebra", "apple", "mango"]

    def test_numeric_tokens_do_not_jump_ahead(self):
        """Numeric terms tie-break by occurrence like any other term."""
        keywords = KeywordExtractor().extract_keywords("model 2023 model 2024 2023 model")
        assert keywords == ["model", "2023", "2024"]

    def test_short_words_and_stop_words_dropped(self):
        """Tokens of three characters or fewer and stop words never appear."""
        text = "The cat sat with their dog about which there would have been data analysis"
        keywords = KeywordExtractor().extract_keywords(text)

        assert keywords == ["been", "data", "analysis"]
        assert all(len(k) > 3 for k in keywords)
        assert not set(keywords) & set(STOP_WORDS)

    def test_at_most_ten(self):
        """No more than ten keywords are returned."""
        words = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot",
                 "golf", "hotel", "india", "juliet", "kilo", "lima"]
        keywords = KeywordExtractor().extract_keywords(" ".join(words))

        assert keywords == words[:10]

    def test_punctuation_removed_inside_words(self):
        """Non-word characters are stripped, joining hyphenated words."""
        keywords = KeywordExtractor().extract_keywords("data-driven models don't overfit")
        assert keywords == ["datadriven", "models", "dont", "overfit"]

    def test_empty_and_symbol_only(self):
        """Empty or symbol-only text yields no keywords."""
        extractor = KeywordExtractor()
        assert extractor.extract_keywords("") == []
        assert extractor.extract_keywords("!!! ??? ... ---") == []

    def test_idempotent_and_whitespace_invariant(self, paper_text):
        """Same input gives same output, surrounding whitespace is irrelevant."""
        extractor = KeywordExtractor()
        first = extractor.extract_keywords(paper_text)

        assert extractor.extract_keywords(paper_text) == first
        assert extractor.extract_keywords("  \n\t" + paper_text + "\n\n  ") == first

    def test_frequencies_sorted_descending(self, paper_text):
        """Returned keywords are ordered by non-increasing frequency."""
        extractor = KeywordExtractor()
        frequencies = extractor.term_frequencies(paper_text)
        keywords = extractor.extract_keywords(paper_text)

        counts = [frequencies[k] for k in keywords]
        assert counts == sorted(counts, reverse=True)
        assert len(set(keywords)) == len(keywords)

    def test_configured_limit(self, sample_config):
        """The keyword limit comes from configuration."""
        sample_config.set_analysis_config({"keyword_limit": 2})
        keywords = KeywordExtractor(sample_config).extract_keywords("alpha bravo charlie")
        assert keywords == ["alpha", "bravo"]


class TestAbstractSelector:
    """Test cases for AbstractSelector."""

    LONG_BODY = ("Sensor networks offer a cheap way to observe soil conditions across many "
                 "plots and seasons without manual sampling by field staff.")

    def test_abstract_paragraph_selected_verbatim(self):
        """A paragraph mentioning "Abstract" is returned exactly."""
        second = "Abstract: We study irrigation scheduling with soil sensors."
        text = "Irrigation Scheduling\n\n" + second

        assert AbstractSelector().select_abstract(text) == second

    def test_abstract_keyword_wins_over_length(self):
        """The "abstract" paragraph beats an earlier paragraph of abstract length."""
        text = f"{self.LONG_BODY}\n\nABSTRACT\n\nMore text."
        assert AbstractSelector().select_abstract(text) == "ABSTRACT"

    def test_length_candidate_skips_introduction(self):
        """Without "abstract", the first mid-length non-introduction paragraph wins."""
        intro = "Introduction. " + self.LONG_BODY
        text = f"Title\n\n{intro}\n\n{self.LONG_BODY}"

        assert AbstractSelector().select_abstract(text) == self.LONG_BODY

    def test_length_bounds_are_exclusive(self):
        """Paragraphs of exactly 100 characters are too short."""
        exact = "a" * 100
        longer = "b" * 101
        assert AbstractSelector().select_abstract(f"{exact}\n\n{longer}") == longer

    def test_too_long_paragraph_skipped(self):
        """Paragraphs of 2000 characters or more are not candidates."""
        huge = "c" * 2000
        assert AbstractSelector().select_abstract(f"Title\n\n{huge}") == "Title"

    def test_fallback_first_paragraph(self):
        """Without any candidate the first paragraph is returned."""
        assert AbstractSelector().select_abstract("Title\n\nShort text.") == "Title"

    def test_blank_paragraphs_ignored(self):
        """Leading blank lines do not produce an empty abstract."""
        assert AbstractSelector().select_abstract("\n\n\nTitle\n\n\n\nBody") == "Title"

    def test_no_paragraphs(self):
        """Empty text gives an empty abstract, not an error."""
        selector = AbstractSelector()
        assert selector.select_abstract("") == ""
        assert selector.select_abstract("\n\n \n\n") == ""

    def test_single_newlines_do_not_split(self):
        """Paragraphs split only on blank lines."""
        text = "Line one\nline two\n\nAbstract here"
        assert AbstractSelector.split_paragraphs(text) == ["Line one\nline two", "Abstract here"]


class TestSummaryGenerator:
    """Test cases for SummaryGenerator."""

    SENTENCES = [
        "Alpha one.", "Beta two.", "Gamma three.", "Delta four.", "Epsilon five.",
        "Thus we show and demonstrate the result.", "Eta seven.", "Theta eight.",
        "Iota nine.", "Kappa ten.",
    ]

    def test_summary_in_score_order(self):
        """Sentences are joined by score, not by document position."""
        summary = SummaryGenerator().generate_summary(" ".join(self.SENTENCES))

        assert summary == ("Thus we show and demonstrate the result. "
                           "Alpha one. Beta two. Kappa ten. Gamma three.")

    def test_at_most_five_sentences(self):
        """No more than five sentences are selected."""
        generator = SummaryGenerator()
        summary = generator.generate_summary(" ".join(self.SENTENCES))
        assert len(generator.split_sentences(summary)) == 5

    def test_fewer_sentences_than_limit(self):
        """Short documents return all their sentences."""
        summary = SummaryGenerator().generate_summary("One. Two!")
        assert summary == "One. Two!"

    def test_zero_sentences(self):
        """Text without terminal punctuation has no summary."""
        generator = SummaryGenerator()
        assert generator.generate_summary("") == ""
        assert generator.generate_summary("no terminal punctuation here") == ""

    def test_naive_splitting(self):
        """Abbreviations and decimals split sentences."""
        sentences = SummaryGenerator.split_sentences("Fig. 3 shows it. Accuracy was 0.95 overall.")
        assert sentences == ["Fig.", " 3 shows it.", " Accuracy was 0.", "95 overall."]

    def test_terminal_runs_end_one_sentence(self):
        """A run of terminal marks closes a single sentence."""
        sentences = SummaryGenerator.split_sentences("Really?! Yes... Trailing words")
        assert sentences == ["Really?!", " Yes..."]

    def test_score_signal_words(self):
        """Each distinct signal word adds 0.1."""
        generator = SummaryGenerator()
        score = generator.score_sentence(" We show the result.", index=5, total=10)
        assert score == pytest.approx(0.2)

    def test_score_position_bonus(self):
        """Leading and trailing fifths get the position bonus."""
        generator = SummaryGenerator()
        assert generator.score_sentence("Plain.", 0, 10) == pytest.approx(0.3)
        assert generator.score_sentence("Plain.", 9, 10) == pytest.approx(0.3)
        assert generator.score_sentence("Plain.", 2, 10) == pytest.approx(0.0)
        assert generator.score_sentence("Plain.", 8, 10) == pytest.approx(0.0)

    def test_score_length_bonus(self):
        """Sentences of 11 to 29 words get the length bonus."""
        generator = SummaryGenerator()
        fifteen = " ".join(["word"] * 15) + "."
        ten = " ".join(["word"] * 10) + "."
        thirty = " ".join(["word"] * 30) + "."

        assert generator.score_sentence(fifteen, 5, 10) == pytest.approx(0.3)
        assert generator.score_sentence(ten, 5, 10) == pytest.approx(0.0)
        assert generator.score_sentence(thirty, 5, 10) == pytest.approx(0.0)

    def test_scores_depend_only_on_sentence(self):
        """A sentence's score does not depend on its neighbours' content."""
        generator = SummaryGenerator()
        first = generator.score_sentences("A plain one. Thus it ends.")
        second = generator.score_sentences("Other words here. Thus it ends.")
        assert first[1].score == second[1].score
