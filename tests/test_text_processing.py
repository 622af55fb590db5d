"""Tests for text processing collaborators and tagset mapping."""

from __future__ import annotations

import pytest

from jigsaw_wsd.nlp.tags import TAGSET_PENN, TAGSET_TANL, TAGSET_UNIVERSAL, map_pos_tag
from jigsaw_wsd.nlp.text_processing import (
    SimpleTextProcessor,
    load_lemma_dictionary,
    load_word_list,
    normalize_text,
)

MORPH_IT = """case casa NOUN-F:p
correndo correre VER:ger+pres
belle bello ADJ:pos+f+p
bene bene ADV
il il ART-M:s
broken line
"""


@pytest.fixture
def lemma_file(tmp_path):
    path = tmp_path / "morph-it.txt"
    path.write_text(MORPH_IT, encoding="utf-8")
    return path


@pytest.fixture
def stop_word_file(tmp_path):
    path = tmp_path / "stopwords.txt"
    path.write_text("Il\nla\n\ndi\n", encoding="utf-8")
    return path


class TestMapPosTag:
    """Test tagset mapping into n/v/a/r/o."""

    @pytest.mark.parametrize(
        "tag,expected",
        [("NN", "n"), ("NNPS", "n"), ("VBD", "v"), ("JJR", "a"), ("RBS", "r"), ("DT", "o")],
    )
    def test_penn(self, tag, expected):
        assert map_pos_tag(tag, TAGSET_PENN) == expected

    @pytest.mark.parametrize(
        "tag,expected",
        [("NOUN", "n"), ("PROPN", "n"), ("VERB", "v"), ("ADJ", "a"), ("ADV", "r"), ("DET", "o")],
    )
    def test_universal(self, tag, expected):
        assert map_pos_tag(tag, TAGSET_UNIVERSAL) == expected

    @pytest.mark.parametrize(
        "tag,expected",
        [("S", "n"), ("SP", "n"), ("VAif", "v"), ("A", "a"), ("B", "r"), ("RD", "o")],
    )
    def test_tanl(self, tag, expected):
        assert map_pos_tag(tag, TAGSET_TANL) == expected

    def test_lexicon_letters_pass_through(self):
        for letter in ("n", "v", "a", "r", "o"):
            assert map_pos_tag(letter, TAGSET_PENN) == letter
            assert map_pos_tag(letter, TAGSET_TANL) == letter

    def test_missing_tag(self):
        assert map_pos_tag(None) == "o"
        assert map_pos_tag("") == "o"


class TestNormalizeText:
    """Test gloss normalization."""

    def test_punctuation_collapsed(self):
        assert normalize_text('a (large) building; "the house"') == "a large building the house "

    def test_accented_letters_kept(self):
        assert normalize_text("città, perché") == "città perché"

    def test_none(self):
        assert normalize_text(None) == ""


class TestResourceFiles:
    """Test stop-word and lemma files."""

    def test_load_word_list(self, stop_word_file):
        assert load_word_list(stop_word_file) == frozenset({"il", "la", "di"})

    def test_load_lemma_dictionary(self, lemma_file):
        lemmas = load_lemma_dictionary(lemma_file)

        assert lemmas == {
            ("case", "n"): "casa",
            ("correndo", "v"): "correre",
            ("belle", "a"): "bello",
            ("bene", "r"): "bene",
        }


class TestSimpleTextProcessor:
    """Test the NLTK-based processor."""

    def test_tokenize(self):
        processor = SimpleTextProcessor()

        assert processor.tokenize("The bank's well-known vault closed.") == [
            "The",
            "bank's",
            "well-known",
            "vault",
            "closed",
            ".",
        ]

    def test_stem(self):
        processor = SimpleTextProcessor()

        assert processor.stem("running") == "run"
        assert processor.stem("Banks") == "bank"

    def test_default_stop_words(self):
        processor = SimpleTextProcessor()

        assert processor.is_stop_word("The")
        assert not processor.is_stop_word("bank")

    def test_injected_tagger(self):
        processor = SimpleTextProcessor(tagger=lambda tokens: ["NN"] * len(tokens))

        assert processor.pos_tag(["bank", "river"]) == ["NN", "NN"]
        assert processor.pos_tag([]) == []

    def test_lemmatize_from_dictionary(self, lemma_file):
        processor = SimpleTextProcessor.from_files(lemma_file=lemma_file, language="italian")

        assert processor.lemmatize("case", "n") == "casa"
        assert processor.lemmatize("Case", "n") == "casa"
        assert processor.lemmatize("correndo", "v") == "correre"

    def test_lemmatize_unknown_is_lowercased(self, lemma_file):
        processor = SimpleTextProcessor.from_files(lemma_file=lemma_file, language="italian")

        assert processor.lemmatize("Case", "v") == "case"
        assert processor.lemmatize("Roma", "n") == "roma"

    def test_from_files_stop_words(self, stop_word_file):
        processor = SimpleTextProcessor.from_files(stop_word_file=stop_word_file)

        assert processor.is_stop_word("IL")
        assert not processor.is_stop_word("the")

    def test_normalize(self):
        assert SimpleTextProcessor().normalize("bank; (money)") == "bank money "

    def test_tagset(self):
        assert SimpleTextProcessor().tagset == TAGSET_PENN


@pytest.fixture(scope="module")
def spacy_processor():
    from jigsaw_wsd.nlp.spacy_processing import SpacyTextProcessor

    try:
        return SpacyTextProcessor()
    except OSError:
        pytest.skip("spaCy model en_core_web_sm is not installed")


class TestSpacyTextProcessor:
    """Test the spaCy-based processor."""

    def test_tagset(self, spacy_processor):
        assert spacy_processor.tagset == TAGSET_UNIVERSAL

    def test_tokenize(self, spacy_processor):
        assert spacy_processor.tokenize("The bank closed.") == ["The", "bank", "closed", "."]

    def test_pos_tag(self, spacy_processor):
        tags = spacy_processor.pos_tag(["The", "bank", "closed", "early"])

        assert len(tags) == 4
        assert tags[1] == "NOUN"
        assert map_pos_tag(tags[1], spacy_processor.tagset) == "n"

    def test_lemmatize(self, spacy_processor):
        assert spacy_processor.lemmatize("banks", "n") == "bank"

    def test_stop_words(self, spacy_processor):
        assert spacy_processor.is_stop_word("The")
        assert not spacy_processor.is_stop_word("bank")

    def test_stem(self, spacy_processor):
        assert spacy_processor.stem("running") == "run"


class TestSpacyLemmaCache:
    """Test the per-instance lemma cache (blank pipeline, no model download)."""

    def test_cache_is_per_instance(self):
        import spacy

        from jigsaw_wsd.nlp.spacy_processing import SpacyTextProcessor

        first = SpacyTextProcessor(nlp=spacy.blank("en"))
        second = SpacyTextProcessor(nlp=spacy.blank("en"))

        assert first.lemmatize("Banks", "n") == "banks"
        assert first.lemmatize("Banks", "n") == "banks"

        assert first.lemmatize.cache_info().hits == 1
        assert first.lemmatize.cache_info().currsize == 1
        assert second.lemmatize.cache_info().currsize == 0
