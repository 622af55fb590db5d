"""Tests for lexicon table loaders."""

import pandas as pd
import pytest

from jigsaw_wsd.constants import RelationType
from jigsaw_wsd.lexicon.graph import build_lexicon_graph
from jigsaw_wsd.lexicon.loader import (
    LexiconLoadError,
    load_lexicon_tables,
    save_lexicon_tables,
    split_cell,
    wordnet_synset_id,
    wordnet_tables,
)

from conftest import make_tables


class TestSplitCell:
    """Test multi-valued cell parsing."""

    def test_values(self):
        assert split_cell("n001 n002") == ["n001", "n002"]
        assert split_cell("  n001   ") == ["n001"]
        assert split_cell("") == []
        assert split_cell(None) == []
        assert split_cell(float("nan")) == []


class TestCsvTables:
    """Test reading and writing CSV lexicon directories."""

    def test_round_trip(self, tables, tmp_path):
        save_lexicon_tables(tables, tmp_path / "lexicon")

        loaded = load_lexicon_tables(tmp_path / "lexicon")
        graph = build_lexicon_graph(loaded)

        assert len(loaded.synsets) == len(tables.synsets)
        assert graph.synsets_for("bank", "n") == ("n002", "n004")
        assert graph.synsets_for("bank", "a") == ()
        assert graph.pointers("n001", RelationType.HYPONYM) == ("n002", "n003")
        assert graph.gloss("n001").endswith('"the school is an institution"')

    def test_optional_domain_files(self, tables, tmp_path):
        save_lexicon_tables(tables, tmp_path)
        (tmp_path / "semfield.csv").unlink()
        (tmp_path / "domains.csv").unlink()

        loaded = load_lexicon_tables(tmp_path)

        assert loaded.semfield.empty
        assert loaded.domain_hierarchy.empty

    def test_missing_directory(self, tmp_path):
        with pytest.raises(LexiconLoadError, match="directory not found"):
            load_lexicon_tables(tmp_path / "missing")

    def test_missing_required_file(self, tables, tmp_path):
        save_lexicon_tables(tables, tmp_path)
        (tmp_path / "relations.csv").unlink()

        with pytest.raises(LexiconLoadError, match="relations.csv"):
            load_lexicon_tables(tmp_path)

    def test_missing_columns(self, tables, tmp_path):
        save_lexicon_tables(tables, tmp_path)
        synsets = pd.DataFrame({"id": ["n001"], "gloss": ["x"]})
        synsets.to_csv(tmp_path / "synsets.csv", index=False)

        with pytest.raises(LexiconLoadError, match="words"):
            load_lexicon_tables(tmp_path)

    def test_empty_synsets(self, tmp_path):
        save_lexicon_tables(make_tables(synsets=[]), tmp_path)

        with pytest.raises(LexiconLoadError, match="empty"):
            load_lexicon_tables(tmp_path)


@pytest.fixture(scope="module")
def wordnet():
    from nltk.corpus import wordnet as wn

    try:
        wn.get_version()
    except LookupError:
        pytest.skip("NLTK WordNet corpus is not installed")
    return wn


class TestWordnetTables:
    """Test the NLTK WordNet lexicon source."""

    def test_synset_id(self, wordnet):
        assert wordnet_synset_id(wordnet.synset("entity.n.01")) == "n00001740"

    def test_satellite_folded(self, wordnet):
        satellite = next(s for s in wordnet.all_synsets("s"))

        assert wordnet_synset_id(satellite).startswith("a")

    def test_adverb_tables(self, wordnet):
        tables = wordnet_tables(pos="r")
        graph = build_lexicon_graph(tables)

        quickly = graph.synsets_for("quickly", "r")
        assert quickly
        assert all(synset_id.startswith("r") for synset_id in quickly)
        assert graph.synsets_for("quickly", "n") == ()
