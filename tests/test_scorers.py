"""Tests for the per-POS sense scorers."""

import pytest

from jigsaw_wsd.config import WsdConfig
from jigsaw_wsd.constants import ZIPF_EXPONENT_ADJ, ZIPF_EXPONENT_NOUN, ZIPF_EXPONENT_VERB
from jigsaw_wsd.wsd.primitives import (
    MAX_SIMILARITY,
    depth_similarity,
    normalized_depth_similarity,
    zipf_prior,
)
from jigsaw_wsd.wsd.scorers import (
    AdjAdvSenseScorer,
    ContextSenseScorer,
    NounSenseScorer,
    VerbSenseScorer,
    create_scorers,
)
from jigsaw_wsd.wsd.tokens import Token, TokenGroup


def token(word: str, pos: str, candidates: tuple[str, ...], position: int = 0) -> Token:
    return Token(
        token=word,
        stem=word.lower(),
        lemma=word.lower(),
        pos=pos,
        position=position,
        group_position=position,
        candidates=candidates,
    )


@pytest.fixture
def config():
    return WsdConfig()


class TestSimilarity:
    """Test pairwise token similarity."""

    def test_same_sense_is_maximum(self, query, processor, config):
        scorer = NounSenseScorer(query, processor, config)
        a = token("bank", "n", ("n002", "n004"))
        b = token("bank", "n", ("n002",), 1)

        assert scorer.similarity(a, b) == MAX_SIMILARITY

    def test_best_pair_wins(self, query, processor, config):
        scorer = NounSenseScorer(query, processor, config)
        a = token("bank", "n", ("n004", "n002"))
        b = token("school", "n", ("n003",), 1)

        assert scorer.similarity(a, b) == pytest.approx(depth_similarity(2))

    def test_no_candidates(self, query, processor, config):
        scorer = NounSenseScorer(query, processor, config)
        a = token("bank", "n", ("n002",))
        b = token("thing", "n", (), 1)

        assert scorer.similarity(a, b) == 0.0
        assert scorer.normalized_similarity(a, b) == 0.0


class TestNounSenseScorer:
    """Test the joint noun model."""

    def test_hypernym_support_wins(self, query, processor, config):
        # n001 is the hypernym of n002; the context noun n003 shares n001 with both
        target = token("institution", "n", ("n001", "n002"))
        context = token("school", "n", ("n003",), 1)
        scorer = NounSenseScorer(query, processor, config)

        rankings = scorer.rank_group(TokenGroup([target, context]))

        ranking = rankings[0]
        assert ranking.best_id == "n002"
        prior_1 = zipf_prior(1, 2, ZIPF_EXPONENT_NOUN)
        assert ranking.scores[1][1] == pytest.approx(0.7 + 0.3 * prior_1)
        assert ranking.scores[0][1] == pytest.approx(0.3 * zipf_prior(0, 2, ZIPF_EXPONENT_NOUN))

    def test_direct_hypernym_gives_no_support(self, query, processor, config):
        # n002 is a direct hyponym of the context sense n001, but the two
        # share no ancestor, so neither side is supported
        target = token("bank", "n", ("n004", "n002"))
        context = token("institution", "n", ("n001",), 1)
        scorer = NounSenseScorer(query, processor, config)

        rankings = scorer.rank_group(TokenGroup([target, context]))

        ranking = rankings[0]
        assert ranking.best_id == "n004"
        for k, (_, score) in enumerate(ranking.scores):
            assert score == pytest.approx(0.3 * zipf_prior(k, 2, ZIPF_EXPONENT_NOUN))
        assert rankings[1].best_score == pytest.approx(0.3)

    def test_shared_hypernym_selects_later_sense(self, query, processor, config):
        target = token("bank", "n", ("n002", "n004"))
        context = token("slope", "n", ("n005",), 1)
        scorer = NounSenseScorer(query, processor, config)

        ranking = scorer.rank_group(TokenGroup([target, context]))[0]

        assert ranking.best_id == "n004"
        prior_1 = zipf_prior(1, 2, ZIPF_EXPONENT_NOUN)
        assert ranking.scores[1][1] == pytest.approx(0.7 + 0.3 * prior_1)

    def test_context_noun_also_ranked(self, query, processor, config):
        target = token("institution", "n", ("n001", "n002"))
        context = token("school", "n", ("n003",), 1)
        scorer = NounSenseScorer(query, processor, config)

        rankings = scorer.rank_group(TokenGroup([target, context]))

        assert rankings[1].best_id == "n003"
        assert rankings[1].best_score == pytest.approx(0.7 + 0.3)

    def test_no_pairs_uses_uniform_support(self, query, processor, config):
        scorer = NounSenseScorer(query, processor, config)
        target = token("bank", "n", ("n002", "n004"))

        ranking = scorer.rank_group(TokenGroup([target]))[0]

        assert ranking.best_id == "n002"
        for k, (_, score) in enumerate(ranking.scores):
            assert score == pytest.approx(0.7 / 2 + 0.3 * zipf_prior(k, 2, ZIPF_EXPONENT_NOUN))

    def test_no_candidates_unresolved(self, query, processor, config):
        scorer = NounSenseScorer(query, processor, config)
        nouns = TokenGroup([token("thing", "n", ()), token("bank", "n", ("n002", "n004"), 1)])

        rankings = scorer.rank_group(nouns)

        assert rankings[0] is None
        assert rankings[1] is not None

    def test_empty_group(self, query, processor, config):
        assert NounSenseScorer(query, processor, config).rank_group(TokenGroup()) == []


class TestVerbSenseScorer:
    """Test the gloss-noun verb model."""

    def test_single_candidate_outright(self, query, processor, config):
        scorer = VerbSenseScorer(query, processor, config)
        target = token("deposit", "v", ("v001",))

        ranking = scorer.rank(target, TokenGroup())

        assert ranking.outright
        assert ranking.scores == [("v001", 1.0)]

    def test_no_candidates(self, query, processor, config):
        scorer = VerbSenseScorer(query, processor, config)

        assert scorer.rank(token("xyz", "v", ()), TokenGroup()) is None

    def test_gloss_nouns(self, query, processor, config):
        scorer = VerbSenseScorer(query, processor, config)

        nouns = scorer.gloss_nouns("v001")

        assert [n.token for n in nouns] == ["money", "bank"]
        assert nouns[1].candidates == ("n002", "n004")
        # "plane" has no senses in the lexicon
        assert [n.token for n in scorer.gloss_nouns("v002")] == ["slope"]

    def test_gloss_match_wins(self, query, processor, config):
        scorer = VerbSenseScorer(query, processor, config)
        target = token("bank", "v", ("v001", "v002"))
        context = TokenGroup([token("money", "n", ("n008",), 1)])

        ranking = scorer.rank(target, context)

        assert ranking.best_id == "v001"
        assert len(ranking.scores) == 2
        expected = zipf_prior(0, 2, ZIPF_EXPONENT_VERB) * normalized_depth_similarity(0)
        assert ranking.scores[0][1] == pytest.approx(expected)

    def test_empty_context_scores_zero(self, query, processor, config):
        scorer = VerbSenseScorer(query, processor, config)
        target = token("bank", "v", ("v001", "v002"))

        ranking = scorer.rank(target, TokenGroup())

        assert [score for _, score in ranking.scores] == [0.0, 0.0]
        assert ranking.best_id == "v001"

    def test_short_output_prunes(self, query, processor):
        scorer = VerbSenseScorer(query, processor, WsdConfig(short_output=True))
        target = token("bank", "v", ("v001", "v002"))
        context = TokenGroup([token("money", "n", ("n008",), 1)])

        ranking = scorer.rank(target, context)

        assert ranking.scores[0][0] == "v001"
        assert len(ranking.scores) == 1


class TestAdjAdvSenseScorer:
    """Test the gloss-overlap adjective/adverb model."""

    def test_single_candidate_outright(self, query, processor, config):
        scorer = AdjAdvSenseScorer(query, processor, config)

        ranking = scorer.rank(token("quickly", "r", ("r001",)), TokenGroup())

        assert ranking.outright
        assert ranking.best_id == "r001"

    def test_overlap_wins(self, query, processor, config):
        scorer = AdjAdvSenseScorer(query, processor, config)
        target = token("big", "a", ("a001", "a002"))
        context = TokenGroup([token("river", "n", ("n009",), 1)])

        ranking = scorer.rank(target, context)

        assert ranking.best_id == "a001"
        assert ranking.scores[0][1] == pytest.approx(
            0.7 + 0.3 * zipf_prior(0, 2, ZIPF_EXPONENT_ADJ)
        )
        assert ranking.scores[1][1] == pytest.approx(0.3 * zipf_prior(1, 2, ZIPF_EXPONENT_ADJ))

    def test_zero_overlap_uniform(self, query, processor, config):
        scorer = AdjAdvSenseScorer(query, processor, config)
        target = token("big", "a", ("a001", "a002"))

        ranking = scorer.rank(target, TokenGroup())

        assert ranking.best_id == "a001"
        for j, (_, score) in enumerate(ranking.scores):
            assert score == pytest.approx(0.7 / 2 + 0.3 * zipf_prior(j, 2, ZIPF_EXPONENT_ADJ))

    @pytest.mark.parametrize("measure", ["weighted", "occurrence", "tf-idf"])
    def test_every_measure(self, query, processor, measure):
        scorer = AdjAdvSenseScorer(query, processor, WsdConfig(measure=measure))
        target = token("big", "a", ("a001", "a002"))
        context = TokenGroup([token("river", "n", ("n009",), 1)])

        assert scorer.rank(target, context).best_id == "a001"


class TestCreateScorers:
    """Test scorer registry."""

    def test_one_scorer_per_pos(self, query, processor, config):
        scorers = create_scorers(query, processor, config)

        assert isinstance(scorers["v"], VerbSenseScorer)
        assert isinstance(scorers["n"], NounSenseScorer)
        assert isinstance(scorers["a"], AdjAdvSenseScorer)
        assert scorers["a"] is scorers["r"]

    def test_only_nouns_are_scored_jointly(self, query, processor, config):
        scorers = create_scorers(query, processor, config)

        assert isinstance(scorers["v"], ContextSenseScorer)
        assert isinstance(scorers["a"], ContextSenseScorer)
        assert not isinstance(scorers["n"], ContextSenseScorer)
        assert not hasattr(scorers["n"], "rank")
