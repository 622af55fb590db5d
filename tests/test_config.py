"""Tests for configuration loading."""

import pytest

from jigsaw_wsd.config import ConfigError, WsdConfig, load_config, parse_measure


@pytest.fixture
def properties(tmp_path):
    path = tmp_path / "wsd.properties"
    path.write_text(
        "\n".join(
            [
                "# JIGSAW settings",
                "wsd.depth=4",
                "wsd.commonDepth=3",
                "wsd.measure=0",
                "wsd.radius=5",
                "wsd.alfa=0.6",
                "wsd.beta=0.4",
                "wsd.sigma=1.5",
                "wsd.maxVerb=2",
                "wsd.cut=0.1",
                "wsd.shortOutput=true",
                "wsd.posTagNotation=false",
                "wsd.lookGram=2",
                "nlp.stopWordFile=stopwords.txt",
                "lexicon.path=data/lexicon",
                "db.url=jdbc:mysql://localhost/mwn",
            ]
        ),
        encoding="utf-8",
    )
    return path


class TestWsdConfig:
    """Test defaults and validation."""

    def test_defaults(self):
        config = WsdConfig()

        assert config.depth == 6
        assert config.common_depth == 2
        assert config.measure == "occurrence"
        assert config.radius == 9
        assert config.alfa == 0.7
        assert config.beta == 0.3
        assert config.sigma == 2.0
        assert config.max_verb == 0
        assert config.cutoff == -1.0
        assert config.short_output is False

    @pytest.mark.parametrize("field", ["depth", "common_depth", "radius", "max_verb"])
    def test_negative_rejected(self, field):
        with pytest.raises(ConfigError, match=field):
            WsdConfig(**{field: -1}).validate()

    def test_sigma_must_be_positive(self):
        with pytest.raises(ConfigError, match="sigma"):
            WsdConfig(sigma=0).validate()

    def test_unknown_measure(self):
        with pytest.raises(ConfigError, match="measure"):
            WsdConfig(measure="cosine").validate()

    def test_with_overrides(self):
        config = WsdConfig().with_overrides(radius=3, measure="2", cutoff=None)

        assert config.radius == 3
        assert config.measure == "tf-idf"
        assert config.cutoff == -1.0

    def test_frozen(self):
        with pytest.raises(AttributeError):
            WsdConfig().radius = 1

    def test_to_dict(self):
        assert WsdConfig().to_dict()["measure"] == "occurrence"


class TestParseMeasure:
    """Test measure parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("0", "weighted"),
            ("1", "occurrence"),
            ("2", "tf-idf"),
            (2, "tf-idf"),
            ("Weighted", "weighted"),
            ("tfidf", "tf-idf"),
            ("tf_idf", "tf-idf"),
        ],
    )
    def test_values(self, value, expected):
        assert parse_measure(value) == expected

    def test_unknown(self):
        with pytest.raises(ConfigError):
            parse_measure("3")


class TestLoadConfig:
    """Test properties files."""

    def test_load(self, properties):
        config = load_config(properties)

        assert config.depth == 4
        assert config.common_depth == 3
        assert config.measure == "weighted"
        assert config.radius == 5
        assert config.alfa == 0.6
        assert config.beta == 0.4
        assert config.sigma == 1.5
        assert config.max_verb == 2
        assert config.cutoff == 0.1
        assert config.short_output is True
        assert config.pos_tag_notation is False
        assert config.look_gram == 2
        assert config.stop_word_file == "stopwords.txt"
        assert config.lexicon_path == "data/lexicon"

    def test_overrides_take_precedence(self, properties):
        config = load_config(properties, radius=1, short_output=False)

        assert config.radius == 1
        assert config.short_output is False
        assert config.depth == 4

    def test_no_file_gives_defaults(self):
        assert load_config() == WsdConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.properties")

    def test_malformed_value(self, tmp_path):
        path = tmp_path / "bad.properties"
        path.write_text("wsd.radius=wide\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="wsd.radius"):
            load_config(path)

    def test_out_of_range_value(self, tmp_path):
        path = tmp_path / "bad.properties"
        path.write_text("wsd.sigma=-2\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="sigma"):
            load_config(path)

    def test_empty_values_ignored(self, tmp_path):
        path = tmp_path / "empty.properties"
        path.write_text("wsd.radius=\nwsd.depth=3\n", encoding="utf-8")

        config = load_config(path)

        assert config.radius == 9
        assert config.depth == 3
