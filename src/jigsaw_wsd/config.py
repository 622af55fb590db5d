"""Disambiguation configuration.

Settings are read from a properties-style file with python-dotenv::

    wsd.depth=6
    wsd.commonDepth=2
    wsd.measure=1
    wsd.radius=9
    wsd.alfa=0.7
    wsd.beta=0.3
    wsd.sigma=2.0
    wsd.maxVerb=0
    wsd.shortOutput=true
    nlp.stopWordFile=resources/stopwords.txt
    lexicon.path=data/lexicon

Missing keys fall back to the defaults in jigsaw_wsd.constants.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path

from dotenv import dotenv_values

from jigsaw_wsd.constants import (
    ALFA_DEFAULT,
    BETA_DEFAULT,
    COMMON_DEPTH_DEFAULT,
    CUTOFF_DEFAULT,
    DEPTH_DEFAULT,
    LOOK_GRAM_DEFAULT,
    MAX_VERB_DEFAULT,
    MEASURE_CODES,
    MEASURE_OCCURRENCE,
    MEASURES,
    RADIUS_DEFAULT,
    SIGMA_DEFAULT,
    STEMMER_LANGUAGE_DEFAULT,
    THETA_DEFAULT,
)

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file or value is invalid."""


# Properties key -> WsdConfig field
CONFIG_KEYS: dict[str, str] = {
    "wsd.depth": "depth",
    "wsd.commonDepth": "common_depth",
    "wsd.measure": "measure",
    "wsd.radius": "radius",
    "wsd.alfa": "alfa",
    "wsd.beta": "beta",
    "wsd.theta": "theta",
    "wsd.sigma": "sigma",
    "wsd.maxVerb": "max_verb",
    "wsd.cut": "cutoff",
    "wsd.cutoff": "cutoff",
    "wsd.lookGram": "look_gram",
    "wsd.shortOutput": "short_output",
    "wsd.posTagNotation": "pos_tag_notation",
    "wsd.verbose": "verbose",
    "nlp.stopWordFile": "stop_word_file",
    "nlp.lemmaFile": "lemma_file",
    "nlp.language": "language",
    "lexicon.path": "lexicon_path",
}


@dataclass(frozen=True)
class WsdConfig:
    """Disambiguation parameters.

    Attributes:
        depth: Traversal bound for similarity and gloss expansion
        common_depth: Traversal bound for the common-ancestor search
        measure: Gloss overlap measure ("weighted", "occurrence", "tf-idf")
        radius: Context tokens collected on each side of the target
        alfa: Weight of the context evidence
        beta: Weight of the sense-rank prior
        theta: Unused by the scorers, kept for configuration files
        sigma: Width of the Gaussian positional decay
        max_verb: Verbs added to a noun's context on each side
        cutoff: Minimum winning score in compact output
        look_gram: Unused by the scorers, kept for configuration files
        short_output: Compact output (single id) instead of id/score lists
        pos_tag_notation: Render full output as id:score,id:score
        verbose: Raise the package logger to DEBUG
        stop_word_file: Stop-word list, one word per line
        lemma_file: Morph-it style "form lemma TAG" lemma dictionary
        language: Snowball stemmer language
        lexicon_path: Directory of lexicon CSV tables
    """

    depth: int = DEPTH_DEFAULT
    common_depth: int = COMMON_DEPTH_DEFAULT
    measure: str = MEASURE_OCCURRENCE
    radius: int = RADIUS_DEFAULT
    alfa: float = ALFA_DEFAULT
    beta: float = BETA_DEFAULT
    theta: float = THETA_DEFAULT
    sigma: float = SIGMA_DEFAULT
    max_verb: int = MAX_VERB_DEFAULT
    cutoff: float = CUTOFF_DEFAULT
    look_gram: int = LOOK_GRAM_DEFAULT
    short_output: bool = False
    pos_tag_notation: bool = False
    verbose: bool = False
    stop_word_file: str | None = None
    lemma_file: str | None = None
    language: str = STEMMER_LANGUAGE_DEFAULT
    lexicon_path: str | None = None

    def validate(self) -> "WsdConfig":
        """Check value ranges.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigError: If a value is out of range
        """
        for name in ("depth", "common_depth", "radius", "max_verb"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.sigma <= 0:
            raise ConfigError(f"sigma must be > 0, got {self.sigma}")
        if self.measure not in MEASURES:
            raise ConfigError(f"measure must be one of {MEASURES}, got {self.measure!r}")
        return self

    def with_overrides(self, **overrides) -> "WsdConfig":
        """Return a copy with the given fields replaced (None values ignored)."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "measure" in changes:
            changes["measure"] = parse_measure(changes["measure"])
        return replace(self, **changes).validate()

    def to_dict(self) -> dict:
        return asdict(self)


# =============================================================================
# PARSING
# =============================================================================


def parse_measure(value: object) -> str:
    """Parse a measure given as a numeric code or a name.

    Examples:
        >>> parse_measure("0")
        'weighted'
        >>> parse_measure("tf-idf")
        'tf-idf'
    """
    text = str(value).strip().lower()
    if text in MEASURE_CODES:
        return MEASURE_CODES[text]
    if text in ("tfidf", "tf_idf"):
        text = "tf-idf"
    if text not in MEASURES:
        raise ConfigError(f"Unknown measure: {value!r}")
    return text


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "on")


def _coerce(name: str, raw: str, target_type: str) -> object:
    try:
        if target_type == "int":
            return int(raw)
        if target_type == "float":
            return float(raw)
        if target_type == "bool":
            return _parse_bool(raw)
    except ValueError as e:
        raise ConfigError(f"Invalid value for {name}: {raw!r}") from e
    return raw


def load_config(path: str | Path | None = None, **overrides) -> WsdConfig:
    """Load configuration from a properties file.

    Args:
        path: Properties file; None returns the defaults
        **overrides: Field values that take precedence over the file

    Returns:
        Validated WsdConfig

    Raises:
        ConfigError: If the file is missing or a value is malformed
    """
    values: dict[str, object] = {}
    if path is not None:
        path = Path(path)
        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {path}")
        field_types = {f.name: str(f.type) for f in fields(WsdConfig)}
        for key, raw in dotenv_values(path).items():
            name = CONFIG_KEYS.get(key)
            if name is None:
                logger.debug(f"Ignoring configuration key: {key}")
                continue
            if raw is None or raw.strip() == "":
                continue
            if name == "measure":
                values[name] = parse_measure(raw)
            else:
                values[name] = _coerce(key, raw.strip(), field_types[name])
        logger.info(f"Loaded configuration from {path}")

    return WsdConfig(**values).with_overrides(**overrides)
