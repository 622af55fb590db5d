"""Command line entry point.

Examples:
    jigsaw-wsd --config wsd.properties --input sentence.txt
    jigsaw-wsd --wordnet --mode tagged --input tagged.txt --output senses.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

from jigsaw_wsd.config import ConfigError, WsdConfig, load_config
from jigsaw_wsd.constants import ENCODING_UTF8, POS_OTHER
from jigsaw_wsd.lexicon.graph import LexiconGraph, build_lexicon_graph
from jigsaw_wsd.lexicon.loader import LexiconLoadError, load_lexicon_tables, wordnet_tables
from jigsaw_wsd.nlp.text_processing import SimpleTextProcessor, TextProcessor
from jigsaw_wsd.wsd.disambiguator import JigsawDisambiguator
from jigsaw_wsd.wsd.output import format_token_line
from jigsaw_wsd.wsd.tokens import TokenGroup

logger = logging.getLogger(__name__)

MODE_TEXT = "text"
MODE_TOKENIZED = "tokenized"
MODE_TAGGED = "tagged"
MODES = (MODE_TEXT, MODE_TOKENIZED, MODE_TAGGED)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_tagged_line(line: str) -> tuple[str, str]:
    """Split a "token.TAG" line on its last dot.

    Lines without a tag (or with an empty token) are tagged "o".

    Examples:
        >>> parse_tagged_line("bank.n")
        ('bank', 'n')
        >>> parse_tagged_line("U.S.n")
        ('U.S', 'n')
        >>> parse_tagged_line(".")
        ('.', 'o')
    """
    token, sep, tag = line.rpartition(".")
    if not sep or not token or not tag:
        return line, POS_OTHER
    return token, tag


def load_graph(config: WsdConfig, lexicon_dir: str | None, use_wordnet: bool) -> LexiconGraph:
    """Build the lexicon graph from a CSV directory or NLTK WordNet.

    Raises:
        LexiconLoadError: If no lexicon is configured or it cannot be read
    """
    if use_wordnet:
        return build_lexicon_graph(wordnet_tables())
    directory = lexicon_dir or config.lexicon_path
    if not directory:
        raise LexiconLoadError("No lexicon configured (use --lexicon, --wordnet or lexicon.path)")
    return build_lexicon_graph(load_lexicon_tables(directory))


def create_processor(config: WsdConfig, spacy_model: str | None) -> TextProcessor:
    if spacy_model:
        from jigsaw_wsd.nlp.spacy_processing import SpacyTextProcessor

        return SpacyTextProcessor(model_name=spacy_model, language=config.language)
    return SimpleTextProcessor.from_files(
        stop_word_file=config.stop_word_file,
        lemma_file=config.lemma_file,
        language=config.language,
    )


def run(
    disambiguator: JigsawDisambiguator,
    text: str,
    mode: str = MODE_TEXT,
) -> TokenGroup:
    """Disambiguate input text in one of the input modes."""
    if mode == MODE_TOKENIZED:
        tokens = [line.strip() for line in text.splitlines() if line.strip()]
        return disambiguator.map_tokens(tokens)
    if mode == MODE_TAGGED:
        pairs = [parse_tagged_line(line.strip()) for line in text.splitlines() if line.strip()]
        return disambiguator.map_tagged([t for t, _ in pairs], [p for _, p in pairs])
    return disambiguator.map_text(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="JIGSAW word sense disambiguation")
    parser.add_argument("--config", type=Path, default=None, help="Properties configuration file")
    parser.add_argument("--input", type=Path, required=True, help="Input text file")
    parser.add_argument(
        "--output", type=Path, default=None, help="Output file (default: standard output)"
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=MODE_TEXT,
        help="text: raw text; tokenized: one token per line; tagged: one token.TAG per line",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--lexicon", type=str, default=None, help="Directory of lexicon CSV tables")
    source.add_argument(
        "--wordnet", action="store_true", help="Use NLTK's WordNet corpus as the lexicon"
    )
    parser.add_argument(
        "--spacy-model",
        type=str,
        default=None,
        help="Use a spaCy pipeline (e.g., en_core_web_sm) instead of NLTK",
    )
    parser.add_argument(
        "--short-output", action="store_true", help="Write only the winning sense of each token"
    )
    parser.add_argument("--verbose", action="store_true", help="Log scoring traces")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return the exit status."""
    load_dotenv()

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    try:
        config = load_config(
            args.config,
            short_output=True if args.short_output else None,
            verbose=True if args.verbose else None,
        )
        graph = load_graph(config, args.lexicon, args.wordnet)
        text = args.input.read_text(encoding=ENCODING_UTF8)
    except (ConfigError, LexiconLoadError, OSError) as e:
        logger.error(str(e))
        return 1

    disambiguator = JigsawDisambiguator(graph, create_processor(config, args.spacy_model), config)
    group = run(disambiguator, text, args.mode)
    lines = [format_token_line(token) for token in group]

    if args.output is None:
        for line in lines:
            print(line)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text("\n".join(lines) + "\n", encoding=ENCODING_UTF8)
        logger.info(f"Wrote {len(lines)} annotated tokens to {args.output}")
    return 0


def run_cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run_cli()
