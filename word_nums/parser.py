"""
Number-phrase parser: orchestrates the full workflow.

Flow:
  ┌─────────────┐
  │ Raw phrase  │
  └──────┬──────┘
         │
  ┌──────▼──────┐
  │  Tokenizer  │   ← lowercase words, "and" dropped
  └──────┬──────┘
         │
  ┌──────▼──────┐
  │ Classifier  │   ← sign / digit / teen / tens / scale
  └──────┬──────┘
         │
  ┌──────▼──────┐
  │  Evaluator  │   ← English numeral grammar
  └──────┬──────┘
         │
  ┌──────▼──────┐
  │  Narrower   │   ← smallest fixed-width type
  └──────┬──────┘
         │
  ┌──────▼──────┐
  │ TypedLiteral│
  └─────────────┘

Every stage is a pure function; a parser holds only immutable settings and
vocabulary, so one instance can serve any number of threads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .classifier import classify_all
from .config import ParserSettings
from .evaluator import evaluate
from .exceptions import ParseError
from .models import EvaluatedNumber, ParseOutcome, TypedLiteral
from .narrower import narrow
from .tokenizer import tokenize
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)


class NumberWordsParser:
    """Turns English number phrases into typed integer literals.

    Usage:
        parser = NumberWordsParser()
        literal = parser.parse("plus one thousand three hundred thirty seven")
        literal.value   # 1337
        literal.kind    # IntegerKind.U16
    """

    def __init__(
        self,
        settings: ParserSettings | None = None,
        vocabulary: Vocabulary | None = None,
    ):
        self.settings = settings or ParserSettings()
        self.vocabulary = vocabulary or DEFAULT_VOCABULARY

    def evaluate(self, text: str) -> EvaluatedNumber:
        """Run tokenizer, classifier and evaluator; stop before narrowing."""
        tokens = classify_all(tokenize(text), self.vocabulary)
        return evaluate(tokens)

    def parse(self, text: str) -> TypedLiteral:
        """Parse `text` into the narrowest typed literal.

        Raises:
            EmptyInput, UnknownWord, MalformedNumber, Overflow
        """
        logger.debug("Parsing %r", text)
        try:
            evaluated = self.evaluate(text)
            literal = narrow(
                evaluated.value,
                evaluated.unsigned_requested,
                self.settings.sign_policy,
            )
        except ParseError as e:
            logger.info("Could not parse %r: [%s] %s", text, e.code, e.message)
            raise

        logger.debug("Parsed %r as %s", text, literal.render())
        return literal

    def parse_many(self, texts: Iterable[str]) -> list[ParseOutcome]:
        """Parse each phrase independently; failures are reported, not raised."""
        outcomes: list[ParseOutcome] = []
        for text in texts:
            try:
                outcomes.append(ParseOutcome(text=text, literal=self.parse(text)))
            except ParseError as e:
                outcomes.append(
                    ParseOutcome(
                        text=text,
                        error_code=e.code,
                        error_message=e.message,
                        error_details=e.details,
                    )
                )
        return outcomes


_default_parser = NumberWordsParser()


def parse_number_words(text: str) -> TypedLiteral:
    """Parse `text` with the default settings.

    Example:
        parse_number_words("fifty seven hundred")  # TypedLiteral(value=5700, kind=i16)
    """
    return _default_parser.parse(text)
