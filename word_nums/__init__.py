"""
Word Nums: exact integers from English number phrases.

Pipeline: Tokenize → Classify → Evaluate → Narrow
Result:   the value plus the smallest fixed-width integer type that holds it.
"""

from .exceptions import EmptyInput, MalformedNumber, MalformedReason, Overflow, ParseError, UnknownWord
from .models import IntegerKind, SignPolicy, TypedLiteral
from .parser import NumberWordsParser, parse_number_words
from .renderer import number_to_words

__version__ = "1.0.0"

__all__ = [
    "EmptyInput",
    "IntegerKind",
    "MalformedNumber",
    "MalformedReason",
    "NumberWordsParser",
    "Overflow",
    "ParseError",
    "SignPolicy",
    "TypedLiteral",
    "UnknownWord",
    "number_to_words",
    "parse_number_words",
]
