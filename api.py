"""
Word Nums: FastAPI Server
=========================

HTTP front end for the number-phrase parser.

Endpoints:
    POST /parse             Parse one phrase into a typed literal
    POST /parse/batch       Parse many phrases; errors reported per phrase
    GET  /render/{number}   English phrase for an integer
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from word_nums import __version__
from word_nums.config import ParserSettings, configure_logging
from word_nums.exceptions import ParseError
from word_nums.models import ParseOutcome, TypedLiteral
from word_nums.parser import NumberWordsParser
from word_nums.renderer import number_to_words

load_dotenv()


# ─── Application Lifespan ───────────────────────────────────────────

_parser: NumberWordsParser | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the parser from environment settings on startup."""
    global _parser  # noqa: PLW0603
    settings = ParserSettings.from_env()
    configure_logging(settings)
    _parser = NumberWordsParser(settings)
    yield
    _parser = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Word Nums API",
    description=(
        "Converts English number phrases into exact integers, typed as the "
        "smallest fixed-width integer that holds them."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ParseRequest(BaseModel):
    """Request body for the /parse endpoint."""

    text: str = Field(
        ...,
        max_length=4096,
        description="The English number phrase to parse.",
        json_schema_extra={"example": "plus one thousand three hundred thirty seven"},
    )


class BatchParseRequest(BaseModel):
    texts: list[str] = Field(..., min_length=1, max_length=1000)


class LiteralOut(BaseModel):
    """A parsed value and its narrowed type."""

    value: int
    type: str
    bits: int
    signed: bool
    literal: str = Field(description="Suffixed literal, e.g. 1337u16")

    model_config = {"json_schema_extra": {"example": {
        "value": 1337,
        "type": "u16",
        "bits": 16,
        "signed": False,
        "literal": "1337u16",
    }}}


class OutcomeOut(BaseModel):
    text: str
    ok: bool
    result: Optional[LiteralOut] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None


class RenderResponse(BaseModel):
    number: int
    words: str


class HealthResponse(BaseModel):
    status: str
    version: str
    sign_policy: str
    largest_scale: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_parser() -> NumberWordsParser:
    if _parser is None:
        raise HTTPException(status_code=503, detail="Parser not initialised")
    return _parser


def _literal_out(literal: TypedLiteral) -> LiteralOut:
    return LiteralOut(
        value=literal.value,
        type=literal.kind.value,
        bits=literal.bits,
        signed=literal.signed,
        literal=literal.render(),
    )


def _outcome_out(outcome: ParseOutcome) -> OutcomeOut:
    return OutcomeOut(
        text=outcome.text,
        ok=outcome.ok,
        result=_literal_out(outcome.literal) if outcome.literal else None,
        error_code=outcome.error_code,
        error_message=outcome.error_message,
    )


@app.exception_handler(ParseError)
async def parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
    """Report parse failures as 422 with the machine-readable code."""
    return JSONResponse(
        status_code=422,
        content={"code": exc.code, "message": exc.message, "details": exc.details},
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/parse",
    summary="Parse an English number phrase",
    tags=["Parsing"],
    responses={
        422: {"description": "Phrase is empty, unknown, malformed or overflows"},
        503: {"description": "Parser not yet initialised"},
    },
)
def parse_phrase(request: ParseRequest) -> LiteralOut:
    """Parse one phrase.

    Returns the value, the narrowest integer type holding it, and the
    suffixed literal form.
    """
    parser = _get_parser()
    return _literal_out(parser.parse(request.text))


@app.post(
    "/parse/batch",
    summary="Parse several phrases",
    tags=["Parsing"],
    responses={503: {"description": "Parser not yet initialised"}},
)
async def parse_batch(request: BatchParseRequest) -> list[OutcomeOut]:
    """Parse each phrase independently; a bad phrase does not fail the batch."""
    parser = _get_parser()
    outcomes = await asyncio.to_thread(parser.parse_many, request.texts)
    return [_outcome_out(o) for o in outcomes]


@app.get(
    "/render/{number}",
    summary="Render an integer as English words",
    tags=["Rendering"],
    responses={422: {"description": "Number is too large to name"}},
)
def render(number: int) -> RenderResponse:
    try:
        words = number_to_words(number, _get_parser().vocabulary)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return RenderResponse(number=number, words=words)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Parser not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    parser = _get_parser()
    return HealthResponse(
        status="healthy",
        version=__version__,
        sign_policy=parser.settings.sign_policy.value,
        largest_scale=parser.vocabulary.largest_scale[0],
    )
