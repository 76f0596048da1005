from __future__ import annotations

import logging
import os
import time
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import Depends, FastAPI, HTTPException, Security, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import APIKeyHeader
from pydantic import BaseModel

from prose_guard import (
    CheckResult,
    DetectorConfig,
    Match,
    PassiveMatch,
    ProseGuardError,
    StyleChecker,
    find_passive_voice,
    find_weasel_words,
)
from prose_guard.config import load_config
from prose_guard.report import summarize

logger = logging.getLogger(__name__)

# ── Auth / API key ───────────────────────────────────────────────────────────

_API_KEY = os.getenv("API_KEY")
_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(key: Annotated[str | None, Security(_api_key_header)]) -> None:
    if not _API_KEY:
        return  # Auth disabled
    if key == _API_KEY:
        return
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
    )


# ── Pydantic models ──────────────────────────────────────────────────────────


class CheckRequest(BaseModel):
    text: str
    weasel_pattern: str | None = None
    check_passive_voice: bool | None = None
    extra_weasel_words: list[str] | None = None


class WeaselRequest(BaseModel):
    text: str
    weasel_pattern: str | None = None


class PassiveRequest(BaseModel):
    text: str


class MatchOut(BaseModel):
    phrase: str
    line: int
    position: int
    context: str
    context_start: int


class PassiveMatchOut(MatchOut):
    be_verb: str
    past_participle: str


class CheckResponse(BaseModel):
    weasel_matches: list[MatchOut]
    passive_matches: list[PassiveMatchOut]
    total: int
    summary: str


def _match_out(m: Match) -> MatchOut:
    return MatchOut(
        phrase=m.phrase,
        line=m.line,
        position=m.position,
        context=m.context,
        context_start=m.context_start,
    )


def _passive_out(m: PassiveMatch) -> PassiveMatchOut:
    return PassiveMatchOut(
        phrase=m.phrase,
        line=m.line,
        position=m.position,
        context=m.context,
        context_start=m.context_start,
        be_verb=m.be_verb,
        past_participle=m.past_participle,
    )


def _config_error(exc: ProseGuardError) -> HTTPException:
    return HTTPException(
        status_code=422, detail=str(exc)
    )


# ── Checker singleton ────────────────────────────────────────────────────────

_checker: StyleChecker | None = None


@asynccontextmanager
async def lifespan(_: FastAPI):
    global _checker
    _checker = StyleChecker(load_config())
    yield
    _checker = None


def _get_checker(request: CheckRequest) -> StyleChecker:
    assert _checker is not None
    if (
        request.weasel_pattern is None
        and request.check_passive_voice is None
        and not request.extra_weasel_words
    ):
        return _checker
    base = _checker.config
    config = DetectorConfig(
        weasel_pattern=(
            base.weasel_pattern if request.weasel_pattern is None else request.weasel_pattern
        ),
        check_passive_voice=(
            base.check_passive_voice
            if request.check_passive_voice is None
            else request.check_passive_voice
        ),
        extra_weasel_words=base.extra_weasel_words + tuple(request.extra_weasel_words or ()),
    )
    return StyleChecker(config)


# ── FastAPI app ──────────────────────────────────────────────────────────────

app = FastAPI(title="prose-guard", lifespan=lifespan)

_CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok"}


@app.post("/check", response_model=CheckResponse, dependencies=[Depends(verify_api_key)])
async def check(request: CheckRequest) -> CheckResponse:
    t0 = time.monotonic()
    try:
        result: CheckResult = _get_checker(request).check(request.text)
    except ProseGuardError as exc:
        raise _config_error(exc) from exc
    logger.info(
        f"check: {len(result.weasel_matches)} weasel, {len(result.passive_matches)} passive "
        f"in {(time.monotonic() - t0) * 1000:.1f} ms"
    )
    return CheckResponse(
        weasel_matches=[_match_out(m) for m in result.weasel_matches],
        passive_matches=[_passive_out(m) for m in result.passive_matches],
        total=result.total,
        summary=summarize(result),
    )


@app.post(
    "/check/weasel",
    response_model=list[MatchOut],
    dependencies=[Depends(verify_api_key)],
)
async def check_weasel(request: WeaselRequest) -> list[MatchOut]:
    assert _checker is not None
    pattern = request.weasel_pattern
    if pattern is None:
        pattern = _checker.config.effective_weasel_pattern
    try:
        matches = find_weasel_words(request.text, pattern)
    except ProseGuardError as exc:
        raise _config_error(exc) from exc
    return [_match_out(m) for m in matches]


@app.post(
    "/check/passive",
    response_model=list[PassiveMatchOut],
    dependencies=[Depends(verify_api_key)],
)
async def check_passive(request: PassiveRequest) -> list[PassiveMatchOut]:
    return [_passive_out(m) for m in find_passive_voice(request.text, enabled=True)]
