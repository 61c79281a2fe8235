import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from .schemas import (
    AnalyzeRequest,
    AnalysisResponse,
    SentimentRequest,
    SentimentResponse,
    RewriteRequest,
    RewriteResponse,
    ErrorResponse,
)
from .errors import AnalysisError, EmptyInputError, WriteCleanError
from .models import AnalysisService, SentimentService, GeneratorService
from .metrics import REQUESTS, LATENCY, FAILURES, TOKENS
from .settings import settings
from .explain import TokenAttributor

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="WriteClean", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

analysis_svc = AnalysisService()
sentiment_svc = SentimentService()
writer_svc = GeneratorService()
explainer = TokenAttributor() if settings.ENABLE_EXPLANATIONS else None

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _fail(request: Request, exc: Exception, status: int, detail: str) -> JSONResponse:
    FAILURES.labels(request.url.path, type(exc).__name__).inc()
    body = ErrorResponse(error=type(exc).__name__, detail=detail)
    return JSONResponse(status_code=status, content=body.model_dump())


@app.exception_handler(EmptyInputError)
def empty_input_handler(request: Request, exc: EmptyInputError):
    logger.info("Rejected empty input: path=%s", request.url.path)
    return _fail(request, exc, 400, str(exc))


@app.exception_handler(AnalysisError)
def analysis_error_handler(request: Request, exc: AnalysisError):
    logger.error("Analysis failed: path=%s detail=%s", request.url.path, exc.detail)
    return _fail(request, exc, 500, exc.detail)


@app.exception_handler(WriteCleanError)
def writeclean_error_handler(request: Request, exc: WriteCleanError):
    logger.error("Engine error: path=%s error=%s", request.url.path, exc)
    return _fail(request, exc, 500, str(exc))


@app.get("/healthz")
def healthz():
    return {"status": "ok"}

@app.get("/metrics")
def metrics():
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)

@app.post("/v1/analyze", response_model=AnalysisResponse, responses=ERROR_RESPONSES)
def analyze(req: AnalyzeRequest):
    REQUESTS.labels("/v1/analyze").inc()
    start = time.time()
    result = analysis_svc.analyze(req.text, req.tone)
    TOKENS.inc(len(result.tokens))
    LATENCY.labels("/v1/analyze").observe(time.time() - start)
    return AnalysisResponse.from_result(result)

@app.post("/v1/sentiment", response_model=SentimentResponse, responses=ERROR_RESPONSES)
def sentiment(req: SentimentRequest):
    REQUESTS.labels("/v1/sentiment").inc()
    start = time.time()
    label, score = sentiment_svc.predict(req.text)
    tokens = None
    if explainer:
        pairs = explainer.attribute(req.text)
        tokens = [{"token": t, "score": float(s)} for t, s in pairs]
    LATENCY.labels("/v1/sentiment").observe(time.time() - start)
    return SentimentResponse(label=label, score=score, tokens=tokens)

@app.post("/v1/rewrite", response_model=RewriteResponse, responses=ERROR_RESPONSES)
def rewrite(req: RewriteRequest):
    REQUESTS.labels("/v1/rewrite").inc()
    start = time.time()
    improvement, latency_ms = writer_svc.rewrite(req.text, req.tone)
    LATENCY.labels("/v1/rewrite").observe(time.time() - start)
    return RewriteResponse(rewrite=improvement.improved, changes=list(improvement.changes), latency_ms=latency_ms)
