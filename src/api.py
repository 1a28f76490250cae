"""
FastAPI application for the mining method selector.

This module provides HTTP endpoints for form collaborators: the catalog
snapshot, input validation, ranking, single-method scoring and the
shareable-link codec. The catalog is loaded once at import; a missing or
malformed catalog stops the service from starting.
"""

from typing import Any, Dict, Optional
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from src.config import Config
from src.utils.logging_utils import get_logger, setup_logger
from src.method_selector.codec import encode_inputs
from src.method_selector.engine import MethodSelector
from src.method_selector.metrics import compute_summary
from src.method_selector.results import MethodResult, ScoringResult, ValidationReport

# Set up logging
setup_logger(__name__, Config.LOG_LEVEL)
logger = get_logger(__name__)

selector = MethodSelector.from_path(Config.CATALOG_PATH)

# Create FastAPI app
app = FastAPI(
    title="Mining Method Selector API",
    description="API for ranking underground mining methods against the UBC weight catalog",
    version="1.0.0"
)


# Request/Response models
class InputsRequest(BaseModel):
    """Request model carrying an input record."""
    inputs: Dict[str, Optional[str]] = Field(..., description="Input record: factor key -> option")


class ScoreResponse(BaseModel):
    """Response model for a full ranking."""
    result: ScoringResult = Field(..., description="Scoring result for every method")
    summary: Dict[str, Any] = Field(..., description="Headline metrics of the result")


class EncodeResponse(BaseModel):
    """Response model for link encoding."""
    query: str = Field(..., description="Query string for a shareable link")


class DecodeRequest(BaseModel):
    """Request model for link decoding."""
    query: str = Field(..., description="Query string, with or without a leading '?'")


class DecodeResponse(BaseModel):
    """Response model for link decoding."""
    inputs: Dict[str, str] = Field(..., description="Decoded (possibly partial) input record")
    validation: ValidationReport = Field(..., description="Validation of the decoded record")


def _require_valid(inputs: Dict[str, Optional[str]]) -> None:
    report = selector.validate_inputs(inputs)
    if not report.is_valid:
        logger.error(f"Validation error: {report.errors}")
        raise HTTPException(
            status_code=400,
            detail={"message": "Invalid inputs", "errors": report.errors}
        )


@app.get("/")
async def root() -> Dict[str, Any]:
    """Root endpoint."""
    return {
        "message": "Mining Method Selector API",
        "version": "1.0.0",
        "catalog_version": selector.version,
        "endpoints": ["/config", "/weights", "/validate", "/score", "/score/{method}", "/share/encode", "/share/decode"]
    }


@app.get("/health")
async def health() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/config")
async def config_endpoint() -> Dict[str, Any]:
    """Catalog snapshot: methods, factors, categories, weights and provenance."""
    return selector.get_config().model_dump()


@app.get("/weights")
async def weights_endpoint(category: Optional[str] = None) -> Dict[str, Any]:
    """
    Weight matrix for display, optionally restricted to one category.

    Returns:
        {"methods": [...], "weights": {method: {factor: {option: weight}}}}

    Raises:
        HTTPException: If the category is unknown
    """
    try:
        frame = selector.weights_table(category)
    except ValueError as e:
        logger.error(f"Weights request failed: {e}")
        raise HTTPException(status_code=404, detail=str(e))

    weights: Dict[str, Dict[str, Dict[str, int]]] = {}
    for method, row in frame.iterrows():
        method_weights: Dict[str, Dict[str, int]] = {}
        for (factor, option), weight in row.items():
            method_weights.setdefault(factor, {})[option] = int(weight)
        weights[method] = method_weights

    return {"category": category, "methods": list(frame.index), "weights": weights}


@app.post("/validate", response_model=ValidationReport)
async def validate_endpoint(req: InputsRequest) -> ValidationReport:
    """Report every missing or illegal factor in the input record."""
    return selector.validate_inputs(req.inputs)


@app.post("/score", response_model=ScoreResponse)
async def score_endpoint(req: InputsRequest) -> ScoreResponse:
    """
    Rank every mining method for the supplied deposit.

    Args:
        req: Input record; it must pass validation

    Returns:
        Scoring result plus summary metrics

    Raises:
        HTTPException: 400 with per-factor errors if the input is invalid
    """
    logger.info(f"Received scoring request for {len(req.inputs)} factors")
    _require_valid(req.inputs)

    result = selector.calculate_scores(req.inputs)
    summary = compute_summary(result)
    logger.info(f"Scoring completed: top method = {summary['top_method']}")

    return ScoreResponse(result=result, summary=summary)


@app.post("/score/{method}", response_model=MethodResult)
async def score_method_endpoint(method: str, req: InputsRequest) -> MethodResult:
    """Score a single mining method for the supplied deposit."""
    if method not in selector.methods:
        logger.error(f"Unknown method: {method}")
        raise HTTPException(status_code=404, detail=f"Unknown method: {method}")
    _require_valid(req.inputs)
    return selector.calculate_method_result(method, req.inputs)


@app.post("/share/encode", response_model=EncodeResponse)
async def encode_endpoint(req: InputsRequest) -> EncodeResponse:
    """Encode an input record as a shareable query string."""
    return EncodeResponse(query=encode_inputs(req.inputs))


@app.post("/share/decode", response_model=DecodeResponse)
async def decode_endpoint(req: DecodeRequest) -> DecodeResponse:
    """Decode a shareable query string and validate what it carried."""
    inputs = selector.decode_query(req.query)
    return DecodeResponse(inputs=inputs, validation=selector.validate_inputs(inputs))


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Mining Method Selector API on {Config.API_HOST}:{Config.API_PORT}")
    uvicorn.run(
        "src.api:app",
        host=Config.API_HOST,
        port=Config.API_PORT,
        reload=Config.API_DEBUG
    )
