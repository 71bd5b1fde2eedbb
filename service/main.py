"""
FastAPI service for filmdetect

Exposes recipe detection as HTTP API for language-agnostic access.
"""

import logging
import tempfile
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, File, HTTPException, UploadFile
from pydantic import BaseModel

from filmdetect import __version__
from filmdetect.api import detect
from filmdetect.config import settings
from filmdetect.matching.difference import Difference

logger = logging.getLogger(__name__)

app = FastAPI(
    title="filmdetect API",
    description="Identifies the Fujifilm recipe used for an uploaded photograph",
    version=__version__,
)


class ErrorResponse(BaseModel):
    """Error response"""
    error: str
    detail: Optional[str] = None


class MismatchSchema(BaseModel):
    field: str
    input: str
    candidate: str


class CandidateSchema(BaseModel):
    name: str
    author: str = ""
    url: str = ""
    score: int
    mismatches: List[MismatchSchema] = []


class DetectResponse(BaseModel):
    perfect_match: bool
    recipe: dict
    candidates: List[CandidateSchema]
    alternatives: List[str] = []


def candidate_schema(difference: Difference) -> CandidateSchema:
    candidate = difference.candidate
    return CandidateSchema(
        name=candidate.name,
        author=candidate.author,
        url=candidate.url,
        score=difference.score,
        mismatches=[
            MismatchSchema(field=label, input=input_value, candidate=candidate_value)
            for label, input_value, candidate_value in difference.rows
        ],
    )


@app.get("/")
def root():
    """API root - health check"""
    return {
        "service": "filmdetect API",
        "version": __version__,
        "status": "healthy"
    }


@app.post("/v1/detect", response_model=DetectResponse, responses={400: {"model": ErrorResponse}})
async def detect_endpoint(
    file: UploadFile = File(..., description="Photograph to identify"),
):
    """
    Identify the recipe of an uploaded photograph.

    The upload is written to a temporary file (exiftool reads from disk),
    then matched against the configured recipe library. Clients cannot
    choose the library.

    Raises:
        HTTPException 400: If no library is configured, or metadata or the
                           library cannot be read

    Example:
        curl -X POST http://localhost:8765/v1/detect -F "file=@DSCF0001.JPG"
    """
    library = settings.simulation_dir
    if library is None:
        raise HTTPException(status_code=400, detail="Simulation dir can't be empty.")

    suffix = Path(file.filename or "upload.jpg").suffix or ".jpg"
    image_bytes = await file.read()

    with tempfile.TemporaryDirectory() as tmp:
        image_path = Path(tmp) / f"upload{suffix}"
        image_path.write_bytes(image_bytes)
        result = detect(image_path, library)

    if result.failed:
        logger.info("Detection failed for %s: %s", file.filename, result.error)
        # The temporary path means nothing to the client
        detail = result.error.replace(str(image_path), file.filename or image_path.name)
        raise HTTPException(status_code=400, detail=detail)

    match = result.match
    return DetectResponse(
        perfect_match=match.perfect_match,
        recipe=result.recipe.to_dict(),
        candidates=[candidate_schema(d) for d in match.differences],
        alternatives=[d.candidate.name for d in match.alternatives],
    )


@app.get("/health")
def health_check():
    """Health check endpoint for monitoring"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8765)
