"""
Host the job stats API.
"""

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from loguru import logger

from backend.content.job_stats import gather_data
from backend.models.models import JobQuery, ScrapeResult

app = FastAPI()

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allows all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Any body without a list of titles is answered with an empty 500."""
    logger.error(f"Invalid job stats request: {exc.errors()}")
    return Response(status_code=HTTPStatus.INTERNAL_SERVER_ERROR)


# Sync route so the page fetches run in the threadpool, one after another
@app.post("/api/jobstats", response_model=ScrapeResult)
def job_stats_endpoint(query: JobQuery):
    """
    Scrape the number of listings for each keyword and for all jobs.

    Args:
        query: The keywords to search for

    Returns:
        dict: {"total": int, "values": [{"label": str, "value": int}]}
    """
    try:
        return gather_data(query.titles)
    except Exception as e:
        logger.error(f"Error during job stats scraping: {str(e)}")
        return JSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            content={"error": str(e)},
        )


@app.get("/health")
def health():
    """Liveness check."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.fastapi_app.main:app", host="0.0.0.0", port=8000)
