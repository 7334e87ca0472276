"""HTTP API serving pages of fake user records and CSV exports."""

import logging
from typing import List

import uvicorn
from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, Response

from .core import PAGE_SIZE, Record, generate_page, generate_pages
from .exceptions import FakeUsersError
from .utils import CSVHandler

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Fake Users API",
    description="Seeded, paginated fake user records with controllable typos.",
    version="0.1.0",
    openapi_tags=[
        {
            "name": "fakedata",
            "description": "Record pages and CSV export.",
        }
    ],
)


@app.exception_handler(FakeUsersError)
async def fake_users_error_handler(request: Request, exc: FakeUsersError):
    logger.warning(f"Rejected {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/")
def read_root():
    return {"Service status": "Running"}


@app.get(
    "/api/fakedata",
    response_model=List[Record],
    tags=["fakedata"],
    summary="Generate one page of records",
)
def get_fake_data(
    region: str = Query(..., description="USA, Poland or Ukraine"),
    error_count: float = Query(0.0, alias="errorCount"),
    page: int = Query(0),
    seed: str = Query(""),
):
    records = generate_page(region, error_count, seed, page, PAGE_SIZE)
    logger.debug(f"Served page {page} for region {region}")
    return records


@app.get(
    "/api/fakedata/export",
    tags=["fakedata"],
    summary="Export pages fromPage..toPage (inclusive) as CSV",
)
def export_to_csv(
    region: str = Query(..., description="USA, Poland or Ukraine"),
    error_count: float = Query(0.0, alias="errorCount"),
    to_page: int = Query(..., alias="toPage"),
    from_page: int = Query(0, alias="fromPage"),
    seed: str = Query(""),
):
    records = generate_pages(region, error_count, seed, from_page, to_page, PAGE_SIZE)
    csv_bytes = CSVHandler().to_csv_bytes(records)
    return Response(
        content=csv_bytes,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="fake_user_data.csv"'},
    )


def main():
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )
    logger.info("Starting API server...")
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
