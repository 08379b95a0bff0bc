"""FastAPI application entrypoint.

This file exists to expose a clean HTTP API for the frontend (slot listing,
parking/releasing vehicles, floor routes and schedule optimisation).

Run locally with:
    uvicorn api_app:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from facility_api.deps import init_facility
from facility_api.facility_router import router as facility_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="Parking Facility")

# Enable CORS for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # For development, allow all. In production, specify ["http://localhost:3000"]
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(facility_router)


@app.on_event("startup")
def _startup() -> None:
    # Build the default facility before serving requests.
    init_facility()
