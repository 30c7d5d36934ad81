"""FastAPI application entry point.

Run with: uvicorn mortgage_calculator.api.app:app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mortgage_calculator.api.routes import amortization
from mortgage_calculator.config import settings

logging.getLogger("mortgage_calculator").setLevel(settings.log_level)

app = FastAPI(
    title="Mortgage Calculator",
    description="Fixed-payment mortgage amortization schedules",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(amortization.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
