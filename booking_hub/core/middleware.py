"""
Middleware configuration for the FastAPI application.

Kept out of main.py so the app factory stays slim.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from booking_hub.core.config import settings


def apply_cors(app: FastAPI) -> None:
    """Apply CORS middleware. Booking widgets are embedded on tenant sites."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
