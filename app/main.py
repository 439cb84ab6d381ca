"""
FastAPI application for the Directed Graph Centrality Toolkit.

Endpoints:
    POST /graph              — Generate a random directed graph
    GET  /graph              — Current graph
    GET  /centrality/{name}  — Degree, closeness or betweenness scores
    GET  /health             — System health check
    GET  /metrics            — Processing statistics
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router
from app.config import APP_VERSION, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s: %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Directed Graph Centrality Toolkit",
    description="Generates random directed graphs and scores nodes by degree, closeness and betweenness.",
    version=APP_VERSION,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)

logger.info("Centrality toolkit API v%s ready", APP_VERSION)
