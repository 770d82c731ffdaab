# backend/shopify_dashboard/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import os, logging

from shopify_dashboard import __version__
from shopify_dashboard.api.report import router as report_router

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

app = FastAPI(title="Shopify Dashboard Plus API", version=__version__)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ALLOW_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Health check
@app.get("/api/health")
def health():
    return {"status": "ok", "version": __version__}

app.include_router(report_router)
logging.info("Mounted router: shopify_dashboard.api.report")
