from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import os
import logging
from dotenv import load_dotenv

from db import Base, engine
from models.models import RoiSimulation  # noqa: F401  registers the table
from guidance.routes import router as guidance_router
from guidance.ai_routes import router as ai_router

load_dotenv()

logging.basicConfig(level=logging.INFO)
logging.info("App starting")

app = FastAPI(title="Career Guidance API")

CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)

app.include_router(guidance_router)
app.include_router(ai_router)


@app.get("/", tags=["health"])
def root():
    return {"status": "ok", "service": "career-guidance"}
