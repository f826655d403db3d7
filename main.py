# Load .env file FIRST before any other imports that use os.getenv
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from mindwell.core.config import settings
from mindwell.api.routes.analysis import router as analysis_router
from mindwell.api.routes.catalog import router as catalog_router
from mindwell.api.routes.questionnaire import router as questionnaire_router

app = FastAPI(title=settings.APP_NAME)

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analysis_router, prefix="/api", tags=["analysis"])
app.include_router(questionnaire_router, prefix="/api", tags=["questionnaire"])
app.include_router(catalog_router, prefix="/api", tags=["catalog"])


@app.on_event("startup")
def _log_startup():
    logging.info(
        "[startup] %s env=%s analysis_delay=%.2fs",
        settings.APP_NAME,
        settings.ENV,
        settings.ANALYSIS_DELAY_SECONDS,
    )


@app.get("/")
def index():
    return {"message": f"{settings.APP_NAME} API running"}


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.ENV == "development")
