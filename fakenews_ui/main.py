import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .routers import classifier_router, page_router

settings = Settings()

def configure_logging(level: str = settings.log_level) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

configure_logging()

app =FastAPI(title="Fake News Detector")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(page_router.router)
app.include_router(classifier_router.router, prefix="/api")

@app.get("/api/healthchecker")
def root():
    return {"message": "Fake News Detector is running", "api_url": settings.api_url}

def run():
    uvicorn.run("fakenews_ui.main:app", host=settings.host, port=settings.port)

if __name__ == "__main__":
    run()
