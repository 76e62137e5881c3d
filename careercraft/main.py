"""
CareerCraft - Main Application

FastAPI backend with:
- MongoDB for users, cached AI results and reference data
- OpenAI for course analysis, portfolio and roadmap generation
- JWT authentication

Run: uvicorn careercraft.main:app --port 4000
 or: careercraft  (console script, honours PORT)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from careercraft.api.routes import api_router
from careercraft.core.config import get_settings
from careercraft.core.errors import register_exception_handlers
from careercraft.db.mongodb import connect_mongo, init_mongo_indexes
from careercraft.services.openai_client import build_openai_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Open MongoDB once for the whole process (fails fast if unreachable),
    ensure indexes, build the AI client. Close the client on shutdown
    if we opened it.
    """
    settings = get_settings()

    owns_client = app.state.mongo_client is None
    if owns_client:
        app.state.mongo_client = connect_mongo(settings.mongodb_uri)
    app.state.mongo_db = app.state.mongo_client[settings.mongodb_db]
    init_mongo_indexes(app.state.mongo_db)

    if app.state.ai_client is None:
        app.state.ai_client = build_openai_client()
    if not app.state.ai_client.is_configured:
        logger.warning("OPENAI_API_KEY not set - AI endpoints will return 500")

    logger.info("CareerCraft ready (db=%s)", settings.mongodb_db)
    yield

    if owns_client:
        app.state.mongo_client.close()


def create_app(mongo_client=None, ai_client=None) -> FastAPI:
    """
    Build the application.

    mongo_client / ai_client: pre-built clients to use instead of
    connecting from settings (tests pass mongomock and a fake SDK).
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    app = FastAPI(
        title="CareerCraft API",
        description="""
        Student career guidance backend.

        ## Features
        - **Authentication**: JWT-based signup/login
        - **Profile**: Basic details and psychometric answers
        - **AI**: Course analysis, portfolio and career roadmap (cached, ?refresh=1 to regenerate)
        - **Catalog**: Job roles and scholarships filtered by the analysis
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.mongo_client = mongo_client
    app.state.ai_client = ai_client

    # CORS: FRONTEND_ORIGIN allow-list, or everything
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health", tags=["Health"])
    def health_check():
        return {"ok": True}

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run("careercraft.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
