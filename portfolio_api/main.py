import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_api.auth import router as auth_router
from portfolio_api.core import db, settings
from portfolio_api.core.errors import register_exception_handlers
from portfolio_api.images import router as images_router
from portfolio_api.pages import router as pages_router
from portfolio_api.posts import router as posts_router
from portfolio_api.projects import router as projects_router
from portfolio_api.tags import router as tags_router

logging.basicConfig(
    level=settings.log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

origins = settings.cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router.router, prefix="/api", tags=["auth"])
app.include_router(pages_router.router, prefix="/api", tags=["pages"])
app.include_router(images_router.router, prefix="/api", tags=["images"])
app.include_router(posts_router.router, prefix="/api", tags=["posts"])
app.include_router(projects_router.router, prefix="/api", tags=["projects"])
app.include_router(tags_router.router, prefix="/api", tags=["tags"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "portfolio api"}
