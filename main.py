import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging_config import configure_logging
from app.routes.auth.auth_routers import auth_router
from app.routes.post.post_routers import post_router
from app.routes.member.member_routers import member_router
from app.routes.project.project_routers import project_router
from app.routes.meeting.meeting_routers import meeting_router

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(post_router)
app.include_router(member_router)
app.include_router(project_router)
app.include_router(meeting_router)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Unexpected database error"})


@app.get("/", response_class=HTMLResponse)
async def read_root():
    return f"""
    <html>
        <head>
            <title>{settings.APP_NAME}</title>
        </head>
        <body>
            <h1>Welcome to the {settings.APP_NAME}!</h1>
            <p>Check the API documentation <a href="/docs">here</a>.</p>
        </body>
    </html>
    """


@app.get("/health")
async def health():
    return {"status": "ok"}
