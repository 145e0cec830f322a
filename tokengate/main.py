from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from tokengate.core.config import get_settings
from tokengate.api.api_v1 import user_router, auth_router, contacts_router, advantages_router, projects_router
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from tokengate.core.database import AsyncSessionLocal, create_tables, get_engine, session_lock
from tokengate.core.exceptions import AppException
from tokengate.core.init_db import init_db
from tokengate.repositories.token_repo import InMemoryTokenRepository
import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from tokengate.tasks.cleanup_tokens import periodic_cleanup


settings = get_settings()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup code
    logging.info(f"Starting up the {settings.PROJECT_NAME} API...")
    await create_tables(get_engine())
    async with session_lock(), AsyncSessionLocal() as session:
        await init_db(session, with_demo_users=settings.DEBUG)
    task = asyncio.create_task(
        periodic_cleanup(app.state.token_repo, settings.TOKEN_CLEANUP_INTERVAL_SECONDS)
    )
    yield
    # Shutdown code
    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await task
    logging.info(f"Shutting down the {settings.PROJECT_NAME} API...")


app = FastAPI(lifespan=lifespan, title=f"{settings.PROJECT_NAME} API", version="1.0.0")
app.state.token_repo = InMemoryTokenRepository()

# CORS setup

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(auth_router, prefix="/api/v1/auth", tags=["Authentication"])
app.include_router(user_router, prefix="/api/v1/users", tags=["Users"])
app.include_router(contacts_router, prefix="/api/v1/contacts", tags=["Contacts"])
app.include_router(advantages_router, prefix="/api/v1/advantages", tags=["Advantages"])
app.include_router(projects_router, prefix="/api/v1/projects", tags=["Projects"])

# Global exception handlers
@app.exception_handler(AppException)
async def app_exception_handler(request, exc: AppException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())}
    )

# Logger setup
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")



@app.get("/")
def read_root():
    return {"status": "Green", "message": f"The {settings.PROJECT_NAME} API is alive!"}
