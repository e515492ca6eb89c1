from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
import logging

from leavedesk.api.v1 import auth, leave_requests, users, dashboard
from leavedesk.core.config import settings
from leavedesk.core.database import create_client, init_db
from leavedesk.core.exceptions import AuthError, ApiError

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("leavedesk")

app = FastAPI(
    title="LeaveDesk API",
    description="Leave, permission and shift-swap requests",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(leave_requests.router)
app.include_router(users.router)
app.include_router(dashboard.router)

@app.on_event("startup")
async def startup_event():
    """Create the database client and make sure the schema exists"""
    client = create_client(settings)
    if not client.connect():
        raise RuntimeError("Database connection could not be configured")
    init_db(client)
    app.state.db_client = client
    logger.info("Database ready: %s", client.__class__.__name__)

@app.on_event("shutdown")
async def shutdown_event():
    client = getattr(app.state, "db_client", None)
    if client is not None:
        client.disconnect()

# Guard failures carry no body, only the status code
@app.exception_handler(AuthError)
async def auth_error_handler(request: Request, exc: AuthError):
    return Response(status_code=exc.status_code)

@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse("Something broke!", status_code=500)

@app.get("/")
def root():
    return {"message": "LeaveDesk API is running"}

@app.get("/health")
def health_check():
    client = getattr(app.state, "db_client", None)
    if client is None:
        return {"status": "starting", "database": None}
    database = client.health_check()
    return {"status": database["status"], "database": database}

def run():
    """Console entry point"""
    import uvicorn
    uvicorn.run("leavedesk.main:app", host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
