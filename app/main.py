import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.routes import router
from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.processor import Processor, build_processor


def create_app(settings: Settings | None = None, processor: Processor | None = None) -> FastAPI:
    """Build the FastAPI application with a processor shared across requests."""
    settings = settings or Settings()
    Log.configure(settings.log_level)

    app = FastAPI(title="docscan")
    app.state.settings = settings
    app.state.processor = processor or build_processor(settings)
    app.include_router(router)

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        Log.warning(f"Rejected malformed request body: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": "Request body must be JSON with a 'url' field"},
        )

    return app


def main() -> None:
    """Entry point: load settings -> build app -> serve."""
    settings = Settings()
    app = create_app(settings)
    Log.info(f"Server listening on port {settings.port}")
    Log.info(f"Health check: http://localhost:{settings.port}/health")
    Log.info(f"API endpoint: POST http://localhost:{settings.port}/api/analyze-pdf")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
