from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging
import uvicorn
from services.cep.router import router as cep_router
from services.cep.service import get_cep_service
from utils.logging_config import configure_logging


configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = get_cep_service().transport
    if hasattr(client, "start_session"):
        await client.start_session()
    yield
    if hasattr(client, "close_session"):
        await client.close_session()


app = FastAPI(
    title="Correios CEP API",
    version="1.0",
    description="Consulta de endereços por CEP direto no webservice dos Correios.",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handler para erros de validação"""
    error_details = []
    for error in exc.errors():
        error_details.append(
            {
                "loc": " -> ".join(str(loc) for loc in error["loc"]),
                "msg": error["msg"],
                "type": error["type"],
            }
        )
    logger.error(f"Validation error: {error_details}")
    return JSONResponse(
        status_code=422,
        content={"detail": error_details},
    )


app.include_router(cep_router)

if __name__ == "__main__":
    uvicorn.run("app:app", host="0.0.0.0", port=8002, reload=True)
