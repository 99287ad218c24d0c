import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from core.config import CORS_ORIGIN_REGEX
from core.errors import GENERIC_ERROR
from core.logging_config import setup_logging
from routers import router as api_router

setup_logging()
log = logging.getLogger(__name__)

app = FastAPI(
    title="Cart API",
    description="API giỏ hàng và trừ kho khi checkout",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=CORS_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)

# Body sai định dạng cũng trả về lỗi chung 400, không lộ chi tiết
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    log.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": GENERIC_ERROR})

@app.get("/")
async def root():
    return {"message": "Cart API đang chạy!"}
