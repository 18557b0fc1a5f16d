#!/usr/bin/env python3

import argparse
import json
import time
import traceback
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from bluecanary import __version__, codes
from bluecanary.common.exceptions import BlueCanaryException, ModelNotLoadedError
from bluecanary.config import BlueCanaryConfig
from bluecanary.logger import init_logger
from bluecanary.service.model import SentimentModel
from bluecanary.service.proto import ErrorResponse, HealthResponse, PredictionResponse, ReviewRequest

logger = init_logger("bluecanary.service")


def load_model(model_path: str | None) -> SentimentModel:
    if model_path and Path(model_path).exists():
        return SentimentModel.load(model_path)
    if model_path:
        logger.warning(f"Model file {model_path} not found, training the bundled model instead")
    return SentimentModel.default()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if getattr(app.state, "model", None) is None:
        model_path = getattr(app.state, "model_path", None) or BlueCanaryConfig.from_env().service.model_path
        app.state.model = load_model(model_path)
    logger.info("bluecanary service start")

    yield

    logger.info("bluecanary service exit")


app = FastAPI(title="bluecanary sentiment service", version=__version__, lifespan=lifespan)


def get_model(request: Request) -> SentimentModel:
    model = getattr(request.app.state, "model", None)
    if model is None:
        raise ModelNotLoadedError()
    return model


def _status_for(code: codes | None) -> int:
    if code is None:
        return 500
    if code == codes.MODEL_NOT_LOADED:
        return 503
    if codes.is_client_error(code):
        return 400
    return 500


@app.exception_handler(BlueCanaryException)
async def bluecanary_exception_handler(request: Request, exc: BlueCanaryException):
    logger.warning(f"[request failed] {request.method} {request.url.path}: {exc}")
    content = ErrorResponse(detail=str(exc), code=exc.code)
    return JSONResponse(status_code=_status_for(exc.code), content=content.model_dump())


@app.exception_handler(Exception)
async def base_exception_handler(request: Request, exc: Exception):
    exc_content = {"detail": str(exc), "traceback": traceback.format_exc().split("\n")}
    logger.error(f"[app error] request:[{request}], exc:[{exc_content}]")
    return JSONResponse(status_code=500, content=exc_content)


@app.middleware("http")
async def log_requests_and_responses(request: Request, call_next):
    req_logger = init_logger("bluecanary.accessLog", "access.log")

    request_json = dict(request.query_params)
    if request.headers.get("content-type", "").lower().startswith("application/json"):
        try:
            request_json = await request.json()
        except Exception as e:
            req_logger.error(f"Could not decode request body:{request_json}, error:{e}")
            request_json = {}

    request_data = {
        "access_type": "request",
        "method": request.method,
        "url": str(request.url),
        "request_content": request_json,
    }
    req_logger.info(json.dumps(request_data))

    start_time = time.perf_counter()
    response = await call_next(request)
    process_time = f"{(time.perf_counter() - start_time) * 1000:.2f}ms"

    response_data = {
        "access_type": "response",
        "status_code": response.status_code,
        "process_time": process_time,
    }
    req_logger.info(json.dumps(response_data))

    return response


@app.get("/health")
async def health() -> HealthResponse:
    return HealthResponse(status="ok")


@app.post("/predict/")
def predict(request: ReviewRequest, model: SentimentModel = Depends(get_model)) -> PredictionResponse:
    prediction = model.predict(request.review)
    return PredictionResponse(sentiment=prediction.sentiment, confidence=prediction.confidence)


def main():
    import uvicorn

    service_config = BlueCanaryConfig.from_env().service

    parser = argparse.ArgumentParser(description="Run the bluecanary sentiment service")
    parser.add_argument("--host", default=service_config.host, help="Host to bind the server to")
    parser.add_argument("--port", type=int, default=service_config.port, help="Port to run the server on")
    parser.add_argument("--model-path", default=service_config.model_path, help="joblib model artifact")
    args = parser.parse_args()

    app.state.model_path = args.model_path
    uvicorn.run(app, host=args.host, port=args.port, access_log=False)


if __name__ == "__main__":
    main()
