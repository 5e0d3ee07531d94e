from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from arrowgeom.geometry.scene import build_scene, sweep
from arrowgeom.geometry.schema import SceneRequest, SweepRequest
from arrowgeom.logging_config import setup_logging


setup_logging()

app = FastAPI(title="arrowgeom 2D")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Rejected input may be inf/nan, which the JSON response cannot carry.
    detail = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(detail)})


@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.post("/api/scene")
def api_scene(req: SceneRequest):
    return build_scene(req)


@app.post("/api/sweep")
def api_sweep(req: SweepRequest):
    return sweep(req)
