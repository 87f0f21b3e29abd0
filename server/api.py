"""
Calculator HTTP API
POST /api/eval {"expr": "12*(3+4)"} -> {"ok": true, "result": "84"}
Safe parsing only (+ - * / % and parentheses). No eval().
"""
import json
import logging
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
import uvicorn

from config.config import SERVER_CONFIG
from core import ALLOWED_CHARS, calculate

logger = logging.getLogger(__name__)

NO_STORE = {"Cache-Control": "no-store"}


class EvalResponse(BaseModel):
    ok: bool = True
    result: str


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str


class HealthResponse(BaseModel):
    ok: bool = True
    ts: int


def _json(code: int, body: BaseModel) -> JSONResponse:
    return JSONResponse(status_code=code, content=body.model_dump(), headers=NO_STORE)


def _error(code: int, message: str) -> JSONResponse:
    return _json(code, ErrorResponse(error=message))


def extract_expression(payload) -> str:
    """取出 expr 字段；缺失或不是字符串时按空串处理"""
    if isinstance(payload, dict) and isinstance(payload.get("expr"), str):
        return payload["expr"].strip()
    return ""


def has_only_allowed_chars(expr: str) -> bool:
    """预检：只允许数字、小数点、空白、括号和操作符（词法分析里还会再查一遍）"""
    return all(ch in ALLOWED_CHARS for ch in expr)


def _content_length(request: Request):
    try:
        return int(request.headers.get("content-length", ""))
    except ValueError:
        return None


def create_app(config=None) -> FastAPI:
    """Build the API app; config defaults to SERVER_CONFIG."""
    cfg = dict(SERVER_CONFIG)
    if config:
        cfg.update(config)

    app = FastAPI(title="Calculator API")
    app.state.config = cfg

    @app.get(cfg["health_path"])
    async def health():
        """Liveness probe."""
        return _json(200, HealthResponse(ts=int(time.time())))

    @app.post(cfg["eval_path"])
    async def evaluate(request: Request):
        """Evaluate one expression."""
        try:
            limit = cfg["max_body_bytes"]
            declared = _content_length(request)
            if declared is not None and declared > limit:
                return _error(413, "body too large")

            # 边读边计数，超过上限立即停止读取
            chunks = []
            received = 0
            async for chunk in request.stream():
                received += len(chunk)
                if received > limit:
                    logger.debug(f"Body exceeded {limit} bytes, stopped reading")
                    return _error(413, "body too large")
                chunks.append(chunk)
            body = b"".join(chunks)

            try:
                payload = json.loads(body.decode("utf-8") or "{}")
            except (UnicodeDecodeError, json.JSONDecodeError):
                return _error(400, "invalid json")

            expr = extract_expression(payload)
            if not expr:
                return _error(400, "empty expression")
            if len(expr) > cfg["max_expression_length"]:
                return _error(413, "expression too long")
            if not has_only_allowed_chars(expr):
                return _error(400, "invalid character")

            result = calculate(expr)
            logger.info(f"eval {expr!r} -> {result}")
            return _json(200, EvalResponse(result=result))
        except Exception:
            logger.exception("Unhandled error in eval handler")
            return _error(500, "server error")

    return app


app = create_app()


def run_server(host=None, port=None):
    """Helper to start the API server."""
    host = host or SERVER_CONFIG["host"]
    port = port or SERVER_CONFIG["port"]
    logger.info(f"Calculator server running: http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
