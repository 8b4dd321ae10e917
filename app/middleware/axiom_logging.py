"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per admin API call to Axiom: method, path,
query/path params, request body, status code, duration and error detail.
Credentials and customer contact fields (phone, email) are masked.
Requests pass straight through when Axiom is not configured.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

logger = logging.getLogger(__name__)

# 마스킹 대상 필드 패턴: Fields to mask in request bodies and params
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential|phone|email)",
    re.IGNORECASE,
)

# 로깅 제외 경로: Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 에러 상세 최대 길이: Max length of error detail kept in an event
_MAX_ERROR_LEN: int = 500


def _mask(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹: Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else _mask(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        # 반복 근무 템플릿처럼 긴 목록은 앞부분만 기록: keep the head of long lists
        return [_mask(item, depth + 1) for item in data[:20]]
    return data


async def _read_json_body(request: Request) -> Any:
    body_bytes = await request.body()
    if not body_bytes:
        return None
    try:
        return _mask(json.loads(body_bytes))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"


def _error_detail(body: bytes) -> str:
    try:
        data = json.loads(body)
        detail = data.get("detail", data) if isinstance(data, dict) else data
        text = detail if isinstance(detail, str) else json.dumps(detail)
    except (json.JSONDecodeError, UnicodeDecodeError):
        text = body.decode("utf-8", errors="replace")
    return text[:_MAX_ERROR_LEN]


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어."""

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if self._client is None or request.url.path in _SKIP_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        event: dict[str, Any] = {
            "app": settings.APP_NAME,
            "method": request.method,
            "path": request.url.path,
        }
        if request.query_params:
            event["query_params"] = _mask(dict(request.query_params))
        if request.method in ("POST", "PUT", "PATCH"):
            body = await _read_json_body(request)
            if body is not None:
                event["request_body"] = body

        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 사유 추출 후 응답 재구성
            # Extract the error detail, then re-wrap the consumed body
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = _error_detail(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["status_code"] = status_code
            event["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            if request.path_params:
                event["path_params"] = dict(request.path_params)
            self._ingest(event)

        return response

    def _ingest(self, event: dict[str, Any]) -> None:
        # 로깅 실패가 요청 처리에 영향주지 않도록 로컬 로그만 남김
        # Log ingest failures locally; they never fail the request
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            logger.warning("Axiom ingest failed for %s %s", event["method"], event["path"], exc_info=True)
