# ------------------------------------------------------------
# cors.py - 허용 목록(allow-list) 기반 CORS 미들웨어
# ------------------------------------------------------------

import logging
import os
from typing import Dict, Iterable, List, Optional

from dotenv import load_dotenv
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_ORIGINS = [
    "http://localhost:8080",
    "http://127.0.0.1:5500",
    "https://movies.com",
]

# 사전 요청(preflight)에 응답할 메서드 목록
ALLOW_METHODS = "GET, PUT, POST, PATCH, DELETE, OPTIONS"


def parse_origins(raw: Optional[str]) -> List[str]:
    # "a,b , c" -> ["a", "b", "c"], 비어 있으면 기본 목록
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    return origins or list(DEFAULT_ORIGINS)


ACCEPTED_ORIGINS = parse_origins(os.getenv("ALLOWED_ORIGINS"))


def cors_headers(origin: Optional[str], accepted: Iterable[str], preflight: bool = False) -> Dict[str, str]:
    """
    요청 Origin에 대해 붙일 CORS 헤더를 계산합니다.

    - Origin 헤더 없음(같은 오리진/비브라우저 클라이언트): "*"
    - 허용 목록의 오리진: 해당 오리진을 그대로 반영 + Vary: Origin
    - 그 밖의 오리진: 헤더 없음 (브라우저가 응답을 차단)
    """
    if not origin:
        headers = {"Access-Control-Allow-Origin": "*"}
    elif origin in accepted:
        headers = {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}
    else:
        logger.debug("Origin %s is not in the allow list", origin)
        return {}
    if preflight:
        headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
    return headers


class AllowListCORSMiddleware(BaseHTTPMiddleware):
    """모든 응답에 cors_headers() 결과를 덧붙이는 미들웨어."""

    def __init__(self, app, allow_origins: Iterable[str] = DEFAULT_ORIGINS):
        super().__init__(app)
        self.allow_origins = frozenset(allow_origins)

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            # 처리되지 않은 예외도 CORS 헤더가 붙은 500으로 응답해야 브라우저가 본문을 읽을 수 있다
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = JSONResponse(status_code=500, content={"message": "Internal Server Error"})
        headers = cors_headers(
            request.headers.get("origin"),
            self.allow_origins,
            preflight=request.method == "OPTIONS",
        )
        for name, value in headers.items():
            response.headers[name] = value
        return response
