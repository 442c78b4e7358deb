# ------------------------------------------------------------
# main.py - FastAPI 앱/미들웨어/라우터 등록 진입점
# ------------------------------------------------------------

import logging
import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .cors import ACCEPTED_ORIGINS, AllowListCORSMiddleware
from .routers import movies                  # 영화 CRUD 라우터
from .validation import format_errors

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "1234"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

# FastAPI 애플리케이션 인스턴스 생성
app = FastAPI(title="Movies API")

# -------------------------------
# CORS 설정
# -------------------------------
# - 허용 목록(ALLOWED_ORIGINS)의 오리진과 Origin 헤더가 없는 요청에만 헤더를 붙임
# - CORSMiddleware("*")와 달리 목록 밖의 오리진에는 아무 헤더도 주지 않음
app.add_middleware(AllowListCORSMiddleware, allow_origins=ACCEPTED_ORIGINS)


# -------------------------------
# 오류 응답 형태 통일
# -------------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # 바디가 UTF-8이 아니면 FastAPI가 400 HTTPException을 던진다.
    # 영화 등록/수정에서는 검증 실패와 같은 {"error": {"body": ...}} 형태로 응답
    if exc.status_code == 400 and request.method in ("POST", "PATCH") and request.url.path.startswith("/movies"):
        status_code = 400 if request.method == "PATCH" else 422
        error = {"body": str(exc.detail)}
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, error)
        return JSONResponse(status_code=status_code, content={"error": error})
    # {"detail": ...} 대신 {"message": ...}
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # JSON 파싱 실패 등은 라우터의 검증 실패와 같은 {"error": {...}} 형태로
    # 부분 수정(PATCH)은 400, 나머지는 422
    status_code = 400 if request.method == "PATCH" else 422
    error = format_errors(exc.errors())
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, error)
    return JSONResponse(status_code=status_code, content={"error": error})


# -------------------------------
# 라우터 등록
# -------------------------------
app.include_router(movies.router)


# 상태 확인(헬스체크)용 루트 엔드포인트
@app.get("/")
def root():
    return {"ok": True, "service": "movies-api"}


def run():
    logger.info("Listening on http://localhost:%d", PORT)
    # server_header=False: 응답에 서버 구현 배너를 노출하지 않음
    uvicorn.run(app, host=HOST, port=PORT, server_header=False)


if __name__ == "__main__":
    run()
