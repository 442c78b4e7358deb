# ---------------------------------------------
# movies.py - 영화 CRUD 엔드포인트
# ---------------------------------------------

import logging
from typing import Any, List, Optional

# FastAPI의 APIRouter: 라우터 분리/모듈화를 위한 도구
# Depends: 의존성 주입 (요청마다 메모리 저장소 주입)
from fastapi import APIRouter, Body, Depends, HTTPException, Response
from fastapi.responses import JSONResponse

from ..db import MovieStore, get_store
from ..schemas import ErrorOut, MessageOut, MovieOut
from ..validation import validate_movie, validate_partial_movie

logger = logging.getLogger(__name__)

MOVIE_NOT_FOUND = "Movie not found"

# 이 라우터의 모든 엔드포인트는 "/movies"로 시작
router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=List[MovieOut])
def list_movies(genre: Optional[str] = None, store: MovieStore = Depends(get_store)):
    """
    영화 목록을 저장 순서대로 반환합니다.

    - Query Params:
      - genre: 장르 필터 (대소문자 무시). 비어 있으면 전체 목록
    """
    return store.all(genre=genre)


@router.get("/{movie_id}", response_model=MovieOut, responses={404: {"model": MessageOut}})
def get_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    movie = store.get(movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
    return movie


@router.post("", response_model=MovieOut, status_code=201, responses={422: {"model": ErrorOut}})
def create_movie(payload: Any = Body(None), store: MovieStore = Depends(get_store)):
    """
    새 영화를 등록합니다.

    동작 흐름:
    1) validate_movie()로 전체 필드 검증 (rate 미지정 시 0)
    2) 실패하면 422 + {"error": {필드: 메시지}}
    3) 성공하면 새 UUID를 발급해 목록 끝에 추가하고 201로 반환
    """
    result = validate_movie(payload)
    if not result.success:
        logger.warning("Rejected new movie: %s", result.error)
        return JSONResponse(status_code=422, content={"error": result.error})
    return store.add(result.data)


@router.patch(
    "/{movie_id}",
    response_model=MovieOut,
    responses={400: {"model": ErrorOut}, 404: {"model": MessageOut}},
)
def update_movie(movie_id: str, payload: Any = Body(None), store: MovieStore = Depends(get_store)):
    """
    영화의 일부 필드를 수정합니다.

    - 검증이 조회보다 먼저: 잘못된 바디는 id 존재 여부와 무관하게 400
    - 없는 id면 404
    - 보낸 필드만 기존 레코드 위에 병합해 반환
    """
    result = validate_partial_movie(payload)
    if not result.success:
        logger.warning("Rejected update for movie %s: %s", movie_id, result.error)
        return JSONResponse(status_code=400, content={"error": result.error})

    movie = store.update(movie_id, result.data)
    if movie is None:
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
    return movie


@router.delete("/{movie_id}", response_model=MessageOut, responses={404: {"model": MessageOut}})
def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    if not store.remove(movie_id):
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
    return {"message": "Movie deleted"}


@router.options("/{movie_id}")
def preflight_movie(movie_id: str):
    # CORS 헤더(Allow-Origin/Allow-Methods)는 AllowListCORSMiddleware가 붙인다
    return Response(status_code=200)


# ---------------------------------------------
# [추가 설명 / 실전 팁]
# ---------------------------------------------
# 1) 예시 요청
#    - GET    /movies?genre=drama
#    - GET    /movies/dcdd0fad-a94c-4810-8acc-5f108d3b18c3
#    - POST   /movies        (JSON: {"title": "...", "year": 2010, ...})
#    - PATCH  /movies/{id}   (JSON: {"rate": 9.1})
#    - DELETE /movies/{id}
#
# 2) 상태 코드
#    - 등록 검증 실패는 422, 부분 수정 검증 실패는 400
#    - 없는 id는 404 {"message": "Movie not found"} (main.py의 예외 핸들러가 변환)
