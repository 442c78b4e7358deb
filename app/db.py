# -------------------------------------------------------
# db.py - 메모리 영화 저장소 및 FastAPI 의존성 정의
# -------------------------------------------------------

import json
import logging
import os
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .models import Movie

# .env 파일의 환경변수를 현재 프로세스 환경에 주입
load_dotenv()

logger = logging.getLogger(__name__)

# -----------------------------
# 시드 데이터 경로 (기본값: 패키지에 포함된 data/movies.json)
# -----------------------------
DEFAULT_SEED_PATH = Path(__file__).resolve().parent / "data" / "movies.json"
MOVIES_SEED_PATH = os.getenv("MOVIES_SEED_PATH", str(DEFAULT_SEED_PATH))


class MovieStore:
    """
    프로세스 수명 동안만 유지되는 순서 있는 영화 목록.

    - 조회는 선형 탐색, 추가는 맨 뒤에 append
    - 수정은 같은 위치에서 필드 병합(merge), 삭제는 해당 위치 제거
    - reset()은 처음 시드된 상태로 되돌림 (테스트용)
    """

    def __init__(self, movies: Optional[List[Dict[str, Any]]] = None):
        # 시드 원본은 dict 사본으로 보관해 reset() 때마다 새 레코드를 만든다
        self._seed = [dict(m) for m in (movies or [])]
        self.movies: List[Movie] = []
        self.reset()

    @classmethod
    def load(cls, path) -> "MovieStore":
        # JSON 배열(각 항목이 자기 id를 가진 영화 객체)을 읽어 저장소 생성
        with open(path, encoding="utf-8") as fp:
            data = json.load(fp)
        logger.info("Seeded %d movies from %s", len(data), path)
        return cls(data)

    def reset(self) -> None:
        self.movies = [Movie.from_dict(m) for m in self._seed]

    def all(self, genre: Optional[str] = None) -> List[Movie]:
        if not genre:
            return list(self.movies)
        # 장르 비교는 대소문자 무시 ("action" == "Action")
        wanted = genre.lower()
        return [m for m in self.movies if any(g.lower() == wanted for g in m.genre)]

    def _index(self, movie_id: str) -> int:
        for i, m in enumerate(self.movies):
            if m.id == movie_id:
                return i
        return -1

    def get(self, movie_id: str) -> Optional[Movie]:
        idx = self._index(movie_id)
        return self.movies[idx] if idx >= 0 else None

    def add(self, data: Dict[str, Any]) -> Movie:
        # 클라이언트가 id를 보내더라도 항상 새 UUID4를 발급
        movie = Movie.from_dict({**data, "id": str(uuid.uuid4())})
        self.movies.append(movie)
        logger.info("Created movie %s (%s)", movie.id, movie.title)
        return movie

    def update(self, movie_id: str, changes: Dict[str, Any]) -> Optional[Movie]:
        idx = self._index(movie_id)
        if idx < 0:
            return None
        current = self.movies[idx].to_dict()
        # id는 병합 대상에서 제외
        current.update({k: v for k, v in changes.items() if k != "id"})
        self.movies[idx] = Movie.from_dict(current)
        logger.info("Updated movie %s fields=%s", movie_id, sorted(changes))
        return self.movies[idx]

    def remove(self, movie_id: str) -> bool:
        idx = self._index(movie_id)
        if idx < 0:
            return False
        del self.movies[idx]
        logger.info("Deleted movie %s", movie_id)
        return True


# 애플리케이션 전역 저장소 (import 시점에 시드)
store = MovieStore.load(MOVIES_SEED_PATH)


def get_store() -> MovieStore:
    """
    FastAPI 의존성 주입용 저장소 제공자

    사용법:
      @router.get("/movies")
      def handler(store: MovieStore = Depends(get_store)):
          return store.all()

    테스트에서는 app.dependency_overrides[get_store]로 새 저장소를 주입한다.
    """
    return store


# -------------------------------------------------------
# [추가 설명 / 실전 팁]
# -------------------------------------------------------
# 1) 영속성 없음:
#    - 프로세스를 재시작하면 시드 상태로 돌아갑니다.
#    - MOVIES_SEED_PATH로 다른 JSON 파일을 지정할 수 있습니다.
#
# 2) 동시성:
#    - 별도 잠금이 없으므로 단일 워커(uvicorn 기본값)로 실행하세요.
#      워커마다 독립된 목록을 갖게 되어 데이터가 갈라집니다.
