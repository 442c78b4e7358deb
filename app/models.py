# ------------------------------------------------------------
# models.py - 메모리 저장소에 보관되는 영화 레코드 정의
# ------------------------------------------------------------

from dataclasses import dataclass, field, fields, asdict
from typing import Any, Dict, List


# ------------------------------
# Movie: 영화 레코드 (메모리 "테이블"의 한 행)
# ------------------------------
@dataclass
class Movie:
    id: str            # UUID4 문자열. 생성 시 저장소가 발급
    title: str
    year: int          # 개봉 연도 (1900 ~ 올해)
    director: str
    duration: int      # 상영 시간(분), 양의 정수
    poster: str        # 포스터 이미지 URL
    genre: List[str] = field(default_factory=list)
    rate: float = 0    # 평점 0 ~ 10

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Movie":
        # 시드 JSON/검증 결과에 모르는 키가 섞여 있어도 선언된 필드만 사용
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        values["genre"] = list(values.get("genre") or [])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
