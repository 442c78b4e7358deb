# ------------------------------------------------------------
# validation.py - 영화 요청 바디 검증 (전체/부분)
# ------------------------------------------------------------

from typing import Any, Dict, Iterable, NamedTuple, Optional

from pydantic import ValidationError

from .schemas import MovieIn, MovieUpdate

GENRE_MESSAGE = "Movie genre must be an array of enum genre"

# (필드, pydantic 오류 타입) -> 클라이언트에게 보여줄 메시지
FIELD_MESSAGES = {
    ("title", "missing"): "Movie title is required",
    ("title", "string_type"): "Movie title must be a string",
    ("genre", "missing"): "Movie genre is required",
    ("genre", "list_type"): GENRE_MESSAGE,
    ("genre", "enum"): GENRE_MESSAGE,
}


class ValidationResult(NamedTuple):
    data: Optional[Dict[str, Any]] = None    # 정규화된 영화 dict
    error: Optional[Dict[str, str]] = None   # 필드명 -> 메시지

    @property
    def success(self) -> bool:
        return self.error is None


def _message_for(field: str, err: Dict[str, Any]) -> str:
    custom = FIELD_MESSAGES.get((field, err["type"]))
    if custom:
        return custom
    if err["type"] == "value_error":
        # "Value error, ..." 접두어 없이 원래 메시지만 노출
        return str((err.get("ctx") or {}).get("error", err["msg"]))
    return err["msg"]


def format_errors(errors: Iterable[Dict[str, Any]]) -> Dict[str, str]:
    """
    pydantic/FastAPI 오류 목록을 {필드: 메시지} 맵으로 변환합니다.

    - 필드당 첫 번째 오류만 유지
    - FastAPI 요청 오류의 "body" 위치 접두어는 제거
    - 필드를 특정할 수 없는 오류(바디가 객체가 아님, JSON 파싱 실패)는 "body" 키로 보고
    """
    messages: Dict[str, str] = {}
    for err in errors:
        loc = list(err.get("loc") or ())
        if loc and loc[0] == "body":
            loc = loc[1:]
        field = loc[0] if loc and isinstance(loc[0], str) else "body"
        if field in messages:
            continue
        messages[field] = _message_for(field, err)
    return messages


def validate_movie(obj: Any) -> ValidationResult:
    """영화 등록용 전체 검증. 성공 시 rate 기본값(0)이 채워진 dict를 돌려준다."""
    try:
        movie = MovieIn.model_validate(obj)
    except ValidationError as exc:
        return ValidationResult(error=format_errors(exc.errors()))
    return ValidationResult(data=movie.model_dump(mode="json"))


def validate_partial_movie(obj: Any) -> ValidationResult:
    """영화 부분 수정용 검증. 요청에 포함된 필드만 결과에 담긴다."""
    try:
        movie = MovieUpdate.model_validate(obj)
    except ValidationError as exc:
        return ValidationResult(error=format_errors(exc.errors()))
    return ValidationResult(data=movie.model_dump(mode="json", exclude_unset=True))
