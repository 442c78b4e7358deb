from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from pydantic import (
    AnyUrl,
    BaseModel,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
)

# 포스터 URL 형식 검사용 어댑터 (값 자체는 문자열 그대로 저장)
_url_adapter = TypeAdapter(AnyUrl)


# ------------------------------------------------------------
# Genre: 허용되는 장르 목록 (대소문자 구분)
# ------------------------------------------------------------
class Genre(str, Enum):
    ACTION = "Action"
    ADVENTURE = "Adventure"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    MUSICAL = "Musical"
    ROMANCE = "Romance"
    SCI_FI = "Sci-Fi"


# ------------------------------------------------------------
# MovieRules: 전체/부분 검증 스키마가 공유하는 필드 규칙
# ------------------------------------------------------------
class MovieRules(BaseModel):

    @field_validator("year", "duration", mode="before", check_fields=False)
    @classmethod
    def integral_float_to_int(cls, v):
        # JSON 숫자는 정수/실수 구분이 없으므로 2001.0 같은 값은 정수로 취급
        # (bool은 float가 아니므로 그대로 strict 검사에서 거부됨)
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v

    @field_validator("year", check_fields=False)
    @classmethod
    def year_not_in_future(cls, v):
        # 상한은 "올해"라서 Field(le=...) 대신 호출 시점에 계산
        current = date.today().year
        if v is not None and v > current:
            raise ValueError(f"Input should be less than or equal to {current}")
        return v

    @field_validator("poster", check_fields=False)
    @classmethod
    def poster_is_url(cls, v):
        if v is None:
            return v
        try:
            _url_adapter.validate_python(v)
        except ValidationError:
            raise ValueError("Movie poster must be a valid URL")
        return v


# ------------------------------------------------------------
# MovieIn: 영화 등록(POST) 요청 바디 스키마
#  - 타입은 strict: "1999" 같은 문자열 숫자, true/false는 숫자로 인정하지 않음
#  - 선언되지 않은 키는 무시(결과에서 제거)
# ------------------------------------------------------------
class MovieIn(MovieRules):
    title: StrictStr
    year: StrictInt = Field(ge=1900)
    director: StrictStr
    duration: StrictInt = Field(gt=0)
    genre: List[Genre]
    poster: StrictStr
    rate: float = Field(0, ge=0, le=10, strict=True)


# ------------------------------------------------------------
# MovieUpdate: 영화 부분 수정(PATCH) 요청 바디 스키마
#  - 모든 필드 선택, 기본값 적용 없음
#  - 명시적인 null은 거부
# ------------------------------------------------------------
class MovieUpdate(MovieRules):
    title: Optional[StrictStr] = None
    year: Optional[StrictInt] = Field(None, ge=1900)
    director: Optional[StrictStr] = None
    duration: Optional[StrictInt] = Field(None, gt=0)
    genre: Optional[List[Genre]] = None
    poster: Optional[StrictStr] = None
    rate: Optional[float] = Field(None, ge=0, le=10, strict=True)

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, v):
        # 기본값(None)은 검증되지 않으므로 여기 걸리는 None은 클라이언트가 보낸 null
        if v is None:
            raise ValueError("Input should not be null")
        return v


# ------------------------------------------------------------
# MovieOut: 클라이언트로 내보낼 영화 응답 스키마
# ------------------------------------------------------------
class MovieOut(BaseModel):
    id: str
    title: str
    year: int
    director: str
    duration: int
    poster: str
    genre: List[str]
    rate: float = 0

    class Config:
        # Movie 데이터클래스 인스턴스로부터 필드 맵핑 허용
        from_attributes = True


# ------------------------------------------------------------
# ErrorOut / MessageOut: 오류/안내 응답 스키마 (문서화용)
# ------------------------------------------------------------
class ErrorOut(BaseModel):
    error: Dict[str, str]   # 필드명 -> 오류 메시지


class MessageOut(BaseModel):
    message: str
