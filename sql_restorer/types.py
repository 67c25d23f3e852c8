"""
로그 SQL 복원에 사용되는 타입 정의 모듈

ParamEntry, ExtractionResult 등의 데이터 클래스를 정의합니다.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union


# 치환용 리터럴 (문자열 리터럴 또는 Boolean)
SqlParam = Union[str, bool]


@dataclass
class ParamEntry:
    """파라미터 라인에서 파싱된 값/타입 쌍"""
    value: str                           # 원본 값 (빈 문자열 가능)
    type_tag: str                        # 괄호 포함 타입 태그 (예: "(String)")

    def to_dict(self) -> dict:
        return {"value": self.value, "type": self.type_tag}


@dataclass
class ExtractionResult:
    """로그 추출 결과"""
    template: Optional[str] = None       # ? 플레이스홀더를 포함한 SQL
    params: List[SqlParam] = field(default_factory=list)
    entries: List[ParamEntry] = field(default_factory=list)
    matched_rule: Optional[str] = None   # SQL을 찾은 규칙 이름
    params_line: str = ""                # 선택된 파라미터 라인

    @property
    def found(self) -> bool:
        """SQL 템플릿 발견 여부"""
        return self.template is not None

    @property
    def placeholder_count(self) -> int:
        """템플릿의 ? 개수"""
        return self.template.count("?") if self.template else 0

    def to_dict(self) -> dict:
        """딕셔너리로 변환 (YAML/JSON 출력용)"""
        return {
            "template": self.template,
            "params": list(self.params),
            "entries": [e.to_dict() for e in self.entries],
            "matched_rule": self.matched_rule,
        }


def render_literal(param: SqlParam) -> str:
    """치환에 사용할 텍스트 형태 반환

    Boolean은 SQL 리터럴 true/false (소문자)로 변환합니다.
    """
    if isinstance(param, bool):
        return "true" if param else "false"
    return str(param)
