"""
파라미터 리터럴 변환 규칙 모듈

타입 태그(예: "(String)")에 따라 값을 SQL 리터럴로 변환합니다.
타입 태그는 부분 문자열(대소문자 구분)로 판별하며,
인식하지 못한 타입은 숫자 규칙으로 처리됩니다.
"""

from .base import LiteralRule
from ..types import SqlParam


class StringLiteralRule(LiteralRule):
    """String 타입: 작은따옴표로 감쌈 (빈 값은 '')"""

    keywords = ("String",)

    @property
    def name(self) -> str:
        return "string"

    @property
    def priority(self) -> int:
        return 100

    def encode(self, value: str) -> SqlParam:
        if value == "":
            return "''"
        return f"'{value}'"


class DateTimeLiteralRule(LiteralRule):
    """Timestamp/Date 타입: 형식 검증 없이 작은따옴표로 감쌈"""

    keywords = ("Timestamp", "Date")

    @property
    def name(self) -> str:
        return "datetime"

    @property
    def priority(self) -> int:
        return 90

    def encode(self, value: str) -> SqlParam:
        return f"'{value}'"


class BooleanLiteralRule(LiteralRule):
    """Boolean 타입: 'true'(대소문자 무시)만 True, 그 외는 False"""

    keywords = ("Boolean",)

    @property
    def name(self) -> str:
        return "boolean"

    @property
    def priority(self) -> int:
        return 80

    def encode(self, value: str) -> SqlParam:
        return value.lower() == "true"


class NumericLiteralRule(LiteralRule):
    """숫자 및 미인식 타입 (fallback): 빈 값은 NULL, 그 외는 원본 그대로"""

    @property
    def name(self) -> str:
        return "numeric"

    @property
    def priority(self) -> int:
        return 0

    def applies(self, type_tag: str) -> bool:
        return True

    def encode(self, value: str) -> SqlParam:
        if value == "":
            return "NULL"
        return value


DEFAULT_LITERAL_RULES = [
    StringLiteralRule(),
    DateTimeLiteralRule(),
    BooleanLiteralRule(),
    NumericLiteralRule(),
]
