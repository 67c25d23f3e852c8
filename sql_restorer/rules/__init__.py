"""
규칙 패키지

SQL 위치 탐색 및 파라미터 리터럴 변환에 사용되는 규칙들을 정의합니다.
"""

from .base import SqlLocateRule, LiteralRule, RuleMatch
from .locate_rules import DEFAULT_SQL_LOCATE_RULES
from .literal_rules import DEFAULT_LITERAL_RULES

__all__ = [
    "SqlLocateRule",
    "LiteralRule",
    "RuleMatch",
    "DEFAULT_SQL_LOCATE_RULES",
    "DEFAULT_LITERAL_RULES",
]
