"""
SQL 위치 탐색 규칙 모듈

로그 노이즈 사이에서 SQL 구문을 찾는 규칙들을 정의합니다.
우선순위가 높은 규칙(더 구체적인 앵커)이 먼저 검사됩니다.
"""

import re
from .base import SqlLocateRule


# 문장 시작 키워드
STATEMENT_KEYWORDS = r'(?:SELECT|INSERT|UPDATE|DELETE)'

# 날짜 스탬프 (YYYY-MM-DD)
DATE_STAMP = r'\d{4}-\d{2}-\d{2}'


class PreparingMarkerRule(SqlLocateRule):
    """'Preparing:' 마커 뒤의 SQL 규칙

    다음 중 가장 먼저 나오는 위치에서 끝납니다:
    - Parameters: 가 있는 다음 줄의 개행
    - ==> ... Parameters:
    - Parameters: (한 줄 로그)
    - <==
    - 날짜 스탬프
    - 입력 끝
    """

    @property
    def name(self) -> str:
        return "preparing_marker"

    @property
    def priority(self) -> int:
        return 100

    @property
    def pattern(self) -> re.Pattern:
        return re.compile(
            r'Preparing:\s*' + STATEMENT_KEYWORDS +
            r'[\s\S]*?(?=\n.*?Parameters:|==>.*?Parameters:|Parameters:|<==|'
            + DATE_STAMP + r'|\Z)',
            re.IGNORECASE
        )


class BareStatementRule(SqlLocateRule):
    """마커 없이 SQL 키워드로 시작하는 구문 규칙 (fallback)"""

    @property
    def name(self) -> str:
        return "bare_statement"

    @property
    def priority(self) -> int:
        return 50

    @property
    def pattern(self) -> re.Pattern:
        return re.compile(
            STATEMENT_KEYWORDS +
            r'[\s\S]*?(?=Parameters:|==>|<==|' + DATE_STAMP +
            r'|\[DEBUG\]|\[INFO\]|\Z)',
            re.IGNORECASE
        )


DEFAULT_SQL_LOCATE_RULES = [
    PreparingMarkerRule(),
    BareStatementRule(),
]
