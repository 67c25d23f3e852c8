"""
프레임워크 로그 SQL 복원 패키지

MyBatis 등의 로그 조각에서 SQL과 바인딩 파라미터를 추출하고,
? 플레이스홀더를 리터럴로 치환한 뒤 sqlglot으로 정렬합니다.

주요 클래스:
- LogExtractor: 로그에서 SQL 템플릿/파라미터 추출
- StatementComposer: 파라미터 치환 및 포맷
- SqlLocateRegistry / LiteralRuleRegistry: 규칙 레지스트리

Example:
    from sql_restorer import LogExtractor, StatementComposer

    result = LogExtractor().extract(log_text)
    if result.found:
        print(StatementComposer().compose(result.template, result.params))

    # 커스텀 리터럴 규칙 추가
    from sql_restorer.rules import LiteralRule

    class BigDecimalRule(LiteralRule):
        name = "big_decimal"
        priority = 70
        keywords = ("BigDecimal",)

        def encode(self, value):
            return value or "NULL"

    extractor = LogExtractor()
    extractor.literal_registry.register(BigDecimalRule())
"""

from .extractor import LogExtractor, parse_mybatis_log
from .composer import StatementComposer, compose_sql, format_raw_sql, substitute_params
from .config import FormatOptions, RestorerConfig, load_config
from .formatter import SqlFormatter
from .entities import decode_html_entities
from .types import ParamEntry, SqlParam, ExtractionResult, render_literal
from .registry import SqlLocateRegistry, LiteralRuleRegistry
from .rules import SqlLocateRule, LiteralRule, RuleMatch

__all__ = [
    # 메인 클래스
    "LogExtractor",
    "StatementComposer",
    "SqlFormatter",

    # 함수형 진입점
    "parse_mybatis_log",
    "compose_sql",
    "format_raw_sql",
    "substitute_params",
    "decode_html_entities",
    "render_literal",

    # 설정
    "FormatOptions",
    "RestorerConfig",
    "load_config",

    # 레지스트리
    "SqlLocateRegistry",
    "LiteralRuleRegistry",

    # 규칙 기본 클래스
    "SqlLocateRule",
    "LiteralRule",
    "RuleMatch",

    # 타입
    "ParamEntry",
    "SqlParam",
    "ExtractionResult",
]
