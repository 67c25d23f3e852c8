"""
SQL 조합기 모듈

SQL 템플릿의 ? 플레이스홀더를 파라미터 리터럴로 순서대로 치환한 뒤
외부 포맷터로 정렬합니다. 포맷터 실패 시 치환된 원문을 반환합니다.
"""

import re
from typing import Iterable, List

from sqlglot.errors import SqlglotError

from .config import FormatOptions
from .formatter import SqlFormatter
from .logger import logger
from .types import SqlParam, render_literal


PLACEHOLDER = "?"
PLACEHOLDER_PATTERN = re.compile(re.escape(PLACEHOLDER))


def substitute_params(template: str, params: Iterable[SqlParam]) -> str:
    """
    ? 플레이스홀더를 파라미터로 순서대로 치환

    파라미터가 부족하면 남은 ?는 그대로 두고, 남는 파라미터는 무시합니다.

    Args:
        template: ? 플레이스홀더를 포함한 SQL
        params: 리터럴 목록

    Returns:
        치환된 SQL
    """
    remaining = iter(list(params))

    def replace(match):
        param = next(remaining, None)
        if param is None:
            return match.group(0)
        return render_literal(param)

    return PLACEHOLDER_PATTERN.sub(replace, template)


class StatementComposer:
    """
    파라미터 치환 + 포맷 조합기

    Example:
        composer = StatementComposer()
        composer.compose("SELECT * FROM t WHERE id = ?", ["5"])
        composer.format_raw("select 1")
    """

    def __init__(self, formatter: SqlFormatter = None, options: FormatOptions = None):
        self.formatter = formatter or SqlFormatter(options)

    def compose(self, template: str, params: List[SqlParam], format_sql: bool = True) -> str:
        """
        템플릿에 파라미터를 치환하고 포맷

        Args:
            template: SQL 템플릿
            params: 리터럴 목록
            format_sql: False면 치환만 수행

        Returns:
            최종 SQL
        """
        placeholders = template.count(PLACEHOLDER)
        if placeholders != len(params):
            logger.debug(
                f"플레이스홀더/파라미터 수 불일치: placeholders={placeholders}, params={len(params)}"
            )

        substituted = substitute_params(template, params)
        if not format_sql:
            return substituted
        return self.format_raw(substituted)

    def format_raw(self, sql: str) -> str:
        """
        완성된 SQL을 포맷 (치환 없음)

        포맷터가 실패하면 경고를 남기고 입력을 그대로 반환합니다.
        """
        try:
            return self.formatter.format(sql)
        except SqlglotError as e:
            logger.warning(f"SQL 포맷 실패, 원문을 반환합니다: {e}")
            return sql


_default_composer = None


def _get_default_composer() -> StatementComposer:
    global _default_composer
    if _default_composer is None:
        _default_composer = StatementComposer()
    return _default_composer


def compose_sql(template: str, params: List[SqlParam]) -> str:
    """기본 설정으로 치환 + 포맷"""
    return _get_default_composer().compose(template, params)


def format_raw_sql(sql: str) -> str:
    """기본 설정으로 포맷만 수행"""
    return _get_default_composer().format_raw(sql)
