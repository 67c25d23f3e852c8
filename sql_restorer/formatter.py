"""
SQL 포맷터 모듈

sqlglot을 사용하여 SQL을 정렬합니다.
파싱 실패 시 sqlglot 예외를 그대로 전달하며, 복구는 호출자(composer) 책임입니다.
"""

import sqlglot

from .config import FormatOptions


class SqlFormatter:
    """
    sqlglot 기반 SQL pretty-printer

    Example:
        formatter = SqlFormatter(FormatOptions(dialect="mysql"))
        formatter.format("select * from t where id = 5")
        # SELECT
        #   *
        # FROM t
        # WHERE
        #   id = 5
    """

    STATEMENT_SEPARATOR = ";\n\n"

    def __init__(self, options: FormatOptions = None):
        self.options = options or FormatOptions()
        self.options.validate()

    def format(self, sql: str) -> str:
        """
        SQL 포맷

        Args:
            sql: SQL 문자열

        Returns:
            포맷된 SQL (결과가 비면 입력 그대로)

        Raises:
            sqlglot.errors.SqlglotError: 파싱/토큰화 실패
        """
        dialect = self.options.dialect or None
        statements = sqlglot.transpile(
            sql,
            read=dialect,
            write=dialect,
            pretty=self.options.pretty,
            pad=self.options.indent,
            indent=self.options.indent,
        )
        statements = [s for s in statements if s]
        if not statements:
            return sql
        return self.STATEMENT_SEPARATOR.join(statements)
