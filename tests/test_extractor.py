"""
sql_restorer 추출기 테스트

로그에서 SQL 템플릿 탐색, 파라미터 라인 선택, 리터럴 변환을 테스트합니다.
"""

import os
import sys

# 상위 디렉토리를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from sql_restorer import (
    LogExtractor,
    ParamEntry,
    decode_html_entities,
    parse_mybatis_log,
)


SPRING_LOG = (
    "2024-03-15 10:21:33.123 DEBUG 4412 --- [nio-8080-exec-1] c.e.mapper.UserMapper.selectById"
    "  : ==>  Preparing: SELECT id, name FROM users WHERE id = ? AND status = ?\n"
    "2024-03-15 10:21:33.124 DEBUG 4412 --- [nio-8080-exec-1] c.e.mapper.UserMapper.selectById"
    "  : ==> Parameters: 42(Long), ACTIVE(String)\n"
    "2024-03-15 10:21:33.130 DEBUG 4412 --- [nio-8080-exec-1] c.e.mapper.UserMapper.selectById"
    "  : <==      Total: 1\n"
)


class TestHtmlEntities:
    """HTML 엔티티 디코딩 테스트"""

    def test_known_entities(self):
        assert decode_html_entities("a &lt; b &amp;&amp; c &gt; d") == "a < b && c > d"
        assert decode_html_entities("&quot;x&quot; &#39;y&#39; &apos;z&apos;") == "\"x\" 'y' 'z'"
        assert decode_html_entities("a&nbsp;b") == "a b"

    def test_unknown_entity_kept(self):
        assert decode_html_entities("&copy; &foo;") == "&copy; &foo;"


class TestLogExtractor:
    """LogExtractor 테스트"""

    def setup_method(self):
        self.extractor = LogExtractor()

    def test_single_line_preparing(self):
        """한 줄 Preparing/Parameters 로그"""
        result = self.extractor.extract(
            "Preparing: SELECT * FROM t WHERE id = ? Parameters: 5(Integer)"
        )
        assert result.found
        assert result.template == "SELECT * FROM t WHERE id = ?"
        assert result.params == ["5"]
        assert result.matched_rule == "preparing_marker"

    def test_arrow_parameters(self):
        """==> Parameters: 형식, 빈 숫자 값은 NULL"""
        result = self.extractor.extract(
            "==>  Preparing: SELECT * FROM users WHERE name = ? AND age = ?\n"
            "==> Parameters: John(String), (Integer)"
        )
        assert result.template == "SELECT * FROM users WHERE name = ? AND age = ?"
        assert result.params == ["'John'", "NULL"]

    def test_spring_boot_log(self):
        """타임스탬프가 붙은 여러 줄 로그"""
        result = self.extractor.extract(SPRING_LOG)
        assert result.template == "SELECT id, name FROM users WHERE id = ? AND status = ?"
        assert result.params == ["42", "'ACTIVE'"]
        assert result.entries == [
            ParamEntry(value="42", type_tag="(Long)"),
            ParamEntry(value="ACTIVE", type_tag="(String)"),
        ]

    def test_statement_without_parameters(self):
        """Parameters: 가 없으면 파라미터는 비어 있음"""
        result = self.extractor.extract("DEBUG - SELECT * FROM t WHERE id = ?")
        assert result.template == "SELECT * FROM t WHERE id = ?"
        assert result.params == []
        assert result.matched_rule == "bare_statement"

    def test_html_escaped_input(self):
        """HTML 이스케이프된 입력은 디코딩 후 매칭"""
        result = self.extractor.extract("SELECT * FROM t WHERE name = &#39;a&#39;")
        assert result.template == "SELECT * FROM t WHERE name = 'a'"

    def test_html_escaped_comparison(self):
        result = self.extractor.extract(
            "Preparing: SELECT * FROM t WHERE a &lt; ? Parameters: 3(Integer)"
        )
        assert result.template == "SELECT * FROM t WHERE a < ?"
        assert result.params == ["3"]

    @pytest.mark.parametrize("text", [
        "",
        "nothing to see here",
        "==> Parameters: 1(Integer), a(String)",
        "2024-01-01 10:00:00 INFO application started",
    ])
    def test_no_statement(self, text):
        """SQL 키워드가 없으면 template 없음, params 비어 있음"""
        result = self.extractor.extract(text)
        assert not result.found
        assert result.template is None
        assert result.params == []

    def test_none_input(self):
        assert not self.extractor.extract(None).found

    def test_case_insensitive_keywords(self):
        result = self.extractor.extract("preparing: select * from t where id = ?")
        assert result.template == "select * from t where id = ?"

    def test_insert_update_delete(self):
        for sql in (
            "INSERT INTO t (a) VALUES (?)",
            "UPDATE t SET a = ? WHERE id = ?",
            "DELETE FROM t WHERE id = ?",
        ):
            assert self.extractor.extract(f"==>  Preparing: {sql}").template == sql

    def test_stops_at_closing_marker(self):
        result = self.extractor.extract("SELECT count(*) FROM t <==      Total: 1")
        assert result.template == "SELECT count(*) FROM t"

    def test_stops_at_date_stamp(self):
        result = self.extractor.extract("SELECT * FROM t 2024-01-01 10:00:00 next entry")
        assert result.template == "SELECT * FROM t"

    def test_stops_at_log_level_tag(self):
        result = self.extractor.extract("SELECT * FROM t [DEBUG] other")
        assert result.template == "SELECT * FROM t"

    def test_parameters_end_at_log_level_tag(self):
        result = self.extractor.extract(
            "Preparing: SELECT * FROM t WHERE a = ? Parameters: 1(Integer) [DEBUG] 2(Integer)"
        )
        assert result.params == ["1"]

    def test_multiline_statement(self):
        """여러 줄 SQL은 Parameters 줄 앞에서 끝남"""
        result = self.extractor.extract(
            "==>  Preparing: SELECT *\n  FROM t\n  WHERE id = ?\n"
            "==> Parameters: 9(Integer)"
        )
        assert result.template == "SELECT *\n  FROM t\n  WHERE id = ?"
        assert result.params == ["9"]


class TestParamsLineSelection:
    """여러 줄 파라미터 텍스트에서 라인 선택 테스트"""

    def setup_method(self):
        self.extractor = LogExtractor()

    def test_prefers_line_with_known_tag(self):
        result = self.extractor.extract(
            "Preparing: UPDATE t SET a = ? WHERE id = ?\n"
            "Parameters: \nsome trailing noise\nx(String), 7(Integer)\n"
        )
        assert result.template == "UPDATE t SET a = ? WHERE id = ?"
        assert result.params_line == "x(String), 7(Integer)"
        assert result.params == ["'x'", "7"]

    def test_falls_back_to_first_line(self):
        result = self.extractor.extract(
            "Preparing: SELECT * FROM t WHERE v = ?\n"
            "Parameters: 1.50(BigDecimal)\nnoise(Custom)"
        )
        assert result.params_line == "1.50(BigDecimal)"
        assert result.params == ["1.50"]

    def test_custom_type_tags(self):
        extractor = LogExtractor(known_type_tags=("(BigDecimal)",))
        assert extractor.select_params_line("junk\n2.5(BigDecimal)") == "2.5(BigDecimal)"


class TestTokenize:
    """value(Type) 토큰화 테스트"""

    def test_empty_line(self):
        assert LogExtractor.tokenize("") == []

    def test_entries_in_order(self):
        entries = LogExtractor.tokenize("a(String), (Integer), 2024-01-01(Date)")
        assert [e.value for e in entries] == ["a", "", "2024-01-01"]
        assert [e.type_tag for e in entries] == ["(String)", "(Integer)", "(Date)"]

    def test_unparseable_line(self):
        assert LogExtractor.tokenize("no types here") == []


class TestTypeMapping:
    """타입 태그별 리터럴 변환 테스트"""

    @pytest.mark.parametrize("params_text, expected", [
        ("5(Integer)", "5"),
        ("(Integer)", "NULL"),
        ("John(String)", "'John'"),
        ("(String)", "''"),
        ("true(Boolean)", True),
        ("TRUE(Boolean)", True),
        ("1(Boolean)", False),
        ("(Boolean)", False),
        ("2024-01-01 10:00:00(Timestamp)", "'2024-01-01 10:00:00'"),
        ("2024-01-01(Date)", "'2024-01-01'"),
        ("12345678901(Long)", "12345678901"),
        ("3.14(Double)", "3.14"),
        ("(Custom)", "NULL"),
    ])
    def test_literal(self, params_text, expected):
        result = LogExtractor().extract(
            f"Preparing: SELECT * FROM t WHERE c = ? Parameters: {params_text}"
        )
        assert result.params == [expected]
        assert type(result.params[0]) is type(expected)


class TestParseMybatisLog:
    """함수형 진입점 테스트"""

    def test_returns_tuple(self):
        template, params = parse_mybatis_log(
            "Preparing: DELETE FROM t WHERE id = ? Parameters: 1(Long)"
        )
        assert template == "DELETE FROM t WHERE id = ?"
        assert params == ["1"]

    def test_no_match(self):
        assert parse_mybatis_log("hello") == (None, [])
