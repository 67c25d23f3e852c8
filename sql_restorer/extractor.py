"""
로그 SQL 추출기 모듈

MyBatis 등 DB 접근 프레임워크 로그에서 SQL 템플릿과
바인딩 파라미터를 추출합니다.

처리 순서:
1. HTML 엔티티 디코딩
2. 우선순위 규칙으로 SQL 구간 탐색 (Preparing: → fallback)
3. Preparing: 접두어 제거
4. Parameters: 라인 탐색 및 여러 줄일 때 라인 선택
5. value(Type) 토큰화 후 타입별 리터럴 변환
"""

import re
from typing import List, Optional, Sequence, Tuple

from .config import DEFAULT_TYPE_TAGS
from .entities import decode_html_entities
from .logger import get_logger
from .registry import SqlLocateRegistry, LiteralRuleRegistry
from .types import ExtractionResult, ParamEntry

logger = get_logger("extractor")


# Preparing: 접두어 (첫 번째 마커까지)
PREPARING_MARKER = re.compile(r'Preparing:', re.IGNORECASE)
PREPARING_PREFIX = re.compile(r'.*?Preparing:\s*', re.IGNORECASE)

# ==> Parameters: 이후 다음 날짜 스탬프 줄, <==, 로그 레벨 태그, 입력 끝까지
PARAMS_PATTERN = re.compile(
    r'(?:==>)?\s*Parameters:([\s\S]*?)'
    r'(?=\n.*?\d{4}-\d{2}-\d{2}|<==|\[DEBUG\]|\[INFO\]|\Z)',
    re.IGNORECASE
)

# value(Type) 형태, 쉼표 또는 끝으로 종료
PARAM_TOKEN_PATTERN = re.compile(r'([^,()]*?)(\([^)]+\))(?=,|\Z)')


class LogExtractor:
    """
    로그 텍스트에서 SQL 템플릿과 파라미터를 추출하는 추출기

    추출은 예외를 던지지 않습니다. SQL을 찾지 못하면 template이 None,
    파라미터를 찾지 못하면 params가 빈 리스트입니다.

    Example:
        extractor = LogExtractor()
        result = extractor.extract(
            "Preparing: SELECT * FROM t WHERE id = ? Parameters: 5(Integer)"
        )
        result.template  # "SELECT * FROM t WHERE id = ?"
        result.params    # ["5"]
    """

    def __init__(
        self,
        locate_registry: SqlLocateRegistry = None,
        literal_registry: LiteralRuleRegistry = None,
        known_type_tags: Sequence[str] = DEFAULT_TYPE_TAGS,
    ):
        if locate_registry is None:
            locate_registry = SqlLocateRegistry()
            locate_registry.load_defaults()
        if literal_registry is None:
            literal_registry = LiteralRuleRegistry()
            literal_registry.load_defaults()

        self.locate_registry = locate_registry
        self.literal_registry = literal_registry
        self.known_type_tags = tuple(known_type_tags)

    def extract(self, raw_log: str) -> ExtractionResult:
        """
        로그에서 SQL 템플릿과 파라미터 추출

        Args:
            raw_log: 원본 로그 텍스트

        Returns:
            ExtractionResult
        """
        text = decode_html_entities(raw_log or "")

        located = self.locate_registry.locate(text)
        if not located.matched:
            logger.info("로그에서 SQL 구문을 찾지 못했습니다")
            return ExtractionResult()

        template = self.strip_prefix(located.value)

        params_line = self.select_params_line(self.find_params_text(text))
        entries = self.tokenize(params_line)
        params = [
            self.literal_registry.encode(entry.value, entry.type_tag)
            for entry in entries
        ]

        logger.debug(
            f"SQL 추출 완료: rule={located.rule_name}, "
            f"placeholders={template.count('?')}, params={len(params)}"
        )

        return ExtractionResult(
            template=template,
            params=params,
            entries=entries,
            matched_rule=located.rule_name,
            params_line=params_line,
        )

    @staticmethod
    def strip_prefix(sql: str) -> str:
        """'Preparing:' 마커까지 제거 후 공백 정리"""
        if PREPARING_MARKER.search(sql):
            sql = PREPARING_PREFIX.sub('', sql, count=1)
        return sql.strip()

    @staticmethod
    def find_params_text(text: str) -> str:
        """Parameters: 뒤의 파라미터 텍스트 (없으면 빈 문자열)"""
        match = PARAMS_PATTERN.search(text)
        return match.group(1).strip() if match else ""

    def select_params_line(self, params_text: str) -> str:
        """
        여러 줄일 경우 실제 파라미터 라인 선택

        알려진 타입 태그를 포함한 첫 줄을 고르고,
        없으면 첫 줄을 그대로 사용합니다.
        """
        if '\n' not in params_text:
            return params_text

        lines = params_text.split('\n')
        selected = next(
            (line for line in lines if self._has_known_tag(line)),
            lines[0],
        )
        logger.debug(f"파라미터 라인 선택: {selected.strip()[:80]}")
        return selected.strip()

    def _has_known_tag(self, line: str) -> bool:
        return any(tag in line for tag in self.known_type_tags)

    @staticmethod
    def tokenize(params_line: str) -> List[ParamEntry]:
        """
        'value(Type), value(Type)' 형태를 ParamEntry 목록으로 분해

        값은 쉼표와 괄호를 제외한 문자열(빈 값 가능), 타입은 괄호 한 쌍 안의 문자열입니다.
        """
        if not params_line:
            return []
        return [
            ParamEntry(value=m.group(1).strip(), type_tag=m.group(2).strip())
            for m in PARAM_TOKEN_PATTERN.finditer(params_line)
        ]


_default_extractor: Optional[LogExtractor] = None


def parse_mybatis_log(raw_log: str) -> Tuple[Optional[str], list]:
    """
    기본 설정으로 로그 파싱

    Returns:
        (template, params) 튜플
    """
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = LogExtractor()
    result = _default_extractor.extract(raw_log)
    return result.template, result.params
