"""
규칙 레지스트리 모듈

SQL 위치 탐색 및 리터럴 변환 규칙을 등록하고 관리합니다.
"""

from typing import List, Dict, Any

from .logger import logger
from .rules.base import SqlLocateRule, LiteralRule, RuleMatch
from .rules.locate_rules import DEFAULT_SQL_LOCATE_RULES
from .rules.literal_rules import DEFAULT_LITERAL_RULES, NumericLiteralRule
from .types import SqlParam


class SqlLocateRegistry:
    """SQL 위치 탐색 규칙 레지스트리

    규칙은 우선순위 순서로 검사되며, 첫 번째 매칭이 채택됩니다.

    Example:
        registry = SqlLocateRegistry()
        registry.load_defaults()

        result = registry.locate("==>  Preparing: SELECT * FROM t")
        print(result.value)  # "Preparing: SELECT * FROM t"
    """

    def __init__(self):
        self._rules: List[SqlLocateRule] = []

    def register(self, rule: SqlLocateRule) -> None:
        """규칙 등록

        등록 후 우선순위로 자동 정렬됩니다.
        """
        self._rules.append(rule)
        self._sort_rules()
        logger.debug(f"Registered SQL locate rule: {rule.name} (priority: {rule.priority})")

    def register_many(self, rules: List[SqlLocateRule]) -> None:
        """여러 규칙 등록"""
        self._rules.extend(rules)
        self._sort_rules()
        logger.debug(f"Registered {len(rules)} SQL locate rules")

    def _sort_rules(self) -> None:
        """우선순위로 규칙 정렬 (높은 것 먼저)"""
        self._rules.sort(key=lambda r: r.priority, reverse=True)

    def load_defaults(self) -> None:
        """기본 규칙 로드"""
        self.register_many(DEFAULT_SQL_LOCATE_RULES)

    def clear(self) -> None:
        """모든 규칙 제거"""
        self._rules.clear()

    def locate(self, text: str) -> RuleMatch:
        """SQL 구간 탐색

        Args:
            text: HTML 디코딩된 로그 텍스트

        Returns:
            RuleMatch: 매칭 결과 (매칭 없으면 matched=False)
        """
        for rule in self._rules:
            try:
                result = rule.match(text)
            except Exception as e:
                logger.warning(f"Rule {rule.__class__.__name__} failed: {e}")
                continue
            if result.matched:
                logger.debug(f"SQL located by {rule.name}")
                return result

        return RuleMatch(matched=False)

    def list_rules(self) -> List[Dict[str, Any]]:
        """등록된 규칙 목록 반환"""
        return [
            {
                'name': r.name,
                'priority': r.priority,
                'class': r.__class__.__name__
            }
            for r in self._rules
        ]

    @property
    def rule_count(self) -> int:
        """등록된 규칙 수"""
        return len(self._rules)


class LiteralRuleRegistry:
    """리터럴 변환 규칙 레지스트리

    타입 태그에 적용되는 첫 번째 규칙으로 값을 변환합니다.
    적용되는 규칙이 없으면 숫자 규칙(NULL/원본 값)으로 처리합니다.

    Example:
        registry = LiteralRuleRegistry()
        registry.load_defaults()

        registry.encode("John", "(String)")  # "'John'"
        registry.encode("", "(Integer)")     # "NULL"
    """

    def __init__(self):
        self._rules: List[LiteralRule] = []
        self._fallback = NumericLiteralRule()

    def register(self, rule: LiteralRule) -> None:
        """규칙 등록"""
        self._rules.append(rule)
        self._sort_rules()
        logger.debug(f"Registered literal rule: {rule.name} (priority: {rule.priority})")

    def register_many(self, rules: List[LiteralRule]) -> None:
        """여러 규칙 등록"""
        self._rules.extend(rules)
        self._sort_rules()
        logger.debug(f"Registered {len(rules)} literal rules")

    def _sort_rules(self) -> None:
        self._rules.sort(key=lambda r: r.priority, reverse=True)

    def load_defaults(self) -> None:
        """기본 규칙 로드"""
        self.register_many(DEFAULT_LITERAL_RULES)

    def clear(self) -> None:
        """모든 규칙 제거"""
        self._rules.clear()

    def find_rule(self, type_tag: str) -> LiteralRule:
        """타입 태그에 적용할 규칙 반환"""
        for rule in self._rules:
            if rule.applies(type_tag):
                return rule
        return self._fallback

    def encode(self, value: str, type_tag: str) -> SqlParam:
        """값을 타입 태그에 맞는 리터럴로 변환

        Args:
            value: 공백 제거된 원본 값
            type_tag: 타입 태그 (예: "(Integer)")

        Returns:
            치환용 리터럴
        """
        return self.find_rule(type_tag).encode(value)

    def list_rules(self) -> List[Dict[str, Any]]:
        """등록된 규칙 목록 반환"""
        return [
            {
                'name': r.name,
                'priority': r.priority,
                'class': r.__class__.__name__
            }
            for r in self._rules
        ]

    @property
    def rule_count(self) -> int:
        """등록된 규칙 수"""
        return len(self._rules)
