"""
규칙 기본 클래스 모듈

SQL 위치 탐색 및 파라미터 리터럴 변환 규칙의 기본 인터페이스를 정의합니다.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict
from dataclasses import dataclass, field
import re

from ..types import SqlParam


@dataclass
class RuleMatch:
    """규칙 매칭 결과

    Attributes:
        matched: 매칭 성공 여부
        value: 매칭된 값 (예: 로그에서 찾은 SQL 구간)
        rule_name: 매칭한 규칙 이름
        metadata: 추가 메타데이터 (예: 매칭 위치)
    """
    matched: bool
    value: Any = None
    rule_name: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)


class SqlLocateRule(ABC):
    """로그에서 SQL 구간을 찾는 규칙 기본 클래스

    새로운 로그 포맷을 지원하려면:
    1. 이 클래스를 상속
    2. name, priority, pattern 속성 정의
    3. match() 메서드 구현 (선택적, 기본은 pattern 검색)
    4. SqlLocateRegistry에 등록

    Example:
        class ExecutingRule(SqlLocateRule):
            name = "executing"
            priority = 80
            pattern = re.compile(r'Executing:\\s*SELECT[\\s\\S]*?(?=\\Z)', re.IGNORECASE)

        registry.register(ExecutingRule())
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """규칙 이름 (예: 'preparing_marker')"""
        pass

    @property
    @abstractmethod
    def priority(self) -> int:
        """우선순위 (높을수록 먼저 검사)

        권장 범위:
        - 100: 프레임워크 마커가 있는 구체적인 패턴
        - 50: 마커 없이 SQL 키워드만 보는 fallback
        """
        pass

    @property
    @abstractmethod
    def pattern(self) -> re.Pattern:
        """검색 패턴 (정규식)"""
        pass

    def match(self, text: str) -> RuleMatch:
        """로그 텍스트에 규칙 적용

        Args:
            text: HTML 디코딩된 로그 텍스트

        Returns:
            RuleMatch: value에 공백 제거된 SQL 구간
        """
        found = self.pattern.search(text)
        if found:
            return RuleMatch(
                matched=True,
                value=found.group(0).strip(),
                rule_name=self.name,
                metadata={"start": found.start(), "end": found.end()},
            )
        return RuleMatch(matched=False, rule_name=self.name)


class LiteralRule(ABC):
    """파라미터 값을 SQL 리터럴로 바꾸는 규칙 기본 클래스

    타입 태그는 닫힌 목록이 아니므로 부분 문자열 포함 여부로 판단합니다.

    Example:
        class UuidRule(LiteralRule):
            name = "uuid"
            priority = 95
            keywords = ("UUID",)

            def encode(self, value):
                return f"'{value}'"
    """

    # 타입 태그에 포함되면 이 규칙이 적용되는 키워드 (대소문자 구분)
    keywords: tuple = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """규칙 이름 (예: 'string', 'boolean')"""
        pass

    @property
    @abstractmethod
    def priority(self) -> int:
        """우선순위 (높을수록 먼저 검사)"""
        pass

    def applies(self, type_tag: str) -> bool:
        """타입 태그에 규칙 적용 여부"""
        return any(keyword in type_tag for keyword in self.keywords)

    @abstractmethod
    def encode(self, value: str) -> SqlParam:
        """값을 리터럴로 변환

        Args:
            value: 공백 제거된 원본 값 (빈 문자열 가능)

        Returns:
            치환에 사용할 리터럴
        """
        pass
