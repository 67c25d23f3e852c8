"""
SQL 복원기 설정 모듈

FormatOptions, RestorerConfig 클래스와 YAML/환경 변수 로딩을 제공합니다.

YAML 예시:
    format:
      dialect: mysql
      indent_style: standard
      indent: 4
    known_type_tags: ["(Integer)", "(String)", "(BigDecimal)"]
    log_level: INFO
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Tuple

import sqlglot
import yaml

from .logger import logger


# 여러 줄 파라미터 중 실제 파라미터 라인 판별용 타입 태그
DEFAULT_TYPE_TAGS: Tuple[str, ...] = (
    "(Integer)",
    "(Long)",
    "(Date)",
    "(String)",
    "(Boolean)",
    "(Timestamp)",
)

KEYWORD_CASES = ("upper",)
INDENT_STYLES = ("standard", "compact")


@dataclass
class FormatOptions:
    """SQL 포맷터 설정

    sqlglot은 키워드를 항상 대문자로 출력하므로 keyword_case는 "upper"만 지원합니다.
    """

    # sqlglot 방언 이름 ("" = 일반 SQL)
    dialect: str = ""
    keyword_case: str = "upper"
    # standard: 블록 들여쓰기, compact: 한 줄
    indent_style: str = "standard"
    indent: int = 2

    def validate(self) -> None:
        """지원하지 않는 값이면 ValueError"""
        if self.keyword_case not in KEYWORD_CASES:
            raise ValueError(
                f"지원하지 않는 keyword_case: {self.keyword_case} (가능: {', '.join(KEYWORD_CASES)})"
            )
        if self.indent_style not in INDENT_STYLES:
            raise ValueError(
                f"지원하지 않는 indent_style: {self.indent_style} (가능: {', '.join(INDENT_STYLES)})"
            )
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ValueError(f"indent는 정수여야 합니다: {self.indent!r}")
        if self.indent < 0:
            raise ValueError(f"indent는 0 이상이어야 합니다: {self.indent}")
        if self.dialect:
            try:
                sqlglot.Dialect.get_or_raise(self.dialect)
            except ValueError as e:
                raise ValueError(f"지원하지 않는 dialect: {self.dialect} ({e})") from e

    @property
    def pretty(self) -> bool:
        return self.indent_style == "standard"


def validate_log_level(level: str) -> str:
    """loguru에 등록된 레벨인지 확인 후 대문자 이름 반환

    Raises:
        ValueError: 알 수 없는 레벨
    """
    name = str(level).upper()
    try:
        logger.level(name)
    except ValueError as e:
        raise ValueError(f"알 수 없는 log_level: {level}") from e
    return name


@dataclass
class RestorerConfig:
    """SQL 복원기 전체 설정"""

    format: FormatOptions = field(default_factory=FormatOptions)
    known_type_tags: Tuple[str, ...] = DEFAULT_TYPE_TAGS
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "RestorerConfig":
        """환경 변수에서 설정 로드"""
        options = FormatOptions(
            dialect=os.getenv("SQL_RESTORER_DIALECT", ""),
            indent_style=os.getenv("SQL_RESTORER_INDENT_STYLE", "standard"),
        )
        options.validate()
        return cls(
            format=options,
            log_level=validate_log_level(os.getenv("SQL_RESTORER_LOG_LEVEL", "WARNING")),
        )

    def to_dict(self) -> dict:
        return {
            "format": {
                "dialect": self.format.dialect,
                "keyword_case": self.format.keyword_case,
                "indent_style": self.format.indent_style,
                "indent": self.format.indent,
            },
            "known_type_tags": list(self.known_type_tags),
            "log_level": self.log_level,
        }


def load_config(path: str) -> RestorerConfig:
    """
    YAML 설정 파일 로드

    Args:
        path: YAML 파일 경로

    Returns:
        RestorerConfig (빈 파일이면 기본값)

    Raises:
        FileNotFoundError: 파일이 존재하지 않을 경우
        yaml.YAMLError: YAML 파싱 오류
        ValueError: 잘못된 구조 또는 값
    """
    file_path = Path(path)

    if not file_path.exists():
        logger.error(f"설정 파일을 찾을 수 없습니다: {path}")
        raise FileNotFoundError(f"설정 파일을 찾을 수 없습니다: {path}")

    logger.info(f"설정 파일 로드: {path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("빈 설정 파일입니다, 기본값을 사용합니다")
        return RestorerConfig()

    if not isinstance(data, dict):
        logger.error("잘못된 설정 형식: 딕셔너리가 필요합니다")
        raise ValueError("잘못된 설정 형식: 딕셔너리가 필요합니다")

    format_data = data.get("format") or {}
    if not isinstance(format_data, dict):
        logger.error("잘못된 설정 형식: 'format'은 딕셔너리여야 합니다")
        raise ValueError("잘못된 설정 형식: 'format'은 딕셔너리여야 합니다")

    allowed = {f.name for f in fields(FormatOptions)}
    unknown = set(format_data) - allowed
    if unknown:
        logger.error(f"알 수 없는 format 키: {sorted(unknown)}")
        raise ValueError(f"알 수 없는 format 키: {', '.join(sorted(unknown))}")

    options = FormatOptions(**format_data)
    options.validate()

    type_tags = data.get("known_type_tags", DEFAULT_TYPE_TAGS)
    if not isinstance(type_tags, (list, tuple)):
        logger.error("잘못된 설정 형식: 'known_type_tags'는 리스트여야 합니다")
        raise ValueError("잘못된 설정 형식: 'known_type_tags'는 리스트여야 합니다")

    return RestorerConfig(
        format=options,
        known_type_tags=tuple(str(tag) for tag in type_tags),
        log_level=validate_log_level(data.get("log_level", "WARNING")),
    )
