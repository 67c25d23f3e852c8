"""
HTML 엔티티 디코딩 모듈

로그가 HTML 이스케이프를 거쳐 복사된 경우를 위해
자주 쓰이는 엔티티만 원래 문자로 되돌립니다.
"""

import re


HTML_ENTITIES = {
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
    "&quot;": '"',
    "&#39;": "'",
    "&apos;": "'",
    "&nbsp;": " ",
}

ENTITY_PATTERN = re.compile(r"&[a-zA-Z0-9#]+;")


def decode_html_entities(text: str) -> str:
    """
    알려진 HTML 엔티티를 디코딩

    목록에 없는 엔티티는 그대로 둡니다.

    Args:
        text: 원본 텍스트

    Returns:
        디코딩된 텍스트
    """
    return ENTITY_PATTERN.sub(
        lambda m: HTML_ENTITIES.get(m.group(0), m.group(0)),
        text,
    )
