"""
Loguru 기반 로깅 설정
포맷터 실패 등 운영자용 진단 메시지를 stderr/파일로 남깁니다.
"""
import os
import sys
from pathlib import Path
from loguru import logger

# 기본 로거 제거 (중복 방지)
logger.remove()

# =============================================================================
# 포맷 설정
# =============================================================================

# 콘솔용 포맷 (컬러 + file.path:line 형식)
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <7}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> in <cyan>{function}()</cyan> | "
    "<level>{message}</level>"
)

# 파일용 포맷 (플레인 텍스트)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | "
    "{level: <7} | "
    "{name}:{line} in {function}() | "
    "{message}"
)


def _startup_level(name: str) -> str:
    """등록되지 않은 레벨이면 WARNING (검증 오류는 설정 로딩 단계에서 보고)"""
    try:
        logger.level(name)
    except ValueError:
        return "WARNING"
    return name


DEFAULT_LEVEL = _startup_level(os.getenv("SQL_RESTORER_LOG_LEVEL", "WARNING").upper())

_console_handler_id = logger.add(
    sys.stderr,
    format=CONSOLE_FORMAT,
    level=DEFAULT_LEVEL,
    colorize=True,
)


# =============================================================================
# 핸들러 설정 함수
# =============================================================================

def configure_console(level: str = DEFAULT_LEVEL) -> int:
    """
    콘솔 핸들러 레벨 재설정

    Args:
        level: 로그 레벨 (DEBUG, INFO, WARNING, ...)

    Returns:
        새 핸들러 ID
    """
    global _console_handler_id
    try:
        logger.remove(_console_handler_id)
    except ValueError:
        # 이미 제거된 핸들러
        pass
    _console_handler_id = logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=level.upper(),
        colorize=True,
    )
    return _console_handler_id


def setup_file_logging(
    log_dir: str = "./logs",
    level: str = "DEBUG",
    rotation: str = "1 day",
    retention: str = "7 days"
):
    """
    파일 로깅 설정

    Args:
        log_dir: 로그 디렉토리 경로
        level: 로그 레벨
        rotation: 로테이션 주기
        retention: 보관 기간

    Returns:
        추가된 핸들러 ID
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    handler_id = logger.add(
        str(log_path / "{time:YYYY-MM-DD}_sql_restorer.log"),
        format=FILE_FORMAT,
        level=level.upper(),
        rotation=rotation,
        retention=retention,
        encoding="utf-8",
    )

    logger.info(f"파일 로깅 시작: {log_path}")
    return handler_id


def get_logger(module_name: str = None):
    """
    모듈별 로거 반환

    사용 예:
        logger = get_logger("extractor")
        logger.debug("파라미터 라인 선택")
    """
    if module_name:
        return logger.bind(module=module_name)
    return logger


class LogStage:
    """
    단계 추적 컨텍스트 매니저

    사용 예:
        with LogStage("SQL 복원", source="clipboard.txt"):
            ...
    """

    def __init__(self, stage_name: str, **context):
        self.stage_name = stage_name
        self.context = context

    def __enter__(self):
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        if context_str:
            logger.debug(f"[시작] {self.stage_name} ({context_str})")
        else:
            logger.debug(f"[시작] {self.stage_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            logger.error(f"[실패] {self.stage_name}: {exc_val}")
        else:
            logger.debug(f"[완료] {self.stage_name}")
        return False


__all__ = [
    "logger",
    "get_logger",
    "configure_console",
    "setup_file_logging",
    "LogStage",
    "CONSOLE_FORMAT",
    "FILE_FORMAT",
]
