"""
CLI 인터페이스

로그 조각에서 SQL을 복원하거나, 완성된 SQL을 포맷합니다.
"""

import argparse
import json
import sys
from typing import List, Optional

import yaml

from .composer import StatementComposer
from .config import RestorerConfig, INDENT_STYLES, load_config, validate_log_level
from .extractor import LogExtractor
from .logger import LogStage, configure_console, logger, setup_file_logging


EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('text', nargs='?', help='입력 텍스트 (생략 시 --file 또는 stdin)')
    parser.add_argument('--file', '-f', type=str, help='입력 파일 경로')
    parser.add_argument('--config', type=str, help='YAML 설정 파일 경로')
    parser.add_argument('--dialect', type=str, help='sqlglot 방언 (기본: 일반 SQL)')
    parser.add_argument('--indent-style', choices=INDENT_STYLES, help='들여쓰기 스타일')
    parser.add_argument('--log-level', type=str, help='콘솔 로그 레벨')
    parser.add_argument('--log-dir', type=str, help='파일 로그 디렉토리 (지정 시 파일 로깅)')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sql-restorer',
        description='프레임워크 로그에서 SQL 복원',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예시:
  # 로그에서 SQL 복원
  python -m sql_restorer restore --file mybatis.log

  # 파이프로 입력
  pbpaste | python -m sql_restorer restore

  # 템플릿과 파라미터만 확인
  python -m sql_restorer extract --json --file mybatis.log

  # 완성된 SQL 포맷
  python -m sql_restorer format "select * from users where id = 1"

  # MySQL 문법(백틱, LIMIT a, b)은 방언 지정 필요
  python -m sql_restorer restore --dialect mysql --file mybatis.log
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='명령어')

    restore_parser = subparsers.add_parser('restore', help='로그에서 SQL 복원 (치환 + 포맷)')
    _add_common_arguments(restore_parser)
    restore_parser.add_argument('--no-format', action='store_true', help='포맷 없이 치환만 수행')
    restore_parser.add_argument('--json', action='store_true', help='JSON 형식 출력')

    extract_parser = subparsers.add_parser('extract', help='템플릿과 파라미터만 추출')
    _add_common_arguments(extract_parser)
    extract_parser.add_argument('--json', action='store_true', help='JSON 형식 출력 (기본: YAML)')

    format_parser = subparsers.add_parser('format', help='완성된 SQL 포맷')
    _add_common_arguments(format_parser)

    return parser


def read_input(args) -> str:
    """인자, 파일, stdin 순으로 입력 읽기"""
    if args.text is not None:
        return args.text
    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            return f.read()
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


def resolve_config(args) -> RestorerConfig:
    """설정 파일/환경 변수 로드 후 CLI 옵션 반영"""
    config = load_config(args.config) if args.config else RestorerConfig.from_env()
    if args.dialect is not None:
        config.format.dialect = args.dialect
    if args.indent_style is not None:
        config.format.indent_style = args.indent_style
    if args.log_level:
        config.log_level = validate_log_level(args.log_level)
    config.format.validate()
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_USAGE

    try:
        config = resolve_config(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"설정 오류: {e}", file=sys.stderr)
        return EXIT_USAGE

    configure_console(config.log_level)
    if args.log_dir:
        setup_file_logging(args.log_dir)

    try:
        text = read_input(args)
    except OSError as e:
        logger.error(f"입력 읽기 실패: {e}")
        print(f"입력을 읽을 수 없습니다: {e}", file=sys.stderr)
        return EXIT_USAGE

    if not text.strip():
        print("로그 텍스트를 입력하세요 (no log text given)", file=sys.stderr)
        return EXIT_NOT_FOUND

    composer = StatementComposer(options=config.format)

    if args.command == 'format':
        print(composer.format_raw(text.strip()))
        return EXIT_OK

    extractor = LogExtractor(known_type_tags=config.known_type_tags)
    with LogStage("SQL 추출", command=args.command):
        result = extractor.extract(text)

    if not result.found:
        print("유효한 SQL 구문을 찾지 못했습니다 (no valid SQL statement found)", file=sys.stderr)
        return EXIT_NOT_FOUND

    if args.command == 'extract':
        data = result.to_dict()
        if args.json:
            print(json.dumps(data, ensure_ascii=False, indent=2))
        else:
            print(yaml.safe_dump(data, allow_unicode=True, sort_keys=False), end='')
        return EXIT_OK

    sql = composer.compose(result.template, result.params, format_sql=not args.no_format)
    if args.json:
        print(json.dumps({
            "sql": sql,
            "template": result.template,
            "params": result.params,
            "placeholders": result.placeholder_count,
        }, ensure_ascii=False, indent=2))
    else:
        print(sql)
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
