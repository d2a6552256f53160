"""Logging Configuration.

텍스트 또는 ECS 호환 JSON 로깅 설정입니다.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import ecs_logging

if TYPE_CHECKING:
    from apps.release_hook.setup.config import Settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: "Settings") -> None:
    """로깅 설정."""
    # CLI 결과(stdout)와 섞이지 않도록 stderr로 출력
    handler = logging.StreamHandler(sys.stderr)
    if settings.log_format == "ecs":
        handler.setFormatter(ecs_logging.StdlibFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    if settings.log_format == "ecs":
        # 서비스 메타데이터 추가
        old_factory = logging.getLogRecordFactory()

        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = old_factory(*args, **kwargs)
            record.service = {
                "name": settings.service_name,
                "version": settings.service_version,
                "environment": settings.environment,
            }
            return record

        logging.setLogRecordFactory(record_factory)
