import logging
import os
from pathlib import Path
from typing import Union

from config.constants import PUBLIC_DIRNAME, DIST_DIRNAME, CSS_DIRNAME
from core.errors import OptimizedBuildMissingError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def public_dir(base: PathLike) -> Path:
    """{base}/public"""
    return Path(base) / PUBLIC_DIRNAME


def dist_dir(base: PathLike) -> Path:
    """{base}/dist/public (grunt dist 결과물)"""
    return Path(base) / DIST_DIRNAME / PUBLIC_DIRNAME


def dist_css_dir(base: PathLike) -> Path:
    return dist_dir(base) / CSS_DIRNAME


def describe_dir(path: PathLike, limit: int = 20) -> list[str]:
    """
    디버그 로그용으로 디렉터리 항목 이름을 나열한다.
    읽기 실패는 경고만 남기고 빈 리스트 반환.
    """
    try:
        names = sorted(entry.name for entry in os.scandir(path))
    except OSError as e:
        logger.warning("Cannot list %s: %s: %s", path, type(e).__name__, e)
        return []
    if len(names) > limit:
        return names[:limit] + [f"... (+{len(names) - limit})"]
    return names


def check_optimized_dir(dirname: PathLike, optimize: bool) -> None:
    """
    optimize 모드면 {dirname}/dist/public 이 반드시 있어야 한다.
    라우트 등록 전에 동기적으로 확인하고, 없으면 OptimizedBuildMissingError.
    """
    if not optimize:
        logger.warning("Will use non-optimized resources")
        return

    target = dist_dir(dirname)
    if not target.is_dir():
        raise OptimizedBuildMissingError(
            f"Trying to launch server with optimized resources, but {target} does not exist; run grunt dist"
        )
    logger.debug("Optimized resources in %s: %s", target, describe_dir(target))
