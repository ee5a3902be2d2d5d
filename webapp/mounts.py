"""
URL 접두사 → 핸들러 테이블 (express의 app.use(prefix, mw) 에 해당)

등록 순서대로 시도하고, 먼저 응답한 바인딩이 이긴다 (first-match-wins).
핸들러가 NotFound를 던지면 다음 바인딩으로 넘어간다.
"""

import logging
from typing import Callable, Optional

from flask import abort
from werkzeug.exceptions import NotFound

from core.models import Binding
from utils.url_utils import join_url

logger = logging.getLogger(__name__)

EXTENSION_KEY = "resource_mounts"


def _remainder(prefix: str, path: str) -> Optional[str]:
    """prefix에 걸리면 나머지 경로("" 가능), 아니면 None"""
    if path == prefix:
        return ""
    if path.startswith(prefix + "/"):
        return path[len(prefix) + 1:]
    return None


class MountTable:
    def __init__(self):
        self._bindings: list[Binding] = []

    def use(self, prefix: str, handler: Callable) -> None:
        """prefix 아래 요청을 handler(rest_path)에 연결"""
        prefix = join_url(prefix)
        self._bindings.append(Binding(prefix=prefix, handler=handler))
        logger.debug("Mounted %s (#%d)", prefix, len(self._bindings))

    @property
    def bindings(self) -> list[Binding]:
        return list(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def dispatch(self, path: str):
        """등록 순서대로 핸들러를 시도. 아무도 응답하지 않으면 404."""
        for binding in self._bindings:
            rest = _remainder(binding.prefix, path)
            if rest is None:
                continue
            try:
                return binding.handler(rest)
            except NotFound:
                continue
        abort(404)


def get_mount_table(app) -> MountTable:
    """Flask app에 붙은 MountTable (없으면 생성)"""
    table = app.extensions.get(EXTENSION_KEY)
    if table is None:
        table = MountTable()
        app.extensions[EXTENSION_KEY] = table
    return table
