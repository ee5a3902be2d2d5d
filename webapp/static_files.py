"""기본 정적 파일 핸들러 팩토리 (express.static 자리)"""

import os

from flask import send_from_directory
from werkzeug.exceptions import NotFound

from core.models import CacheOptions


def static_directory(directory, cache_options: CacheOptions):
    """
    directory 아래 파일을 서빙하는 핸들러를 만든다.
    - 파일이 없거나 디렉터리 경로면 NotFound → 다음 바인딩으로 넘어감
    - max_age(ms)는 Cache-Control용 초로 변환
    """
    # 상대 경로는 app.root_path가 아니라 작업 디렉터리 기준
    directory = os.path.abspath(os.fspath(directory))
    max_age = cache_options.max_age_seconds

    def serve(filename: str):
        if not filename or filename.endswith("/"):
            raise NotFound()
        # 경로 탈출/없는 파일은 send_from_directory가 NotFound 처리
        return send_from_directory(directory, filename, max_age=max_age)

    serve.directory = directory
    serve.cache_options = cache_options
    return serve
