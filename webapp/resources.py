"""
정적 리소스 / i18n 번들 라우트 구성

- serve_static_assets: /resources/{version}, /resources-debug/{version} → public 폴더들
- serve_i18n_bundles: {bundle}_en.properties → {bundle}.properties 리다이렉트
- configure: 설정 딕셔너리로 위 둘을 한 번에 등록
"""

import logging
from typing import Callable, Iterable, Optional, Sequence

from flask import redirect

from config.constants import NO_CACHE_MS, DEFAULT_LOCALE, CSS_DIRNAME
from core.errors import PreconditionError
from core.models import Binding, CacheOptions, ResourceConfiguration
from utils.cache_utils import static_cache_options
from utils.file_utils import public_dir, dist_dir, dist_css_dir, check_optimized_dir
from utils.url_utils import (
    resources_url_base,
    resources_debug_url_base,
    i18n_bundle_path,
    join_url,
    with_context,
)
from webapp.static_files import static_directory

logger = logging.getLogger(__name__)

StaticFactory = Callable[[object, CacheOptions], Callable]


def _require(value, name: str):
    if not value:
        raise PreconditionError(f"{name} is required")
    return value


def _register(app, bindings: Iterable[Binding]) -> None:
    for binding in bindings:
        app.use(binding.prefix, binding.handler)


def static_asset_bindings(
    dirs: Sequence,
    version: str,
    optimize: bool = False,
    cache: Optional[dict] = None,
    static_mw: Optional[StaticFactory] = None,
) -> list[Binding]:
    """
    serve_static_assets가 등록할 바인딩 목록 (등록 순서 그대로).
    필수값이 없으면 아무것도 만들기 전에 PreconditionError.
    """
    dirs = list(_require(dirs, "dirs"))
    _require(version, "version")

    url_base = resources_url_base(version)
    # debug=true 모드에서는 URL에 /resources-debug/ 가 들어가고
    # public 폴더에서 캐시 없이(maxAge 0) 서빙한다
    debug_url_base = resources_debug_url_base(version)

    cache_options = static_cache_options(cache)
    static_mw = static_mw or static_directory

    logger.debug("Using cache options %s", cache_options)
    logger.debug("Static prefix: %s", url_base)

    bindings = []
    if optimize:
        optimized = dist_dir(dirs[0])
        logger.debug("Serving optimized resources from folder: %s", optimized)
        bindings.append(Binding(url_base, static_mw(optimized, cache_options)))

        for d in dirs:
            folder = public_dir(d)
            logger.debug("Serving non optimized resources from folder: %s", folder)
            bindings.append(Binding(debug_url_base, static_mw(folder, CacheOptions(max_age=NO_CACHE_MS))))

        # all.css는 debug 모드에서도 항상 dist/public/css 에서 가져온다
        bindings.append(Binding(join_url(debug_url_base, CSS_DIRNAME), static_mw(dist_css_dir(dirs[0]), cache_options)))
    else:
        for d in dirs:
            folder = public_dir(d)
            logger.debug("Serving non optimized resources from folder: %s", folder)
            bindings.append(Binding(url_base, static_mw(folder, cache_options)))

    return bindings


def serve_static_assets(app, dirs, version, optimize=False, cache=None, static_mw=None) -> None:
    """
    같은 접두사 아래 정적 리소스를 서빙한다.

    Args:
        app: use(prefix, handler)를 가진 호스트 (MountTable)
        dirs: 'public' 폴더를 가진 디렉터리 목록 (예: ['/path/to/av-server'])
        version: 릴리스 버전, 모든 리소스 URL에 들어감 (예: "15.01")
        optimize: True면 dirs[0]/dist/public 한 곳에서 서빙
        cache: {ms?, seconds?} 캐시 기간
        static_mw: (folder, CacheOptions) -> handler. 기본값 static_directory
    """
    _register(app, static_asset_bindings(dirs, version, optimize, cache, static_mw))


def _en_redirect(target: str):
    def handler(_rest: str = ""):
        return redirect(target)

    handler.target = target
    return handler


def i18n_bundle_bindings(bundles: Sequence[str], version: str, context_url: str = "") -> list[Binding]:
    """
    각 URL base(운영, debug)와 번들마다
    {base}/i18n/{bundle}_en.properties → {contextUrl}{base}/i18n/{bundle}.properties
    """
    bundles = list(_require(bundles, "bundles"))
    _require(version, "version")
    if not all(bundles):
        raise PreconditionError("bundle names must not be empty")

    bindings = []
    for url_base in (resources_url_base(version), resources_debug_url_base(version)):
        for bundle in bundles:
            en_path = i18n_bundle_path(url_base, bundle, DEFAULT_LOCALE)
            target = with_context(context_url, i18n_bundle_path(url_base, bundle))
            bindings.append(Binding(en_path, _en_redirect(target)))
    return bindings


def serve_i18n_bundles(app, bundles, version, context_url="") -> None:
    """
    "CommonMessages_en.properties" 요청을 "CommonMessages.properties"로 리다이렉트.
    로케일이 없을 때(= "en") 클라이언트 라이브러리가 _en 파일을 찾기 때문.
    """
    _register(app, i18n_bundle_bindings(bundles, version, context_url))


def configure(app, configuration: dict, dirs, bundles=None, static_mw=None) -> None:
    """
    설정 딕셔너리 { AV_VERSION, contextUrl, resources: {optimize, cache} } 로
    정적 리소스와 i18n 리다이렉트를 등록한다.

    1. optimize면 dirs[0]/dist/public 존재 확인 (없으면 등록 전에 실패)
    2. 정적 리소스 바인딩
    3. bundles가 있으면 i18n 리다이렉트 바인딩
    """
    conf = ResourceConfiguration.from_mapping(configuration)
    dirs = list(_require(dirs, "dirs"))

    check_optimized_dir(dirs[0], conf.optimize)

    # 둘 다 검증이 끝난 뒤에 등록 (부분 등록 없음)
    bindings = static_asset_bindings(dirs, conf.version, conf.optimize, conf.cache, static_mw)
    if bundles:
        bindings += i18n_bundle_bindings(bundles, conf.version, conf.context_url)

    _register(app, bindings)
    logger.info("Registered %d resource bindings for version %s", len(bindings), conf.version)
