"""리소스 URL 조립"""

from typing import Optional

from config.constants import (
    RESOURCES_PREFIX,
    RESOURCES_DEBUG_PREFIX,
    I18N_SEGMENT,
    BUNDLE_EXT,
)


def join_url(*segments: str) -> str:
    """
    경로 조각을 '/' 하나로 잇는다. 결과는 항상 '/'로 시작하고 '/'로 끝나지 않는다.
    join_url("/resources/", "1.0", "/css") -> "/resources/1.0/css"
    """
    parts = []
    for seg in segments:
        parts.extend(p for p in str(seg).split("/") if p)
    return "/" + "/".join(parts)


def resources_url_base(version: str) -> str:
    return join_url(RESOURCES_PREFIX, version)


def resources_debug_url_base(version: str) -> str:
    return join_url(RESOURCES_DEBUG_PREFIX, version)


def i18n_bundle_path(url_base: str, bundle: str, locale: Optional[str] = None) -> str:
    """
    {url_base}/i18n/{bundle}.properties
    locale이 있으면 {url_base}/i18n/{bundle}_{locale}.properties
    """
    filename = f"{bundle}_{locale}{BUNDLE_EXT}" if locale else f"{bundle}{BUNDLE_EXT}"
    return join_url(url_base, I18N_SEGMENT, filename)


def with_context(context_url: Optional[str], path: str) -> str:
    """contextUrl을 앞에 붙인다. ("/portal", "/resources/..") -> "/portal/resources/.." """
    context = (context_url or "").rstrip("/")
    return context + path
