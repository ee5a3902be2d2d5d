from typing import Optional

from config.constants import NO_CACHE_MS
from core.errors import ConfigurationError
from core.models import CacheOptions


def _duration(cache: dict, key: str) -> Optional[int]:
    value = cache.get(key)
    if value is None:
        return None
    # bool은 int의 하위 타입이라 따로 거른다
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"cache.{key} must be an integer, got {value!r}")
    if value < 0:
        raise ConfigurationError(f"cache.{key} must not be negative, got {value}")
    return value


def static_cache_options(cache: Optional[dict]) -> CacheOptions:
    """
    캐시 설정 {ms?, seconds?} 을 CacheOptions(max_age=ms)로 변환.
    - None → max_age 0 (캐시 없음)
    - seconds → seconds * 1000
    - ms가 있으면 seconds보다 우선
    """
    if not cache:
        return CacheOptions(max_age=NO_CACHE_MS)

    max_age = NO_CACHE_MS
    seconds = _duration(cache, "seconds")
    if seconds is not None:
        max_age = seconds * 1000
    ms = _duration(cache, "ms")
    if ms is not None:
        max_age = ms
    return CacheOptions(max_age=max_age)
