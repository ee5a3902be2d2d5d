from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class CacheOptions:
    """정적 파일 서빙에 넘기는 캐시 옵션. max_age는 ms 단위."""
    max_age: int = 0

    @property
    def max_age_seconds(self) -> int:
        # Cache-Control은 초 단위
        return self.max_age // 1000


@dataclass(frozen=True)
class ResourceConfiguration:
    version: Optional[str]
    optimize: bool = False
    cache: Optional[dict] = None
    context_url: str = ""

    @classmethod
    def from_mapping(cls, configuration: dict) -> "ResourceConfiguration":
        """{ AV_VERSION, contextUrl, resources: {optimize, cache} } 형태를 읽는다."""
        resources = configuration.get("resources") or {}
        return cls(
            version=configuration.get("AV_VERSION"),
            optimize=bool(resources.get("optimize")),
            cache=resources.get("cache"),
            context_url=configuration.get("contextUrl") or "",
        )


@dataclass(frozen=True)
class Binding:
    """URL 접두사 하나에 등록할 핸들러 (app.use(prefix, handler))"""
    prefix: str
    handler: Callable
