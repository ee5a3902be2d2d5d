import os
from pathlib import Path

# ============= 경로 설정 =============
BASE_DIR = Path(__file__).parent.parent.absolute()


def _optional_int(name: str):
    """환경변수를 int로 읽는다. 비어있으면 None."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return int(raw)


# 웹앱 설정
WEBAPP_HOST = os.getenv("WEBAPP_HOST", "0.0.0.0")
WEBAPP_PORT = int(os.getenv("WEBAPP_PORT", "5010"))
WEBAPP_DEBUG = os.getenv("WEBAPP_DEBUG", "0") == "1"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ============= 리소스 설정 =============
# 릴리스 버전, 모든 정적 리소스 URL에 포함된다 (예: "15.01")
AV_VERSION = os.getenv("AV_VERSION", "dev")
# 다른 모든 URL의 base (예: "/portal" 또는 "")
CONTEXT_URL = os.getenv("CONTEXT_URL", "")

# 1이면 dist/public 한 곳에서 서빙 (grunt dist 결과물 필요)
RESOURCES_OPTIMIZE = os.getenv("RESOURCES_OPTIMIZE", "0") == "1"
RESOURCES_CACHE_SECONDS = _optional_int("RESOURCES_CACHE_SECONDS")
RESOURCES_CACHE_MS = _optional_int("RESOURCES_CACHE_MS")

# 'public' 폴더를 가진 디렉터리 목록 (os.pathsep 구분, 첫 번째가 dist 기준)
# 예: RESOURCE_DIRS="/srv/av-server:/srv/node-ui-commons"
RESOURCE_DIRS = [
    Path(p.strip())
    for p in os.getenv("RESOURCE_DIRS", str(BASE_DIR)).split(os.pathsep)
    if p.strip()
]

# 예: I18N_BUNDLES="PortalMessages,ErrorMessages"
I18N_BUNDLES = [
    b.strip()
    for b in os.getenv("I18N_BUNDLES", "").split(",")
    if b.strip()
]


def build_configuration() -> dict:
    """
    환경변수로부터 configure()가 받는 설정 딕셔너리를 만든다.

    { AV_VERSION, contextUrl, resources: { optimize, cache: {ms?, seconds?} } }
    """
    cache = {}
    if RESOURCES_CACHE_SECONDS is not None:
        cache["seconds"] = RESOURCES_CACHE_SECONDS
    if RESOURCES_CACHE_MS is not None:
        cache["ms"] = RESOURCES_CACHE_MS

    return {
        "AV_VERSION": AV_VERSION,
        "contextUrl": CONTEXT_URL,
        "resources": {
            "optimize": RESOURCES_OPTIMIZE,
            "cache": cache or None,
        },
    }
