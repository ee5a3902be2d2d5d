# ============= URL 접두사 =============
# /resources/{version}/...        운영(최적화/일반) 리소스
# /resources-debug/{version}/...  debug=true 모드, 캐시 없음
RESOURCES_PREFIX = "/resources"
RESOURCES_DEBUG_PREFIX = "/resources-debug"

# ============= 디렉터리 구조 =============
PUBLIC_DIRNAME = "public"
DIST_DIRNAME = "dist"
CSS_DIRNAME = "css"

# ============= i18n 번들 =============
I18N_SEGMENT = "i18n"
BUNDLE_EXT = ".properties"
# 로케일이 없을 때 클라이언트가 요청하는 기본 로케일
DEFAULT_LOCALE = "en"

# ============= 캐시 =============
NO_CACHE_MS = 0
