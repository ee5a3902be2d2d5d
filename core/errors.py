"""리소스 설정 관련 예외"""


class ConfigurationError(ValueError):
    """잘못된 리소스 설정"""


class PreconditionError(ConfigurationError):
    """필수 옵션(dirs, version, bundles) 누락"""


class OptimizedBuildMissingError(ConfigurationError):
    """optimize 모드인데 dist/public 이 없음"""
