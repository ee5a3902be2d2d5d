"""Flask App Factory"""

from flask import Flask

from config import settings
from webapp.mounts import get_mount_table
from webapp.resources import configure


def create_app(configuration=None, dirs=None, bundles=None, static_mw=None):
    """
    Flask 애플리케이션을 생성하고 리소스 라우트를 설정합니다.
    인자를 생략하면 config.settings(환경변수) 값을 사용합니다.
    """
    app = Flask(
        __name__,
        static_folder=None  # static_routes에서 직접 처리하므로 None으로 설정
    )

    if configuration is None:
        configuration = settings.build_configuration()
    if dirs is None:
        dirs = settings.RESOURCE_DIRS
    if bundles is None:
        bundles = settings.I18N_BUNDLES

    configure(get_mount_table(app), configuration, dirs, bundles, static_mw=static_mw)

    # Blueprint 등록
    from webapp.routes.static_routes import static_bp
    app.register_blueprint(static_bp)

    return app
