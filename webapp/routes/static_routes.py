"""정적 리소스 서빙 라우트"""

from flask import Blueprint, current_app, request

from config.constants import RESOURCES_PREFIX, RESOURCES_DEBUG_PREFIX
from webapp.mounts import get_mount_table

static_bp = Blueprint('static_routes', __name__)


@static_bp.route(f"{RESOURCES_PREFIX}/<path:path>", endpoint="resources")
@static_bp.route(f"{RESOURCES_DEBUG_PREFIX}/<path:path>", endpoint="resources_debug")
def serve_resource(path):
    """/resources/, /resources-debug/ 아래 요청을 등록된 바인딩 순서대로 처리합니다."""
    return get_mount_table(current_app).dispatch(request.path)
