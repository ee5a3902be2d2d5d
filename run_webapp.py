#!/usr/bin/env python3
"""
웹앱 실행 스크립트
사용법: python run_webapp.py
"""
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 파이썬 경로에 추가
sys.path.insert(0, str(Path(__file__).parent))

from webapp.app import create_app
from config.settings import (
    WEBAPP_HOST, WEBAPP_PORT, WEBAPP_DEBUG, LOG_LEVEL,
    AV_VERSION, RESOURCES_OPTIMIZE, RESOURCE_DIRS,
)


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    print("=" * 50)
    print("Static Resources WebApp")
    print("=" * 50)

    print(f"\n[1/2] Configuring resources...")
    print(f"→ Version: {AV_VERSION}")
    print(f"→ Optimized: {RESOURCES_OPTIMIZE}")
    for d in RESOURCE_DIRS:
        print(f"→ Dir: {d}")
    app = create_app()
    print("✓ Resources ready")

    print(f"\n[2/2] Starting web server...")
    print(f"→ URL: http://{WEBAPP_HOST}:{WEBAPP_PORT}/resources/{AV_VERSION}/")
    print(f"→ Debug: {WEBAPP_DEBUG}")
    print(f"→ Press Ctrl+C to stop\n")

    app.run(
        host=WEBAPP_HOST,
        port=WEBAPP_PORT,
        debug=WEBAPP_DEBUG
    )

if __name__ == "__main__":
    main()
