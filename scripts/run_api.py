#!/usr/bin/env python3
"""
GBM Connect — Запуск API сервера

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --data data/patients.example.json --config config/matching.yaml
"""

import os
import sys
import argparse
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def main():
    parser = argparse.ArgumentParser(description='GBM Connect API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--workers', type=int, default=1, help='Number of workers')
    parser.add_argument('--data', default=None, help='JSON file with community users')
    parser.add_argument('--config', default=None, help='YAML matching config')

    args = parser.parse_args()

    # Конфігурація API читається з environment при імпорті
    if args.data:
        os.environ["GBM_DATA_PATH"] = args.data
    if args.config:
        os.environ["GBM_CONFIG_PATH"] = args.config
    os.environ["GBM_API_HOST"] = args.host
    os.environ["GBM_API_PORT"] = str(args.port)

    print("=" * 60)
    print("🧠 GBM Connect — API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print(f"   Data: {args.data or 'default'}")
    print(f"   Config: {args.config or 'default'}")
    print("=" * 60)

    import uvicorn

    uvicorn.run(
        "gbm_connect.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
        log_level="info",
    )


if __name__ == "__main__":
    main()
