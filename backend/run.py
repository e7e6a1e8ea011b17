import argparse
import os
import sys

import uvicorn

if __name__ == "__main__":
    # Project root (parent of backend/) so 'backend.app' is importable when run as a script
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    sys.path.insert(0, project_root)

    from backend.app.core.config import settings

    parser = argparse.ArgumentParser(description="DrinkMailer Backend Launcher")
    parser.add_argument("--port", type=int, default=settings.PORT, help=f"Port to run the backend server on (default: {settings.PORT})")
    args = parser.parse_args()

    from backend.app.main import app
    port = getattr(args, 'port')
    print(f"DrinkMailer 後端服務即將啟動於埠 {port} ...")
    print(f"若在本機執行，可造訪 http://127.0.0.1:{port}/docs 查看 API 文件")

    uvicorn.run(app, host=settings.HOST, port=port)
