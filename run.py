import logging
import os
import sys

import uvicorn

if __name__ == "__main__":
    # Ensure usage of the current directory for imports
    sys.path.append(os.path.dirname(os.path.abspath(__file__)))

    from contact_api.config.settings import settings

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(f"🚀 Starting {settings.APP_NAME} on http://{settings.HOST}:{settings.PORT} ...")
    print("Endpoints:")
    print("  GET  /api/status       - Check server status")
    print("  POST /api/submit       - Submit contact form")
    if settings.EXPOSE_SUBMISSIONS:
        print("  GET  /api/submissions  - List stored submissions")
    uvicorn.run(
        "contact_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
