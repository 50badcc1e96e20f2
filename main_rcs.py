#!/usr/bin/env python3
"""
Main Entry Point - Clean Routes-Controller-Service Architecture
File URL Service
"""

import uvicorn
from fileurl.core.config import settings


def main():
    print(f"Starting File URL Service on http://{settings.SERVER_HOST}:{settings.SERVER_PORT}")
    print(f"Docs: http://{settings.SERVER_HOST}:{settings.SERVER_PORT}/docs")

    uvicorn.run(
        "fileurl.main_rcs:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG
    )


if __name__ == "__main__":
    main()
