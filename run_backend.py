#!/usr/bin/env python3
"""Start the Steel Building Generator API server."""

import uvicorn

from steelbuilder.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "steelbuilder.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        reload_dirs=["steelbuilder"],
        log_level=settings.log_level.lower(),
    )
