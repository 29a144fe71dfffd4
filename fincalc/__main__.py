"""
Run the API server with uvicorn: python -m fincalc
"""

import uvicorn

from fincalc.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "fincalc.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
