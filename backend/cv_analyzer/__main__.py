"""Run the API with uvicorn. Use: python -m cv_analyzer"""

import uvicorn

from cv_analyzer.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("cv_analyzer.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
