"""
Run the API with uvicorn.

Usage:
    python -m forecast_api --port 8000
"""

import argparse
import logging

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Forecast API server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    import uvicorn

    logger.info("Starting Forecast API at http://%s:%d", args.host, args.port)
    uvicorn.run("forecast_api.main:app", host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
