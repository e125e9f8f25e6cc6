from __future__ import annotations

import logging

import uvicorn

HOST = "0.0.0.0"
PORT = 3000

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    base = f"http://localhost:{PORT}/api"
    logger.info("server listening on port %d", PORT)
    logger.info("api: %s", base)
    logger.info("liveness: %s/test", base)
    logger.info("products: %s/produtos", base)

    uvicorn.run(
        "cafeteria_api.bootstrap:build_app",
        factory=True,
        host=HOST,
        port=PORT,
        reload=False,
    )


if __name__ == "__main__":
    main()
