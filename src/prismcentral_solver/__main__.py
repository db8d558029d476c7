"""Process entry point: read settings, initialize the solver, serve."""

import logging
import sys

from prismcentral_solver._logging import get_logger
from prismcentral_solver.config import Settings
from prismcentral_solver.exceptions import SettingsError
from prismcentral_solver.server import create_app
from prismcentral_solver.solvers import PrismCentralSolver

logger = get_logger("prismcentral_solver")


def main() -> None:
    try:
        settings = Settings.from_env()
    except SettingsError as e:
        sys.exit(f"error: {e}")

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    solver = PrismCentralSolver()
    solver.initialize(settings)

    app = create_app(solver, settings)
    ssl_context = None
    if settings.tls_enabled:
        ssl_context = (settings.tls_cert_file, settings.tls_key_file)

    logger.info(
        "Starting webhook server",
        extra={
            "group_name": settings.group_name,
            "solver": solver.name,
            "port": settings.port,
            "tls": settings.tls_enabled,
        },
    )
    app.run(host=settings.host, port=settings.port, ssl_context=ssl_context)


if __name__ == "__main__":
    main()
