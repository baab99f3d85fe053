"""Run the Tareas API with the Flask development server.

Usage: ``python -m tareas_api`` (port from ``PORT``, default 3000).
"""

import logging

from tareas_api import create_app


logger = logging.getLogger("tareas_api")


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    app = create_app()
    host = app.config["HOST"]
    port = app.config["PORT"]

    logger.info(f"API de Tareas escuchando en http://localhost:{port}")
    app.run(host=host, port=port, debug=app.config["DEBUG"])


if __name__ == "__main__":
    main()
