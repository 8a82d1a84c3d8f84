import socket
import sys

from loguru import logger
from werkzeug.serving import make_server

from app import create_app
from config import ConfigurationError, load_settings
from observability.logger import setup_logging

LOG_DIR = "logs"


def bind_socket(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    return socket.create_server((host, port), family=family)


def serve(app, settings):
    """
    Bind the configured port and serve until interrupted.
    Raises OSError when the port cannot be bound.
    """
    sock = bind_socket(settings.HOST, settings.port)
    try:
        # werkzeug exits the process on its own bind errors, so it gets a socket that is already listening
        server = make_server(settings.HOST, settings.port, app, threaded=True, fd=sock.fileno())
    finally:
        sock.close()

    logger.info("Server is running on port {} ({})", settings.PORT, settings.NODE_ENV)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Server shutting down")
    finally:
        server.server_close()


def main() -> int:
    # LOG_LEVEL is not trusted until the settings have validated
    setup_logging("INFO")

    try:
        settings = load_settings()
    except ConfigurationError:
        logger.critical("Refusing to start with an invalid configuration")
        return 1

    setup_logging(settings.LOG_LEVEL, log_dir=None if settings.is_development else LOG_DIR)
    app = create_app(settings)

    try:
        serve(app, settings)
    except (OSError, OverflowError, ValueError) as e:
        logger.error("Failed to bind {}:{}: {}", settings.HOST, settings.PORT, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
