import logging
import os
import socket

from company_browser.logging_config import configure_logging
from company_browser.ui.dash_app import create_dash_app

DEFAULT_PORT = 8050
PORT_SCAN_LIMIT = 100

configure_logging()
logger = logging.getLogger("company_browser.app")

app = create_dash_app(os.getenv("COMPANY_BROWSER_CONFIG_ROOT", "config"))
server = app.server


def find_free_port(start_port: int, limit: int = PORT_SCAN_LIMIT) -> int:
    """First port in [start_port, start_port + limit) nothing is listening on."""
    for port in range(start_port, start_port + limit):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


if __name__ == "__main__":
    preferred_port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    port = find_free_port(preferred_port)
    if port != preferred_port:
        logger.warning(
            "Preferred port taken, using next free port",
            extra={"preferred_port": preferred_port, "port": port},
        )

    app.run(host="0.0.0.0", port=port, debug=os.getenv("DEBUG", "0") == "1")
