from __future__ import annotations

import logging

CLIENT_LOGGER = "agrismart_client"


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # request traces come from the client's own logger; httpx stays quiet unless verbose
    logging.getLogger(CLIENT_LOGGER).setLevel(level)
    wire_level = logging.DEBUG if verbose else logging.ERROR
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(wire_level)
