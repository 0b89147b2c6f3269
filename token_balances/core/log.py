import sys
import logging


def setup_logging(debug: bool, to_file: str | None = None) -> None:
    level = logging.DEBUG if debug else logging.INFO
    fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    datefmt = "%H:%M:%S"

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if to_file:
        handlers.append(logging.FileHandler(to_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=fmt, datefmt=datefmt, handlers=handlers, force=True)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    # RPC payloads are large; only surface them when debugging
    logging.getLogger("web3").setLevel(logging.DEBUG if debug else logging.WARNING)
    logging.getLogger("web3.RequestManager").setLevel(logging.INFO)
