import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Set up root logging on stderr and return the server logger.

    stdout is reserved for the MCP stdio transport, so the handler must never
    write there.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root = logging.getLogger()
    root.setLevel(level)
    if not any(getattr(h, "_mcp_graphql", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._mcp_graphql = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    return logging.getLogger("mcp_server")
