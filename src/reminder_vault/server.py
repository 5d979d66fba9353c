"""
Reminder vault MCP server entry point.

Startup sequence:
1. Read VAULT_ROOT, EXCLUDE_DIRS and format settings from environment
2. Build the DocumentStore
3. Start REST API server in background thread (if API_ENABLED)
4. Register all MCP tools
5. Run MCP server (stdio transport)
"""

import logging
import os
import sys
import threading
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from reminder_vault.formats.base import ReminderFormatConfig
from reminder_vault.formats.plain import PlainReminderFormat
from reminder_vault.parsers.trigger_config import TriggerConfig
from reminder_vault.store.document_store import DocumentStore
from reminder_vault.tools.reminder_tools import register_reminder_tools

log = logging.getLogger(__name__)

DEFAULT_EXCLUDE_DIRS = ".git,.obsidian,node_modules,.trash"


def _parse_exclude_dirs(raw: str) -> set[str]:
    """Parse a comma-separated list of directory names to exclude."""
    return {part.strip() for part in raw.split(",") if part.strip()}


def _start_api_server(store: DocumentStore, port: int) -> None:
    """Run the FastAPI/uvicorn server in a daemon thread."""
    import uvicorn

    from reminder_vault.api.app import create_app

    app = create_app(store)
    log.info("Starting REST API on port %d", port)
    uvicorn.run(app, host="0.0.0.0", port=port, log_level="warning")


def build_store(vault_root: Path) -> DocumentStore:
    """Build a DocumentStore configured from the environment."""
    exclude_dirs = _parse_exclude_dirs(os.environ.get("EXCLUDE_DIRS", DEFAULT_EXCLUDE_DIRS))
    trigger_config = TriggerConfig.from_env()
    reminder_format = PlainReminderFormat(ReminderFormatConfig.from_env())

    log.info("Vault root: %s", vault_root)
    log.info("Excluded dirs: %s", exclude_dirs)
    log.info("Trigger: %r", trigger_config.get_auto_complete_trigger())

    return DocumentStore(vault_root, exclude_dirs, reminder_format, trigger_config)


def main() -> None:
    # stdout carries the MCP stdio transport; logs go to stderr
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    vault_root_env = os.environ.get("VAULT_ROOT", "")
    if not vault_root_env:
        log.error("VAULT_ROOT environment variable is not set")
        sys.exit(1)

    vault_root = Path(vault_root_env)
    if not vault_root.is_dir():
        log.error("VAULT_ROOT does not exist or is not a directory: %s", vault_root)
        sys.exit(1)

    store = build_store(vault_root)

    api_enabled = os.environ.get("API_ENABLED", "true").lower() in ("true", "1", "yes")
    if api_enabled:
        api_port = int(os.environ.get("API_PORT", "9400"))
        api_thread = threading.Thread(
            target=_start_api_server, args=(store, api_port), daemon=True
        )
        api_thread.start()

    mcp = FastMCP("reminder-vault")
    register_reminder_tools(mcp, store)

    log.info("Starting reminder-vault server")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
