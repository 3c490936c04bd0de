"""
Serve the FormSpec compiler over MCP.

    python run_mcp_server.py
    python run_mcp_server.py --transport sse --port 8080
    python run_mcp_server.py --constraints config/.formspec.yml --validation-mode throw

Options default to the FORMSPEC_* / MCP_* environment settings.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from formspec.compiler.validator import VALIDATION_MODES
from formspec.config import FormSpecConfig, get_config, update_config
from formspec.errors import ConstraintConfigError
from formspec.mcp_server import run_mcp_server


logger = logging.getLogger("formspec-mcp")


def build_parser(config: FormSpecConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve the FormSpec compiler over MCP")
    parser.add_argument("--transport", choices=["stdio", "sse"], default=config.mcp_transport)
    parser.add_argument("--host", default=config.mcp_host, help="SSE bind address")
    parser.add_argument("--port", type=int, default=config.mcp_port, help="SSE port")
    parser.add_argument(
        "--constraints",
        default=config.constraints_file,
        help="Constraints file; skips .formspec.yml discovery",
    )
    parser.add_argument(
        "--validation-mode",
        choices=VALIDATION_MODES,
        default=config.validation_mode,
        help="Used when a tool call does not pass validation_mode",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser(get_config()).parse_args(argv)
    update_config(constraints_file=args.constraints, validation_mode=args.validation_mode)

    try:
        asyncio.run(run_mcp_server(transport=args.transport, host=args.host, port=args.port))
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except (ConstraintConfigError, OSError) as e:
        logger.error(f"Cannot start FormSpec MCP server: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
