"""confsplit — config-line and command tokenizers served over MCP.

Builds a ``FastMCP`` server, registers the tokenizer tools, and runs it.
"""

import logging

from fastmcp import FastMCP

from confsplit.config import Config
from confsplit.server.tools import register_tools

config = Config.from_env()

mcp = FastMCP(
    name="confsplit",
    instructions="Config-line and command tokenizers. Call confsplit_help for the reference card.",
)
register_tools(mcp, config)


def main() -> None:
    logging.basicConfig(
        level=config.logging.level.upper(),
        format=config.logging.format,
    )
    mcp.run()


if __name__ == "__main__":
    main()
