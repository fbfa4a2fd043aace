"""Startup Banner — console panel with local and network URLs.

Invariants:
    - Runs once per process, from the application lifespan
    - Address resolution never fails: falls back to "localhost"
"""

import logging
from datetime import datetime

import psutil
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from api_starter.core.network_address import resolve_network_address

logger = logging.getLogger(__name__)


def get_network_address() -> str:
    return resolve_network_address(psutil.net_if_addrs())


def build_urls(port: int | str, address: str) -> tuple[str, str]:
    return f"http://localhost:{port}", f"http://{address}:{port}"


def render_banner(
    app_name: str, port: int | str, address: str, now: datetime | None = None,
) -> Panel:
    """Build the rich Panel shown on startup."""
    local_url, network_url = build_urls(port, address)
    time = (now or datetime.now()).strftime("%H:%M:%S")

    body = Text()
    body.append(f"🚀 {app_name}", style="bold green")
    body.append(f" started at {time}\n\n", style="dim")
    body.append("Local", style="bold")
    body.append(":   ")
    body.append(local_url + "\n", style="green")
    body.append("Network", style="bold")
    body.append(": ")
    body.append(network_url, style="green")
    return Panel(body, border_style="cyan", padding=(0, 1), expand=False)


def display_server_info(
    app_name: str, port: int | str, console: Console | None = None,
) -> str:
    """Print the banner and log the URLs. Returns the resolved network address."""
    address = get_network_address()
    (console or Console()).print(render_banner(app_name, port, address))
    local_url, network_url = build_urls(port, address)
    logger.info(f"{app_name} listening on {local_url} (network: {network_url})")
    return address
