"""
Rich console output for verbose request/response tracing.
"""
import json
from typing import Any, Mapping, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from .core.request_builder import mask_headers

console = Console(stderr=True)


def format_body(body: Any) -> str:
    """Format body for pretty printing."""
    if body is None:
        return ""
    if isinstance(body, (dict, list, tuple)):
        return json.dumps(body, indent=2, ensure_ascii=False, default=str)
    if isinstance(body, (bytes, bytearray)):
        try:
            return bytes(body).decode("utf-8")
        except UnicodeDecodeError:
            return f"<binary data: {len(body)} bytes>"
    return str(body)


def _lexer_for(content_type: Optional[str]) -> str:
    if content_type and "json" in content_type:
        return "json"
    return "text"


def print_request(
    method: str,
    url: str,
    headers: Mapping[str, str],
    body: Any = None,
) -> None:
    """Print a request panel with masked headers."""
    console.print(Panel(f"[bold cyan]{method}[/bold cyan] {url}", title="[bold blue]Request[/bold blue]"))
    console.print("[bold]Headers:[/bold]", mask_headers(headers))
    body_str = format_body(body)
    if body_str:
        lexer = _lexer_for(headers.get("content-type"))
        console.print(Panel(Syntax(body_str, lexer, theme="monokai"), title="[bold]Request Body[/bold]"))


def print_response(
    status: int,
    reason: str,
    url: str,
    headers: Mapping[str, str],
    body: Any = None,
) -> None:
    """Print a response panel."""
    color = "green" if 200 <= status < 300 else "red"
    console.print(
        Panel(
            f"[bold {color}]{status}[/bold {color}] {reason}",
            title=f"[bold blue]Response[/bold blue] ({url})",
        )
    )
    console.print("[bold]Headers:[/bold]", mask_headers(headers))
    body_str = format_body(body)
    if body_str:
        lexer = _lexer_for(headers.get("content-type"))
        console.print(Panel(Syntax(body_str, lexer, theme="monokai"), title="[bold]Response Body[/bold]"))
