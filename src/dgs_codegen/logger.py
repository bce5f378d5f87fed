"""Console-aware logging for the DGS code generator."""

import logging

from rich.console import Console
from rich.logging import RichHandler


class CodegenLogger(logging.Logger):
    """
    Logger that writes through Rich and adds a few CLI presentation helpers.

    Standard levels (debug, info, warning, error) go through a RichHandler;
    the helpers print directly to the console and are meant for the
    user-facing summary of a generator run.
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        super().__init__(name, level)
        self.console = Console()

        handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.addHandler(handler)
        self.propagate = False

    def print(self, message: str) -> None:
        """Print a plain message (Rich markup allowed)."""
        self.console.print(message)

    def success(self, message: str) -> None:
        """Print a success message in green with a checkmark."""
        self.print(f"[green]✓[/green] {message}")

    def hint(self, message: str) -> None:
        """Print a dimmed secondary message."""
        self.print(f"[dim]{message}[/dim]")

    def rule(self, title: str, style: str = "bold blue") -> None:
        """Print a horizontal separator with a title."""
        self.console.rule(f"[{style}]{title}")

    def key_value(self, key: str, value: object, key_style: str = "dim") -> None:
        """
        Print a formatted key-value pair such as "Package: com.example".

        Args:
            key: The label to display
            value: The value to display
            key_style: Rich style for the label
        """
        self.print(f"[{key_style}]{key}:[/{key_style}] {value}")

    def list_item(self, text: str, prefix: str = "-") -> None:
        """Print one bullet of a list."""
        self.print(f"{prefix} {text}")


def get_logger(name: str = "dgs_codegen") -> CodegenLogger:
    """
    Get or create the generator logger.

    Args:
        name: Logger name

    Returns:
        CodegenLogger instance
    """
    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(CodegenLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)

    return logger  # type: ignore[return-value]
