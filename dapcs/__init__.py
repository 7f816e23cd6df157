"""dapcs - resolve .NET projects into netcoredbg debug configurations."""

__all__ = ["__version__", "main"]
__version__ = "0.1.0"


def main() -> int:
    """Entry point that mirrors :func:`dapcs.cli.main`."""
    from dapcs.cli import main as _cli_main

    return _cli_main()
