"""Main entry point for chorder."""

from chorder.cli import cli

if __name__ == "__main__":
    cli()
