"""Main entry point for lampmix."""

from lampmix.cli import cli

if __name__ == "__main__":
    cli()
