"""CLI entrypoint."""

from .commands.bundle import bundle

cli = bundle


if __name__ == "__main__":
    cli()
