"""CLI entry point for the primitive obsession demo."""

import logging

import click

from primitive_obsession.config import DemoSettings


@click.command()
@click.option("--verbose", "-v", is_flag=True, help="Log each demo step to stderr")
def main(verbose: bool) -> None:
    """Show how value objects catch swapped identifier arguments."""
    from primitive_obsession.demonstrator import run

    settings = DemoSettings(log_level=logging.DEBUG) if verbose else DemoSettings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(settings.log_level)
    run(settings=settings)


if __name__ == "__main__":
    main()
