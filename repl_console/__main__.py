"""Main entry point for the repl-console application."""

import logging

import click

from .core.config_paths import ConfigPaths


@click.command()
@click.option("--debug", is_flag=True, help="Enable debug mode and debug logging")
@click.option(
    "--evaluator",
    "evaluator_spec",
    metavar="MODULE:ATTR",
    default=None,
    help="Evaluator factory to use instead of the configured one",
)
@click.option(
    "--startup-code",
    default=None,
    help="Text to prefill the prompt with",
)
def main(debug: bool, evaluator_spec: str, startup_code: str) -> None:
    """Launch the interactive console."""
    import os
    import sys

    if debug:
        os.environ["TEXTUAL_DEBUG"] = "1"
        # The terminal belongs to Textual, so logs go to a file
        logging.basicConfig(
            filename=ConfigPaths.get_log_file(),
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        from .app import ConsoleApp
        from .config.settings_manager import get_console_settings
        from .evaluators import EvaluatorLoadError

        settings = get_console_settings()
        if evaluator_spec:
            settings.evaluator = evaluator_spec
        if startup_code is not None:
            settings.startup_code = startup_code

        try:
            app = ConsoleApp(settings=settings)
        except EvaluatorLoadError as e:
            click.echo(click.style(f"Error: {e}", fg="red"), err=True)
            sys.exit(1)

        app.run()

    except KeyboardInterrupt:
        click.echo("\nExiting...")
        sys.exit(0)
    except Exception as e:
        if debug:
            raise
        else:
            click.echo(click.style(f"Error: {e}", fg="red"))
            sys.exit(1)


if __name__ == "__main__":
    main()
