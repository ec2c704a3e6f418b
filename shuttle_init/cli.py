"""
shuttle-init CLI - create a new Shuttle project.

Asks only for what was not passed on the command line:

    shuttle-init                               # full wizard
    shuttle-init --name blog --axum            # no prompts, local only
    shuttle-init --name blog --axum --new --api-key KEY
                                               # no prompts, local + remote
"""

import logging
import sys

import click

from shuttle_init import __version__
from shuttle_init.collaborators import ConsoleCollaborators
from shuttle_init.config import load_config
from shuttle_init.errors import CollaboratorError, ConfigurationError, InteractionError
from shuttle_init.models import InvocationArgs
from shuttle_init.prompts import QuestionaryPrompter
from shuttle_init.resolver import FlowResolver
from shuttle_init.ux import print_error, print_info, print_summary, set_colors

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.version_option(version=__version__)
@click.argument("path", default=".", type=click.Path())
@click.option("--name", default=None, help="Project name (skips the name prompt).")
@click.option("--axum", is_flag=True, help="Use the axum framework.")
@click.option("--rocket", is_flag=True, help="Use the rocket framework.")
@click.option("--tide", is_flag=True, help="Use the tide framework.")
@click.option("--new", is_flag=True, help="Create the project environment on Shuttle.")
@click.option("--api-key", default=None, help="Shuttle API key.")
@click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False),
              help="Config file (default: ~/.shuttle-init/config.json).")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging on stderr.")
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.pass_context
def cli(
    ctx: click.Context,
    path: str,
    name: str,
    axum: bool,
    rocket: bool,
    tide: bool,
    new: bool,
    api_key: str,
    config_path: str,
    verbose: bool,
    no_color: bool,
):
    """Create a new Shuttle project.

    PATH is where the project lives (default: current directory).

    \b
    Without --name, a framework flag, or (with --new) --api-key,
    the wizard asks for whatever is missing, starting with a login.
    """
    try:
        args = InvocationArgs.from_flags(
            name=name,
            axum=axum,
            rocket=rocket,
            tide=tide,
            new=new,
            api_key=api_key,
            path=path,
        )
    except ConfigurationError as e:
        raise click.UsageError(str(e), ctx=ctx)

    config = load_config(config_path)
    setup_logging(verbose or config.verbose)
    if no_color or not config.colors:
        set_colors(False)

    # Tests inject prompter/collaborators through the context object
    obj = ctx.obj or {}
    prompter = obj.get("prompter") or QuestionaryPrompter()
    collaborators = obj.get("collaborators") or ConsoleCollaborators(config.taken_names)

    resolver = FlowResolver(prompter, collaborators, domain=config.domain)

    try:
        plan = resolver.run(args)
    except InteractionError as e:
        print_error(f"Aborted: {e}")
        sys.exit(1)
    except CollaboratorError as e:
        print_error(f"{e.operation.capitalize()} failed: {e.message}")
        sys.exit(1)

    logger.debug("Resolved plan: %r", plan.to_dict())
    print_summary(
        "Project ready",
        {
            "Name": plan.project_name,
            "Directory": plan.directory,
            "Framework": plan.framework.value,
            "Environment": "created" if plan.provision_environment else "not created",
        },
        status="Project initialized",
    )
    print_info(f"Next: cd {plan.directory}")


# ============================================================================
# Entry Point
# ============================================================================

def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
