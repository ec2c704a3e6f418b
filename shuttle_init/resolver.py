"""
Flow resolver - decides what to ask and what to do for one run.

Whether the run is interactive is decided once, up front, from the
invocation args. Fields are then resolved in a fixed order:

    1. LOGIN     - prompt for an API key (interactive, not yet logged in)
    2. NAME      - --name, or prompt until an available name is given
    3. DIRECTORY - prompt with the name pre-filled (interactive), else the name
    4. FRAMEWORK - --axum/--rocket/--tide, or pick from a menu
    5. INIT      - always initialize the project locally
    6. PROVISION - decide on and create the remote environment

A prompt failure aborts the run at that point. Steps already performed
stay performed.
"""

import logging
from typing import Optional

import click

from shuttle_init.collaborators import Collaborators
from shuttle_init.config import DEFAULT_DOMAIN
from shuttle_init.models import Framework, InvocationArgs, ResolvedPlan, Session
from shuttle_init.prompts import Prompter

logger = logging.getLogger(__name__)

NAME_TAKEN_MESSAGE = "Unfortunately, that name is already taken. Please try a different name."
PROVISION_PROMPT = "Do you want to create the project environment on Shuttle?"


class FlowResolver:
    """Resolves a ResolvedPlan from invocation args and operator answers.

    Args:
        prompter: Source of operator answers
        collaborators: External steps to drive
        session: Login state; a fresh logged-out session if omitted
        domain: Hosting domain shown in the name hint
    """

    def __init__(
        self,
        prompter: Prompter,
        collaborators: Collaborators,
        session: Optional[Session] = None,
        domain: str = DEFAULT_DOMAIN,
    ):
        self.prompter = prompter
        self.collaborators = collaborators
        self.session = session if session is not None else Session()
        self.domain = domain

    def run(self, args: InvocationArgs) -> ResolvedPlan:
        """Resolve every field, initialize locally and maybe provision.

        Raises:
            InteractionError: If a prompt fails or is cancelled
            CollaboratorError: If login or local initialization fails
        """
        interactive = args.interactive
        logger.debug("Interactive: %s (args=%r)", interactive, args)

        if interactive and args.api_key is not None:
            logger.debug("--api-key is ignored in interactive mode; prompting for login")

        if interactive and not self.session.logged_in:
            self._login()

        project_name = self._resolve_name(args)
        directory = self._resolve_directory(project_name, interactive)
        framework = self._resolve_framework(args)

        logger.debug("Initializing %s locally", project_name)
        self.collaborators.initialize_locally(project_name, directory, framework)

        provision = self._resolve_provisioning(args, interactive)
        if provision:
            self.collaborators.provision_environment(project_name)

        return ResolvedPlan(
            project_name=project_name,
            directory=directory,
            framework=framework,
            provision_environment=provision,
        )

    def _login(self) -> None:
        click.echo("First, let's log in to your Shuttle account.")
        api_key = self.prompter.password("API key")
        self.collaborators.authenticate(api_key)
        self.session.logged_in = True
        click.echo("")

    def _resolve_name(self, args: InvocationArgs) -> str:
        if args.name is not None:
            return args.name

        click.echo(
            "How do you want to name your project? "
            f"It will be hosted at ${{project_name}}.{self.domain}."
        )
        attempts = 0
        while True:
            name = self.prompter.text("Project name")
            attempts += 1
            if self.collaborators.check_name_available(name):
                break
            logger.debug("Name %r rejected (attempt %d)", name, attempts)
            click.echo(NAME_TAKEN_MESSAGE)
        click.echo("")
        return name

    def _resolve_directory(self, project_name: str, interactive: bool) -> str:
        if not interactive:
            return project_name

        click.echo("Where should we create this project?")
        directory = self.prompter.text("Directory", default=project_name)
        click.echo("")
        return directory

    def _resolve_framework(self, args: InvocationArgs) -> Framework:
        if args.framework is not None:
            return args.framework

        click.echo("Shuttle works with a range of web frameworks. Which one do you want to use?")
        choice = self.prompter.select("Framework", Framework.choices(), default_index=0)
        click.echo("")
        return Framework(choice)

    def _resolve_provisioning(self, args: InvocationArgs, interactive: bool) -> bool:
        if not interactive:
            return args.new
        if args.new:
            return True
        return self.prompter.confirm(PROVISION_PROMPT, default=True)
