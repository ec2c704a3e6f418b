"""
shuttle-init - onboarding wizard for new Shuttle projects.

Collects a project name, directory and web framework, initializes the
project locally and optionally creates its environment on Shuttle.
Anything passed on the command line is not asked for again.
"""

__version__ = "0.1.0"

from shuttle_init.models import Framework, InvocationArgs, ResolvedPlan, Session
from shuttle_init.resolver import FlowResolver

__all__ = [
    "Framework",
    "InvocationArgs",
    "ResolvedPlan",
    "Session",
    "FlowResolver",
]
