"""Project provisioning: clone, install, and optional finishing steps."""

from node_starter.provision.commands import CommandResult, CommandRunner, DryRunRunner
from node_starter.provision.opener import FolderOpener
from node_starter.provision.prompts import ClickPrompter
from node_starter.provision.provisioner import Provisioner
from node_starter.provision.reporter import StatusReporter

__all__ = [
    "ClickPrompter",
    "CommandResult",
    "CommandRunner",
    "DryRunRunner",
    "FolderOpener",
    "Provisioner",
    "StatusReporter",
]
