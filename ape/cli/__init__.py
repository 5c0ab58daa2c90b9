"""CLI package bootstrap.

Defines root group (`cli`) in helpers and imports submodules so their
decorators register commands.
"""
from ape.cli.helpers import cli  # root group
from ape.cli import config_cmds  # noqa: F401
from ape.cli import sources_cmds  # noqa: F401
from ape.cli import playlists  # noqa: F401
from ape.cli import resolve_cmds  # noqa: F401
from ape.cli import export_cmds  # noqa: F401

__all__ = ["cli"]
