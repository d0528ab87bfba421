"""
macsetup Artifacts - Pydantic models for declarative workstation state.
"""

from .base import Artifact
from .brew import BrewCask, BrewFormula, BrewTap, ShellPlugin
from .file import ProfileLine, Symlink
from .git import GitAlias
from .installer import ExternalInstaller
from .pip import PipPackage

__all__ = [
    "Artifact",
    "BrewCask",
    "BrewFormula",
    "BrewTap",
    "ExternalInstaller",
    "GitAlias",
    "PipPackage",
    "ProfileLine",
    "ShellPlugin",
    "Symlink",
]
