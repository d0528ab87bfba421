"""
Minimal Workstation - Homebrew plus a handful of command-line tools.

Run: macsetup provision --manifest examples/minimal-workstation/manifest.py
"""

from pathlib import Path

from macsetup.artifacts import (
    BrewCask,
    BrewFormula,
    ExternalInstaller,
    ProfileLine,
)

# =============================================================================
# 1. PACKAGE MANAGER (bootstrap: its failure stops the run)
# =============================================================================
homebrew = ExternalInstaller(
    name="homebrew",
    executable="brew",
    install_command='/bin/bash -c "$(curl -fsSL https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh)"',
    bootstrap=True,
)

# =============================================================================
# 2. COMMAND-LINE TOOLS
# =============================================================================
cli_tools = [BrewFormula(name=name) for name in ("jq", "htop", "wget", "tree")]

# =============================================================================
# 3. APPLICATIONS
# =============================================================================
editor = BrewCask(name="visual-studio-code")

# =============================================================================
# 4. SHELL CONFIGURATION
# =============================================================================
editor_env = ProfileLine(
    name="EDITOR in .zprofile",
    path=Path.home() / ".zprofile",
    line='export EDITOR="code --wait"',
)
