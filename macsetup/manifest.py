"""
Built-in manifests.

workstation_artifacts() describes a complete macOS development workstation;
git_alias_artifacts() describes the global Git aliases. Order matters:
Homebrew is the bootstrap artifact and precedes everything installed with it.
"""

from .artifacts import (
    Artifact,
    BrewCask,
    BrewFormula,
    BrewTap,
    ExternalInstaller,
    GitAlias,
    PipPackage,
    ProfileLine,
    ShellPlugin,
    Symlink,
)
from .settings import MacsetupSettings, get_settings

CORE_FORMULAE = (
    "git",
    "wget",
    "maven",
    "azure-cli",
    "kubectl",
    "kubectx",
    "docker",
    "docker-compose",
    "openjdk@17",
    "python",
    "tmux",
    "iterm2",
    "k9s",
    "1password-cli",
    "nodejs",
    "mkcert",
    "azure-functions-core-tools@4",
)

STRIPE_TAP = "stripe/stripe-cli"
STRIPE_FORMULA = "stripe"

CASK_APPS = (
    "visual-studio-code",
    "docker",
    "intellij-idea",
    "github-desktop",
    "git-fork",
    "microsoft-azure-storage-explorer",
)

PYTHON_PACKAGES = (
    "numpy",
    "pandas",
    "scipy",
    "matplotlib",
    "seaborn",
    "scikit-learn",
    "jupyterlab",
)

ZSH_PLUGINS = (
    "zsh-autosuggestions",
    "zsh-syntax-highlighting",
)

GIT_ALIASES = (
    # Status
    ("s", "status -s"),
    # Staging & committing
    ("a", "add ."),
    ("c", "commit"),
    ("cm", "commit -m"),
    ("ca", "commit -a"),
    ("cam", "commit -a -m"),
    ("amend", "commit --amend --no-edit"),
    # Branching
    ("b", "branch"),
    ("ba", "branch -a"),
    ("bd", "branch -d"),
    ("bD", "branch -D"),
    # Checkout
    ("co", "checkout"),
    ("cb", "checkout -b"),
    ("cob", "checkout -b"),
    # Logging & history
    ("l", "log --oneline --decorate --graph --all"),
    ("ll", "log --pretty=format:'%C(yellow)%h %ad%C(reset) | %s%C(red)%d%C(reset) [%C(green)%an%C(reset)]' --date=short"),
    ("lg", "log --graph --abbrev-commit --decorate --format=format:'%C(bold blue)%h%C(reset) - %C(bold green)(%ar)%C(reset) %C(white)%s%C(reset) %C(dim white)- %an%C(reset)%C(bold yellow)%d%C(reset)' --all"),
    ("hist", "log --pretty=format:'%h %ad | %s%d [%an]' --graph --date=short"),
    # Remotes & fetching
    ("f", "fetch"),
    ("p", "pull"),
    ("ps", "push"),
    ("pf", "push --force-with-lease"),
    # Stashing
    ("st", "stash"),
    ("sta", "stash apply"),
    ("stp", "stash pop"),
    ("stl", "stash list"),
    # Diffs
    ("d", "diff"),
    ("dc", "diff --cached"),
    # Resetting
    ("unstage", "reset HEAD --"),
    ("rh", "reset --hard"),
    ("r1", "reset HEAD~1"),
    # Show
    ("sh", "show"),
)


def workstation_artifacts(settings: MacsetupSettings | None = None) -> list[Artifact]:
    """Build the macOS development workstation manifest.

    Args:
        settings: Paths and executables to use (defaults to global settings)

    Returns:
        Ordered list of artifacts with Homebrew as the bootstrap artifact
    """
    settings = settings or get_settings()
    brew = settings.brew_bin
    prefix = settings.brew_prefix.rstrip("/")
    openjdk = f"{prefix}/opt/openjdk@17"

    artifacts: list[Artifact] = [
        ExternalInstaller(
            name="xcode-command-line-tools",
            description="Xcode Command Line Tools",
            probe=["xcode-select", "-p"],
            install_command=["xcode-select", "--install"],
        ),
        ExternalInstaller(
            name="homebrew",
            description="Homebrew package manager",
            executable=brew,
            install_command=f'/bin/bash -c "$(curl -fsSL {settings.homebrew_install_url})"',
            bootstrap=True,
        ),
    ]

    artifacts += [BrewFormula(name=formula, brew=brew) for formula in CORE_FORMULAE]
    artifacts += [
        BrewTap(name=STRIPE_TAP, brew=brew),
        BrewFormula(name=STRIPE_FORMULA, description="Stripe CLI", brew=brew),
    ]
    artifacts += [BrewCask(name=app, brew=brew) for app in CASK_APPS]

    artifacts += [
        Symlink(
            name="openjdk@17 system JDK",
            link=settings.java_symlink_path,
            target=f"{openjdk}/libexec/openjdk.jdk",
        ),
        ProfileLine(
            name="openjdk@17 PATH",
            path=settings.zprofile_path,
            line=f'export PATH="{openjdk}/bin:$PATH"',
        ),
        ProfileLine(
            name="openjdk@17 CPPFLAGS",
            path=settings.zprofile_path,
            line=f'export CPPFLAGS="-I{openjdk}/include"',
        ),
        ExternalInstaller(
            name="oh-my-zsh",
            description="Oh My Zsh",
            path=settings.ohmyzsh_dir,
            install_command=(
                f'sh -c "$(curl -fsSL {settings.ohmyzsh_install_url})" "" '
                "--unattended --keep-zshrc"
            ),
        ),
    ]

    artifacts += [PipPackage(name=package, pip=settings.pip_bin) for package in PYTHON_PACKAGES]
    artifacts += [ShellPlugin(name=plugin, brew=brew) for plugin in ZSH_PLUGINS]
    artifacts += [
        ProfileLine(
            name=f"{plugin} in .zshrc",
            path=settings.zshrc_path,
            line=f"source {prefix}/share/{plugin}/{plugin}.zsh",
        )
        for plugin in ZSH_PLUGINS
    ]

    return artifacts


def git_alias_artifacts(settings: MacsetupSettings | None = None) -> list[GitAlias]:
    """Build the global Git alias manifest (no bootstrap artifact)."""
    settings = settings or get_settings()
    return [
        GitAlias(name=name, value=value, git=settings.git_bin)
        for name, value in GIT_ALIASES
    ]
