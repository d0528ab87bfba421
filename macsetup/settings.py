"""
macsetup Settings - Configuration management using Pydantic Settings.

Loads configuration from environment variables and .env files.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MacsetupSettings(BaseSettings):
    """
    macsetup configuration settings.

    Settings are loaded from:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values (lowest priority)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="MACSETUP_",  # All macsetup env vars must start with MACSETUP_
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR) (env: MACSETUP_LOG_LEVEL)",
    )

    # Locations on the workstation
    home: Path = Field(
        default_factory=Path.home,
        description="Home directory whose shell profiles are edited (env: MACSETUP_HOME)",
    )

    zprofile: Path | None = Field(
        default=None,
        description="Login shell profile, defaults to <home>/.zprofile (env: MACSETUP_ZPROFILE)",
    )

    zshrc: Path | None = Field(
        default=None,
        description="Interactive shell rc file, defaults to <home>/.zshrc (env: MACSETUP_ZSHRC)",
    )

    brew_prefix: str = Field(
        default="/opt/homebrew",
        description="Homebrew installation prefix (env: MACSETUP_BREW_PREFIX)",
    )

    java_symlink_path: Path = Field(
        default=Path("/Library/Java/JavaVirtualMachines/openjdk-17.jdk"),
        description="System JDK symlink pointing at Homebrew's openjdk@17 (env: MACSETUP_JAVA_SYMLINK_PATH)",
    )

    # External installers
    homebrew_install_url: str = Field(
        default="https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh",
        description="Homebrew installer script (env: MACSETUP_HOMEBREW_INSTALL_URL)",
    )

    ohmyzsh_install_url: str = Field(
        default="https://raw.githubusercontent.com/ohmyzsh/ohmyzsh/master/tools/install.sh",
        description="Oh My Zsh installer script (env: MACSETUP_OHMYZSH_INSTALL_URL)",
    )

    # Tool executables
    brew_bin: str = Field(default="brew", description="Homebrew executable (env: MACSETUP_BREW_BIN)")
    pip_bin: str = Field(default="pip3", description="pip executable (env: MACSETUP_PIP_BIN)")
    git_bin: str = Field(default="git", description="Git executable (env: MACSETUP_GIT_BIN)")

    @property
    def zprofile_path(self) -> Path:
        return self.zprofile or self.home / ".zprofile"

    @property
    def zshrc_path(self) -> Path:
        return self.zshrc or self.home / ".zshrc"

    @property
    def ohmyzsh_dir(self) -> Path:
        return self.home / ".oh-my-zsh"


# Global settings instance
_settings: MacsetupSettings | None = None


def get_settings() -> MacsetupSettings:
    """
    Get the global settings instance.

    Creates the settings instance on first call, then returns cached instance.

    Returns:
        MacsetupSettings instance
    """
    global _settings
    if _settings is None:
        _settings = MacsetupSettings()
    return _settings


def reload_settings() -> MacsetupSettings:
    """
    Reload settings from environment/files.

    Useful for testing or when .env file changes.

    Returns:
        Fresh MacsetupSettings instance
    """
    global _settings
    _settings = MacsetupSettings()
    return _settings
