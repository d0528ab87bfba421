"""
Pydantic models for provisioning runs.

- ArtifactKind / Category classify what an artifact is
- Outcome records what happened to one artifact in one run
- ProvisionReport is the ordered result of a whole run
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Core Enums
# =============================================================================

class Category(str, Enum):
    """Report grouping: software that gets installed vs. system configuration."""
    INSTALL = "install"
    CONFIG = "config"


class ArtifactKind(str, Enum):
    """Supported artifact kinds."""
    BREW_FORMULA = "brew-formula"
    BREW_CASK = "brew-cask"
    BREW_TAP = "brew-tap"
    PIP_PACKAGE = "pip-package"
    SHELL_PLUGIN = "shell-plugin"
    PROFILE_LINE = "profile-line"
    SYMLINK = "symlink"
    EXTERNAL_INSTALLER = "external-installer"
    GIT_ALIAS = "git-alias"

    @property
    def category(self) -> Category:
        if self in _CONFIG_KINDS:
            return Category.CONFIG
        return Category.INSTALL


_CONFIG_KINDS = frozenset({
    ArtifactKind.PROFILE_LINE,
    ArtifactKind.SYMLINK,
    ArtifactKind.GIT_ALIAS,
})


class OutcomeStatus(str, Enum):
    """Result of provisioning one artifact."""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


# =============================================================================
# Run Results
# =============================================================================

class Outcome(BaseModel):
    """What happened to one artifact during a run.

    Attributes:
        name: Artifact name
        kind: Artifact kind
        status: success, failed or skipped
        exit_code: Raw exit status of the install procedure (None when skipped)
        detail: Short diagnostic text for failures
    """

    model_config = ConfigDict(frozen=True)

    name: str
    kind: ArtifactKind
    status: OutcomeStatus
    exit_code: int | None = None
    detail: str | None = None

    @property
    def category(self) -> Category:
        return self.kind.category


# Section order of the end-of-run report
REPORT_SECTIONS: tuple[tuple[OutcomeStatus, Category, str], ...] = (
    (OutcomeStatus.SUCCESS, Category.INSTALL, "Successful installs"),
    (OutcomeStatus.SUCCESS, Category.CONFIG, "Successful configs"),
    (OutcomeStatus.FAILED, Category.INSTALL, "Failed installs"),
    (OutcomeStatus.FAILED, Category.CONFIG, "Failed configs"),
    (OutcomeStatus.SKIPPED, Category.INSTALL, "Skipped installs"),
    (OutcomeStatus.SKIPPED, Category.CONFIG, "Skipped configs"),
)


class ProvisionReport(BaseModel):
    """Ordered outcomes of one provisioning run.

    Attributes:
        requested: Number of artifacts the run was asked to provision
        outcomes: One Outcome per processed artifact, in run order
        halted: True when the bootstrap artifact failed and the run stopped early
    """

    requested: int = 0
    outcomes: list[Outcome] = Field(default_factory=list)
    halted: bool = False

    def add(self, outcome: Outcome) -> None:
        self.outcomes.append(outcome)

    def with_status(self, status: OutcomeStatus) -> list[Outcome]:
        return [o for o in self.outcomes if o.status == status]

    def names(self, status: OutcomeStatus, category: Category) -> list[str]:
        """Names of artifacts with the given status in the given category, in run order."""
        return [
            o.name for o in self.outcomes
            if o.status == status and o.category == category
        ]

    def sections(self) -> list[tuple[OutcomeStatus, str, list[str]]]:
        """The six report sections as (status, title, artifact names) triples."""
        return [
            (status, title, self.names(status, category))
            for status, category, title in REPORT_SECTIONS
        ]

    @property
    def succeeded(self) -> list[Outcome]:
        return self.with_status(OutcomeStatus.SUCCESS)

    @property
    def failed(self) -> list[Outcome]:
        return self.with_status(OutcomeStatus.FAILED)

    @property
    def skipped(self) -> list[Outcome]:
        return self.with_status(OutcomeStatus.SKIPPED)

    @property
    def complete(self) -> bool:
        """True when every requested artifact produced an outcome."""
        return not self.halted and len(self.outcomes) == self.requested
