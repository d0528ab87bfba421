"""Load artifact manifests from user Python files."""

import importlib.util
import logging
from pathlib import Path

from .artifacts.base import Artifact
from .errors import ManifestError

logger = logging.getLogger(__name__)


def load_artifacts(manifest_file: Path) -> list[Artifact]:
    """
    Load artifacts from a manifest file by executing it.

    Every Artifact bound at module level is collected in definition order;
    lists and tuples of artifacts are flattened in place, so a manifest can
    build groups with comprehensions. An artifact bound both by name and in a
    group is collected once, at its first appearance:

        homebrew = ExternalInstaller(name="homebrew", executable="brew", ...)
        tools = [BrewFormula(name=n) for n in ("jq", "htop")]

    Args:
        manifest_file: Path to the manifest .py file

    Returns:
        List of Artifact objects

    Raises:
        ManifestError: If the file is missing, fails to execute or declares no artifacts
    """
    if not manifest_file.exists():
        raise ManifestError(f"File not found: {manifest_file}")

    # Load the module dynamically
    spec = importlib.util.spec_from_file_location("macsetup_manifest", manifest_file)
    if spec is None or spec.loader is None:
        raise ManifestError(f"Could not load {manifest_file}")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise ManifestError(f"Error executing {manifest_file}: {e}") from e

    artifacts = []
    seen = set()
    for name, obj in vars(module).items():
        if isinstance(obj, Artifact):
            group = [obj]
            logger.debug(f"Found artifact: {name} ({obj})")
        elif isinstance(obj, (list, tuple)) and obj and all(isinstance(a, Artifact) for a in obj):
            group = list(obj)
            logger.debug(f"Found artifact group: {name} ({len(obj)} artifacts)")
        else:
            continue

        # The same object bound twice (by name and in a group) is collected once
        for artifact in group:
            if id(artifact) not in seen:
                seen.add(id(artifact))
                artifacts.append(artifact)

    if not artifacts:
        raise ManifestError(f"No artifacts found in {manifest_file}")

    logger.info(f"Loaded {len(artifacts)} artifacts from {manifest_file}")
    return artifacts
