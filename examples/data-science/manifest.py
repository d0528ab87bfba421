"""
Data Science - Python packages on top of an existing Homebrew Python.

No bootstrap artifact: a failed install is reported and the run continues.

Run: macsetup provision --manifest examples/data-science/manifest.py
"""

from macsetup.artifacts import BrewCask, BrewFormula, PipPackage

python = BrewFormula(name="python")

packages = [
    PipPackage(name=name)
    for name in ("numpy", "pandas", "scipy", "matplotlib", "seaborn", "scikit-learn", "jupyterlab")
]

notebook_app = BrewCask(name="jupyterlab")
