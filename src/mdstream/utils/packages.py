"""Installed package checks used by ``requires_dependencies``."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdstream/utils/packages.py
from __future__ import annotations

import importlib
from importlib import metadata
from typing import Iterable, NamedTuple, Optional, Tuple

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version


class DependencyProblems(NamedTuple):
    """Outcome of checking a list of required packages.

    Attributes
    ----------
    missing : list of (install_name, version_spec)
        Packages whose module could not be imported
    version_mismatches : list of (install_name, version_spec, installed_version)
        Packages that import but do not satisfy their version spec
    first_import_error : ImportError or None
        The first ImportError seen, kept for the exception chain

    """

    missing: list[tuple[str, str]]
    version_mismatches: list[tuple[str, str, str]]
    first_import_error: Optional[ImportError]

    def __bool__(self) -> bool:
        return bool(self.missing or self.version_mismatches)


def get_package_version(package_name: str) -> Optional[str]:
    """Return the installed version of a distribution, or None if absent."""
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Check if installed package meets version requirement.

    Parameters
    ----------
    package_name : str
        Distribution name of the package
    version_spec : str
        Version specification (e.g., ">=3.0.0")

    Returns
    -------
    tuple
        (meets_requirement, installed_version). An unparsable spec or
        version counts as not met.

    """
    installed_version = get_package_version(package_name)
    if installed_version is None:
        return False, None

    try:
        return Version(installed_version) in SpecifierSet(version_spec), installed_version
    except (InvalidSpecifier, InvalidVersion):
        return False, installed_version


def collect_dependency_problems(packages: Iterable[Tuple[str, str, str]]) -> DependencyProblems:
    """Import each required module and check its version.

    Parameters
    ----------
    packages : iterable of (install_name, import_name, version_spec)
        Required packages; an empty version_spec accepts any version

    Returns
    -------
    DependencyProblems
        Falsy when every package is importable and recent enough

    """
    problems = DependencyProblems(missing=[], version_mismatches=[], first_import_error=None)
    first_error: Optional[ImportError] = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            problems.missing.append((install_name, version_spec))
            first_error = first_error or e
            continue

        if not version_spec:
            continue
        meets, installed_version = check_version_requirement(install_name, version_spec)
        if not meets:
            problems.version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

    return problems._replace(first_import_error=first_error)
