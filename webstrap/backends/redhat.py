# webstrap/backends/redhat.py

import shutil

from webstrap.utils.shell import run

label = "Red Hat"


def manager() -> str:
    """
    Prefer dnf where present (RHEL 8+), fall back to yum.
    """
    return "dnf" if shutil.which("dnf") else "yum"


def installed(package: str) -> bool:
    return run(["rpm", "-q", package], quiet=True)


def refresh(*, dry_run: bool = False) -> bool:
    return run([manager(), "makecache"], sudo=True, dry_run=dry_run)


def install(package: str, *, dry_run: bool = False) -> bool:
    return run([manager(), "install", "-y", package], sudo=True, dry_run=dry_run)
