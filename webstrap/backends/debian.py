# webstrap/backends/debian.py

from webstrap.utils.shell import output, run

label = "Debian"

APT_ENV = {"DEBIAN_FRONTEND": "noninteractive"}
INSTALLED = "install ok installed"


def manager() -> str:
    return "apt-get"


def installed(package: str) -> bool:
    """
    Only the "install ok installed" status counts; a removed package whose
    config files remain ("deinstall ok config-files") must be reinstalled.
    """
    status = output(["dpkg-query", "-W", "-f=${Status}", package])
    return status is not None and status.strip() == INSTALLED


def refresh(*, dry_run: bool = False) -> bool:
    return run(["apt-get", "update"], sudo=True, env=APT_ENV, dry_run=dry_run)


def install(package: str, *, dry_run: bool = False) -> bool:
    return run(["apt-get", "install", "-y", package],
               sudo=True, env=APT_ENV, dry_run=dry_run)
