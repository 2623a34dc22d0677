# webstrap/provisioner.py

import time

from webstrap import service
from webstrap.backends import get_backend
from webstrap.servers import lookup
from webstrap.utils.config import Settings
from webstrap.utils.console import info, warn
from webstrap.utils.errors import InstallError, ServiceError, handle_errors
from webstrap.utils.osdetect import LABELS, detect_distro


def resolve_distro(settings: Settings) -> str:
    if settings.distro:
        return settings.distro
    info("No distro provided, autodetecting...")
    distro = detect_distro(settings.os_release)
    info(f"{LABELS[distro]} distro detected")
    return distro


def install_package(backend, package: str, dry_run: bool = False):
    """
    Check-then-install. Index refresh is best effort; the install is not.
    """
    if backend.installed(package):
        info(f"{package} already installed, skipping {backend.manager()} install")
        return

    if not backend.refresh(dry_run=dry_run):
        warn("package index refresh failed, attempting to install anyways...")

    if not backend.install(package, dry_run=dry_run):
        raise InstallError(f"{package} failed to install")
    info(f"{package} successfully installed")


def enable_service(unit: str, dry_run: bool = False):
    if service.is_enabled(unit):
        info(f"{unit} already enabled")
        return
    if not service.enable(unit, dry_run=dry_run):
        raise ServiceError(f"{unit} failed to enable")
    info(f"{unit} successfully enabled")


def start_service(unit: str, dry_run: bool = False):
    if service.is_active(unit):
        info(f"{unit} already running")
        return
    if not service.start(unit, dry_run=dry_run):
        raise ServiceError(f"{unit} failed to start")
    info(f"{unit} successfully started")


def report_status(server, settings: Settings):
    pids = service.running_pids(server.process)
    if pids:
        info(f"{server.process} running (pid {', '.join(map(str, pids))})")
    elif not settings.dry_run:
        warn(f"no {server.process} process found")

    if settings.probe_url:
        status = service.probe(settings.probe_url)
        if status is not None and status < 400:
            info(f"{settings.probe_url} answered {status}")
        else:
            warn(f"{settings.probe_url} answered {status or 'nothing'}")


@handle_errors
def provision(settings: Settings):
    distro = resolve_distro(settings)
    backend = get_backend(distro)
    server = lookup(settings.server, distro)

    info(f"{backend.label} distro set or autodetected, installing with {backend.manager()}...")
    install_package(backend, server.package, dry_run=settings.dry_run)

    # let package post-install hooks settle before talking to systemd
    if not settings.dry_run:
        time.sleep(settings.settle_seconds)

    enable_service(server.service, dry_run=settings.dry_run)
    start_service(server.service, dry_run=settings.dry_run)
    report_status(server, settings)

    info(f"{server.package} is installed, started, and enabled. Exiting...")
