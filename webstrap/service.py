# webstrap/service.py

import logging

import psutil
import requests

from webstrap.utils.config import PROBE_TIMEOUT
from webstrap.utils.shell import run

logger = logging.getLogger("webstrap.service")


def is_enabled(unit: str) -> bool:
    return run(["systemctl", "is-enabled", "--quiet", unit], quiet=True)


def enable(unit: str, *, dry_run: bool = False) -> bool:
    return run(["systemctl", "enable", unit], sudo=True, dry_run=dry_run)


def is_active(unit: str) -> bool:
    return run(["systemctl", "is-active", "--quiet", unit], quiet=True)


def start(unit: str, *, dry_run: bool = False) -> bool:
    return run(["systemctl", "start", unit], sudo=True, dry_run=dry_run)


def running_pids(process: str) -> list[int]:
    """
    PIDs of live processes named `process`, oldest (master) first.
    """
    found = []
    for proc in psutil.process_iter(["pid", "name", "create_time"]):
        if proc.info.get("name") == process:
            found.append((proc.info.get("create_time") or 0, proc.info["pid"]))
    return [pid for _, pid in sorted(found)]


def probe(url: str, timeout: float = PROBE_TIMEOUT) -> int | None:
    """
    GET url and return the HTTP status, or None if nothing answered.
    """
    try:
        r = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        logger.debug("Probe of %s failed: %s", url, e)
        return None
    return r.status_code
