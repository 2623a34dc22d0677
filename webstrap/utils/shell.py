# webstrap/utils/shell.py

import logging
import os
import shlex
import subprocess

from webstrap.utils import console

logger = logging.getLogger("webstrap.shell")


def needs_sudo() -> bool:
    return os.geteuid() != 0


def build_argv(argv: list[str], sudo: bool = False, env: dict | None = None) -> list[str]:
    """
    Return the argv actually executed: `sudo env K=V ... cmd` when elevating,
    the bare command otherwise (env is then passed to the child directly).
    """
    argv = list(argv)
    if sudo and needs_sudo():
        assigns = [f"{k}={v}" for k, v in (env or {}).items()]
        return ["sudo", *(["env", *assigns] if assigns else []), *argv]
    return argv


def run(argv: list[str], *, sudo: bool = False, quiet: bool = False,
        env: dict | None = None, dry_run: bool = False) -> bool:
    """
    Run a command and report success purely by exit status.
    A command that cannot be started at all counts as a failure.
    """
    cmd = build_argv(argv, sudo=sudo, env=env)
    line = " ".join(shlex.quote(a) for a in cmd)

    if dry_run:
        console.info(f"(dry run) {line}")
        return True

    logger.debug("CMD %s", line)
    out = subprocess.DEVNULL if quiet else None
    try:
        rc = subprocess.call(cmd, stdout=out, stderr=out,
                             env=dict(os.environ, **(env or {})))
    except OSError as e:
        logger.debug("Could not run %s → %s", line, e)
        return False
    logger.debug("RC %s ← %s", rc, line)
    return rc == 0


def output(argv: list[str]) -> str | None:
    """
    Stdout of a read-only query, or None if it could not run or exited non-zero.
    """
    line = " ".join(shlex.quote(a) for a in argv)
    logger.debug("CMD %s", line)
    try:
        return subprocess.check_output(argv, stderr=subprocess.DEVNULL, text=True)
    except (OSError, subprocess.CalledProcessError) as e:
        logger.debug("Query failed %s → %s", line, e)
        return None
