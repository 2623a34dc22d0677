# webstrap/utils/config.py

from dataclasses import dataclass

OS_RELEASE = "/etc/os-release"
SETTLE_SECONDS = 1.0
PROBE_TIMEOUT = 5


@dataclass(frozen=True)
class Settings:
    distro: str | None = None
    server: str = "nginx"
    dry_run: bool = False
    verbose: bool = False
    os_release: str = OS_RELEASE
    settle_seconds: float = SETTLE_SECONDS
    probe_url: str | None = None

    @classmethod
    def from_args(cls, args):
        return cls(
            distro=args.distro,
            server=args.server,
            dry_run=args.dry_run,
            verbose=args.verbose,
            os_release=args.os_release,
            probe_url=args.probe_url,
        )
