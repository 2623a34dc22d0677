import pathlib

from webstrap.utils.errors import DetectionError, UsageError

SUPPORTED = ("debian", "redhat")
LABELS = {"debian": "Debian", "redhat": "Red Hat"}


def validate_distro(value: str) -> str:
    # exact match only; "Debian" is rejected on purpose
    if value not in SUPPORTED:
        raise UsageError(
            f'Invalid distro "{value}" (should be either "debian" or "redhat")'
        )
    return value


def read_os_release(path) -> dict:
    data = {}
    try:
        text = pathlib.Path(path).read_text()
    except (OSError, UnicodeDecodeError):
        return data
    for line in text.splitlines():
        line = line.strip()
        if "=" not in line or line.startswith("#"):
            continue
        k, v = line.split("=", 1)
        data[k.strip()] = v.strip().strip('"').strip("'")
    return data


def detect_family(fields: dict) -> str:
    """
    Map ID / ID_LIKE onto a supported family, case-insensitively.
    Debian lineage is checked first.
    """
    id_ = fields.get("ID", "").lower()
    like = fields.get("ID_LIKE", "").lower()
    if any(k in id_ or k in like for k in ("debian", "ubuntu")):
        return "debian"
    if any(k in id_ or k in like for k in ("rhel", "centos")):
        return "redhat"
    raise DetectionError("Distro not provided and autodetection failed. Exiting...")


def detect_distro(path) -> str:
    return detect_family(read_os_release(path))
