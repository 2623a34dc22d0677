from webstrap.backends import debian, redhat
from webstrap.utils.errors import InternalError

BACKENDS = {
    "debian": debian,
    "redhat": redhat,
}


def get_backend(family: str):
    try:
        return BACKENDS[family]
    except KeyError:
        raise InternalError(
            f'Unsupported distro "{family}" passed, parameter validation is probably broken. Exiting...'
        ) from None
