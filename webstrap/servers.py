# webstrap/servers.py

from typing import NamedTuple

from webstrap.utils.errors import UsageError


class WebServer(NamedTuple):
    package: str
    service: str
    process: str


SERVERS = {
    "nginx": {
        "debian": WebServer("nginx", "nginx", "nginx"),
        "redhat": WebServer("nginx", "nginx", "nginx"),
    },
    "apache": {
        "debian": WebServer("apache2", "apache2", "apache2"),
        "redhat": WebServer("httpd", "httpd", "httpd"),
    },
}


def lookup(server: str, family: str) -> WebServer:
    try:
        return SERVERS[server][family]
    except KeyError:
        raise UsageError(f'No "{server}" web server known for {family}') from None
