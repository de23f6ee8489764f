"""Proxy: a filtering stand-in in front of the real connection."""

from __future__ import annotations

from typing import Protocol

from ..registry import scenario


class Internet(Protocol):
    def connect_to(self, url: str) -> None: ...


class RealInternet:
    def connect_to(self, url: str) -> None:
        print(f"Connecting to {url}")


class InternetProxy:
    # fixed list, not configurable
    BANNED_SITES = ("restricted.com", "blocked.org")

    def __init__(self, real_internet: Internet) -> None:
        self._real_internet = real_internet

    def connect_to(self, url: str) -> None:
        if url in self.BANNED_SITES:
            print(f"Access to {url} is restricted.")
        else:
            self._real_internet.connect_to(url)


@scenario("proxy", category="structural", title="Proxy")
def main() -> None:
    proxy = InternetProxy(RealInternet())
    for url in ("open.com", "restricted.com", "allowed.com", "blocked.org"):
        proxy.connect_to(url)


if __name__ == "__main__":
    main()

### OUTPUT ###
# Connecting to open.com
# Access to restricted.com is restricted.
# Connecting to allowed.com
# Access to blocked.org is restricted.
