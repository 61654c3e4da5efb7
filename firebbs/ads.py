"""Advertisement list stored as ``href,img_src`` lines, and click logging."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Union

MAX_ADS = 10
_FIELD_LIMIT = 254
_LINE_LIMIT = 254
_UPDATE_LIMIT = 2549
_URL_LIMIT = 255
_LOG_LIMIT = 255
_TIME_LIMIT = 49

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Ad:
    """One advertisement: where it links to and the image it shows."""

    href: str
    img_src: str = ""


def _split_line(line: str) -> Ad | None:
    stripped = line.lstrip(",")
    if not stripped.strip():
        return None
    href, sep, rest = stripped.partition(",")
    if not sep:
        return Ad(href.rstrip("\r\n")[:_FIELD_LIMIT], "")
    rest = rest.lstrip("\r\n")
    end = min((i for i in (rest.find("\r"), rest.find("\n")) if i >= 0), default=len(rest))
    return Ad(href[:_FIELD_LIMIT], rest[:end][:_FIELD_LIMIT])


def read_ads(path: PathLike) -> list[Ad]:
    """Read the advertisements from the file at ``path``."""
    ads: list[Ad] = []
    with open(path, encoding="utf-8", errors="surrogateescape") as handle:
        for line in handle:
            for start in range(0, len(line), _LINE_LIMIT):
                ad = _split_line(line[start:start + _LINE_LIMIT])
                if ad is None:
                    continue
                if len(ads) >= MAX_ADS:
                    raise ValueError(f"more than {MAX_ADS} advertisements")
                ads.append(ad)
    return ads


def write_ads(path: PathLike, ads: Iterable[Ad]) -> None:
    """Write ``ads`` to the file at ``path``, one ``href,img_src`` line each."""
    with open(path, "w", encoding="utf-8", errors="surrogateescape") as handle:
        for ad in ads:
            handle.write(f"{ad.href},{ad.img_src}\n")


def parse_ad_update(hrefs: str, img_srcs: str) -> list[Ad]:
    """Pair up the ``;``-separated links and images of an update request."""
    links = [part[:_FIELD_LIMIT] for part in hrefs[:_UPDATE_LIMIT].split(";") if part]
    if len(links) > MAX_ADS:
        raise ValueError(f"more than {MAX_ADS} advertisements")
    images = [part[:_FIELD_LIMIT] for part in img_srcs[:_UPDATE_LIMIT].split(";") if part]
    images += [""] * (len(links) - len(images))
    return [Ad(href, img) for href, img in zip(links, images)]


def format_click_log(when: Union[datetime, float], host: str, url: str) -> str:
    """One click-log line: ``[time] [client host]: url`` and a newline."""
    stamp = when.ctime() if isinstance(when, datetime) else time.ctime(when)
    stamp = stamp[:_TIME_LIMIT]
    line = f"[{stamp}] [client {host}]: {url[:_URL_LIMIT]}\n"
    return line[:_LOG_LIMIT]