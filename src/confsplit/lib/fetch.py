"""HTTP retrieval: perform one request and return the response body.

Uses a ``requests.Session``; callers that fetch repeatedly can pass their
own session for connection reuse.
"""

from __future__ import annotations

import logging
import os
import platform
from enum import Enum
from http.cookiejar import LoadError, MozillaCookieJar
from urllib.parse import quote

import requests
from requests.auth import AuthBase, HTTPBasicAuth, HTTPDigestAuth

from confsplit.config import PROGRAM_NAME, PROGRAM_VERSION, FetchConfig
from confsplit.errors import FetchError, ValidationError

log = logging.getLogger(__name__)

__all__ = ["HTTPMethod", "get_useragent", "retrieve_url"]


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def from_name(cls, name: str) -> HTTPMethod:
        try:
            return cls(name.upper())
        except ValueError as exc:
            raise ValidationError(f"Unsupported HTTP method: {name!r}") from exc


def get_useragent(config: FetchConfig) -> str:
    """Return the configured User-Agent, or one built from the platform."""
    if config.user_agent:
        return config.user_agent
    system = platform.system()
    machine = platform.machine()
    if system == "Darwin":
        processor = "Intel " if machine in ("x86_64", "i386") else ""
        return f"{PROGRAM_NAME}/{PROGRAM_VERSION} (Macintosh; {processor}Mac OS X)"
    return f"{PROGRAM_NAME}/{PROGRAM_VERSION} ({system} {machine})"


def _auth(authinfo: str, method: str) -> AuthBase:
    user, _, password = authinfo.partition(":")
    method = method.lower()
    if method in ("any", "basic"):
        return HTTPBasicAuth(user, password)
    if method == "digest":
        return HTTPDigestAuth(user, password)
    raise ValidationError(f"Unsupported auth method: {method!r}")


PROXY_SCHEMES = ("http", "socks4", "socks4a", "socks5", "socks5h")


def _proxy_scheme(proxy_type: str | None) -> str | None:
    if not proxy_type:
        return None
    if proxy_type in PROXY_SCHEMES:
        return proxy_type
    log.error("you configured an invalid proxy type: %s", proxy_type)
    return "http"


def _proxy_url(config: FetchConfig) -> str:
    """Build the proxy URL from ``proxy``, ``proxy_type`` and ``proxy_auth``."""
    scheme, sep, rest = config.proxy.partition("://")
    if not sep:
        scheme, rest = "http", config.proxy
    scheme = _proxy_scheme(config.proxy_type) or scheme

    if config.proxy_auth and "@" not in rest:
        method = config.proxy_auth_method.lower()
        if method not in ("any", "basic"):
            raise ValidationError(f"Unsupported proxy auth method: {method!r}")
        user, _, password = config.proxy_auth.partition(":")
        rest = f"{quote(user, safe='')}:{quote(password, safe='')}@{rest}"
    return f"{scheme}://{rest}"


def _verify(config: FetchConfig) -> bool | str:
    if not config.verify_ssl:
        return False
    return config.ca_bundle or os.environ.get("CURL_CA_BUNDLE") or True


def _load_cookies(path: str) -> MozillaCookieJar:
    jar = MozillaCookieJar(path)
    if os.path.exists(path):
        try:
            jar.load(ignore_discard=True, ignore_expires=True)
        except (OSError, LoadError) as exc:
            log.warning("retrieve_url: ignoring unreadable cookie cache %s: %s", path, exc)
    return jar


def _store_cookies(jar: MozillaCookieJar, response: requests.Response) -> None:
    for resp in [*response.history, response]:
        for cookie in resp.cookies:
            jar.set_cookie(cookie)
    try:
        jar.save(ignore_discard=True, ignore_expires=True)
    except OSError as exc:
        log.warning("retrieve_url: could not write cookie cache %s: %s", jar.filename, exc)


def retrieve_url(
    url: str,
    *,
    config: FetchConfig | None = None,
    authinfo: str = "",
    body: str | None = None,
    method: HTTPMethod = HTTPMethod.GET,
    session: requests.Session | None = None,
) -> str:
    """Fetch *url* and return the decoded response body.

    A caller-supplied *session* is never modified: proxies, cookies and TLS
    settings are passed per request, and ``config.max_redirects`` only
    applies to the session created here.

    Parameters
    ----------
    authinfo : str
        ``"user:password"``; empty means no authentication.
    body : str | None
        Request body, sent only when given.

    Raises
    ------
    FetchError
        On connection errors, timeouts, too many redirects, or an HTTP
        error status.
    """
    config = config or FetchConfig()
    owned = session is None
    sess = session if session is not None else requests.Session()
    if owned:
        sess.max_redirects = config.max_redirects

    proxies = None
    if config.proxy:
        proxy = _proxy_url(config)
        proxies = {"http": proxy, "https": proxy}
    auth = _auth(authinfo, config.auth_method) if authinfo else None
    jar = _load_cookies(config.cookie_cache) if config.cookie_cache else None
    headers = {
        "User-Agent": get_useragent(config),
        "Accept-Encoding": "gzip, deflate",
    }
    try:
        response = sess.request(
            method.value,
            url,
            data=body.encode("utf-8") if body is not None else None,
            auth=auth,
            headers=headers,
            cookies=jar,
            proxies=proxies,
            timeout=config.timeout,
            verify=_verify(config),
            allow_redirects=True,
        )
        if jar is not None:
            _store_cookies(jar, response)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"{method.value} {url} failed: {exc}") from exc
    finally:
        if owned:
            sess.close()

    if body is not None:
        log.debug("retrieve_url(%s %s)[%s]: %d bytes", method.value, url, body, len(response.content))
    else:
        log.debug("retrieve_url(%s)[-]: %d bytes", url, len(response.content))
    return response.text
