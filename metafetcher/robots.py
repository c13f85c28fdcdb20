import logging
import re
import string
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote, urlparse, urlsplit

import requests

from .errors import DecodeError, PolicyParseError
from .fetcher import decode_body, http_get, validate_url

logger = logging.getLogger(__name__)

_AGENT_FIELD = "user-agent"
_RULE_FIELDS = ("allow", "disallow")

_ESCAPE_RE = re.compile(r"%([0-9A-Fa-f]{2})")
_UNRESERVED = frozenset(string.ascii_letters + string.digits + "-._~")
# quote() leaves these alone and encodes the rest (non-ascii, spaces, controls)
_PATH_SAFE = "%/?#[]@!$&'()*+,;=:"


@dataclass(frozen=True)
class RobotsRule:
    allow: bool
    pattern: str

    def matches(self, path: str) -> bool:
        if not self.pattern:
            return False
        return _compile_pattern(self.pattern).match(path) is not None


@dataclass(frozen=True)
class RobotsGroup:
    agents: tuple[str, ...]
    rules: tuple[RobotsRule, ...]


def _compile_pattern(pattern: str) -> re.Pattern:
    """Translate a robots.txt path pattern: '*' is any run, a trailing '$' anchors the end."""
    anchored = pattern.endswith("$")
    if anchored:
        pattern = pattern[:-1]
    regex = ".*".join(re.escape(part) for part in pattern.split("*"))
    return re.compile(regex + ("$" if anchored else ""))


def _product_token(agent: str) -> str:
    # "MetaFetcher/1.0 (+info)" -> "metafetcher"
    return agent.split("/", 1)[0].strip().lower()


def _normalize_path(value: str) -> str:
    """
    Bring paths and patterns to one percent-encoding: escapes of unreserved
    characters are decoded (%7E -> ~), other escapes upper-cased, non-ascii encoded.
    """

    def unescape(match):
        char = chr(int(match.group(1), 16))
        return char if char in _UNRESERVED else "%" + match.group(1).upper()

    return quote(_ESCAPE_RE.sub(unescape, value), safe=_PATH_SAFE)


def _request_path(url: str) -> str:
    # urlsplit keeps ";params" in the path, urlparse would drop them
    parsed = urlsplit(url)
    path = parsed.path or "/"
    if parsed.query:
        path = f"{path}?{parsed.query}"
    return _normalize_path(path)


class RobotsPolicy:
    """
    Parsed robots.txt. Groups naming our agent override the '*' groups;
    inside the chosen groups the longest matching pattern decides.
    """

    def __init__(self, groups: tuple[RobotsGroup, ...] = ()):
        self._groups = tuple(groups)

    @property
    def groups(self) -> tuple[RobotsGroup, ...]:
        return self._groups

    def _rules_for(self, user_agent: str) -> list[RobotsRule]:
        token = _product_token(user_agent)
        specific = [g for g in self._groups if token and token in g.agents]
        chosen = specific or [g for g in self._groups if "*" in g.agents]
        return [rule for group in chosen for rule in group.rules]

    def allowed(self, user_agent: str, url: str) -> bool:
        path = _request_path(url)
        if path == "/robots.txt":
            return True

        best: Optional[RobotsRule] = None
        for rule in self._rules_for(user_agent):
            if not rule.matches(path):
                continue
            if best is None or len(rule.pattern) > len(best.pattern):
                best = rule
            elif len(rule.pattern) == len(best.pattern) and rule.allow:
                best = rule
        return True if best is None else best.allow


def parse_policy(text: str) -> RobotsPolicy:
    """
    Parse robots.txt text into a RobotsPolicy.

    Unknown fields, lines without a colon and rules that appear before any
    user-agent line are ignored. Binary content raises PolicyParseError.
    """
    if "\x00" in text:
        raise PolicyParseError("robots.txt contains binary data")
    # a leading byte-order mark would hide the first field name
    text = text.lstrip("\ufeff")

    groups: list[RobotsGroup] = []
    agents: list[str] = []
    rules: list[RobotsRule] = []
    in_rules = False

    def close_group():
        if agents:
            groups.append(RobotsGroup(agents=tuple(agents), rules=tuple(rules)))

    for raw_line in text.splitlines():
        line = raw_line.split("#", 1)[0].strip()
        if ":" not in line:
            continue
        field, value = (part.strip() for part in line.split(":", 1))
        field = field.lower()

        if field == _AGENT_FIELD:
            # a user-agent line after rules starts a fresh group
            if in_rules:
                close_group()
                agents, rules, in_rules = [], [], False
            token = "*" if value == "*" else _product_token(value)
            if token:
                agents.append(token)
        elif field in _RULE_FIELDS:
            if not agents:
                continue
            in_rules = True
            rules.append(RobotsRule(allow=field == "allow", pattern=_normalize_path(value)))

    close_group()
    return RobotsPolicy(tuple(groups))


def resolve_robots_url(url: str) -> str:
    """Pure URL transform: https://host:port/any/path?q -> https://host:port/robots.txt"""
    parsed = urlparse(validate_url(url))
    return f"{parsed.scheme}://{parsed.netloc}/robots.txt"


def retrieve_robots(url: str, user_agent: str) -> Optional[str]:
    """
    Download robots.txt for the URL's origin.
    Returns None when it can't be retrieved: the site is then treated as unrestricted.
    """
    robots_url = resolve_robots_url(url)
    try:
        response = http_get(robots_url, user_agent)
    except requests.RequestException as exc:
        logger.debug("robots.txt unreachable at %s, assuming allowed: %s", robots_url, exc)
        return None

    if not 200 <= response.status_code < 300:
        logger.debug("robots.txt at %s returned %d, assuming allowed", robots_url, response.status_code)
        return None

    try:
        return decode_body(response)
    except DecodeError as exc:
        raise PolicyParseError(f"robots.txt at {robots_url} is not text") from exc


def is_fetch_allowed(url: str, user_agent: str) -> bool:
    """Resolve, retrieve and evaluate robots.txt for a single URL."""
    text = retrieve_robots(url, user_agent)
    if text is None:
        return True
    allowed = parse_policy(text).allowed(user_agent, url)
    logger.debug("robots.txt %s %s for %s", "allows" if allowed else "disallows", url, user_agent)
    return allowed
