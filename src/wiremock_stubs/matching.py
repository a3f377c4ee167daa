"""
WireMock Stubs Matching Strategies

Matcher value objects used to describe how a stub rule matches a request.

Two separate families exist:
- URL matchers: match the whole request URL or path (url, urlPath, ...)
- Param matchers: match a named header, cookie, query parameter or the body

The tag vocabularies are kept apart because WireMock uses different keys
for "match the URL" and "match a named field".
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Any


class URLMatchingStrategy(str, Enum):
    """Tags for matching the request URL."""

    EQUAL_TO = "url"
    PATH_EQUAL_TO = "urlPath"
    PATH_MATCHING = "urlPathPattern"
    MATCHING = "urlPattern"


class ParamMatchingStrategy(str, Enum):
    """Tags for matching headers, cookies, query parameters and bodies."""

    EQUAL_TO = "equalTo"
    MATCHES = "matches"
    CONTAINS = "contains"
    EQUAL_TO_XML = "equalToXml"
    EQUAL_TO_JSON = "equalToJson"
    MATCHES_XPATH = "matchesXPath"
    MATCHES_JSON_PATH = "matchesJsonPath"
    ABSENT = "absent"
    DOES_NOT_MATCH = "doesNotMatch"


def _single_entry(data: Any, kind: str) -> tuple:
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError(
            f"{kind} must be a mapping with exactly one strategy key, got {data!r}"
        )
    tag, value = next(iter(data.items()))
    if value is None:
        raise ValueError(f"{kind} {tag!r} has no value")
    return tag, value


@dataclass(frozen=True)
class URLMatcher:
    """Pair of URL matching strategy and the matched value."""

    strategy: URLMatchingStrategy
    value: str

    def to_dict(self) -> Dict[str, str]:
        """Return the {strategy: value} fragment."""
        return {self.strategy.value: self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'URLMatcher':
        """
        Build a URL matcher from its wire form, e.g. {"urlPath": "/things"}.

        Raises:
            ValueError: If the mapping is not a single known URL strategy
        """
        tag, value = _single_entry(data, "URL matcher")
        try:
            strategy = URLMatchingStrategy(tag)
        except ValueError:
            raise ValueError(f"Unknown URL matching strategy: {tag!r}") from None
        return cls(strategy, str(value))


@dataclass(frozen=True)
class ParamMatcher:
    """Pair of parameter matching strategy and the matched value."""

    strategy: ParamMatchingStrategy
    value: str

    def to_dict(self) -> Dict[str, str]:
        """Return the {strategy: value} fragment."""
        return {self.strategy.value: self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParamMatcher':
        """
        Build a parameter matcher from its wire form, e.g. {"equalTo": "abc"}.

        Raises:
            ValueError: If the mapping is not a single known parameter strategy
        """
        tag, value = _single_entry(data, "Parameter matcher")
        try:
            strategy = ParamMatchingStrategy(tag)
        except ValueError:
            raise ValueError(f"Unknown parameter matching strategy: {tag!r}") from None
        return cls(strategy, str(value))


# URL matchers

def url_equal_to(url: str) -> URLMatcher:
    """Match the full URL (path and query) exactly."""
    return URLMatcher(URLMatchingStrategy.EQUAL_TO, url)


def url_path_equal_to(path: str) -> URLMatcher:
    """Match the URL path exactly, ignoring the query string."""
    return URLMatcher(URLMatchingStrategy.PATH_EQUAL_TO, path)


def url_path_matching(pattern: str) -> URLMatcher:
    """Match the URL path against a regex."""
    return URLMatcher(URLMatchingStrategy.PATH_MATCHING, pattern)


def url_matching(pattern: str) -> URLMatcher:
    """Match the full URL against a regex."""
    return URLMatcher(URLMatchingStrategy.MATCHING, pattern)


# Parameter matchers

def equal_to(value: str) -> ParamMatcher:
    return ParamMatcher(ParamMatchingStrategy.EQUAL_TO, value)


def matching(pattern: str) -> ParamMatcher:
    return ParamMatcher(ParamMatchingStrategy.MATCHES, pattern)


def contains(value: str) -> ParamMatcher:
    return ParamMatcher(ParamMatchingStrategy.CONTAINS, value)


def equal_to_xml(xml: str) -> ParamMatcher:
    return ParamMatcher(ParamMatchingStrategy.EQUAL_TO_XML, xml)


def equal_to_json(json_text: str) -> ParamMatcher:
    return ParamMatcher(ParamMatchingStrategy.EQUAL_TO_JSON, json_text)


def matching_xpath(xpath: str) -> ParamMatcher:
    return ParamMatcher(ParamMatchingStrategy.MATCHES_XPATH, xpath)


def matching_json_path(json_path: str) -> ParamMatcher:
    return ParamMatcher(ParamMatchingStrategy.MATCHES_JSON_PATH, json_path)


def not_matching(pattern: str) -> ParamMatcher:
    return ParamMatcher(ParamMatchingStrategy.DOES_NOT_MATCH, pattern)
