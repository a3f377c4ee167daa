"""
WireMock Stubs Stub Rule

Fluent builder for WireMock stub mappings.

A StubRule collects a request pattern, a canned response and optional
scenario fields, then serializes itself into the JSON document accepted by
WireMock's /__admin/mappings endpoint (or its mappings directory).

Example:
    rule = (
        post(url_equal_to("/things"))
        .with_header("X-Key", equal_to("abc"))
        .will_return("{}", {"Content-Type": "application/json"}, 201)
    )
    payload = rule.to_json()
"""

import json
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional

from .matching import URLMatcher, ParamMatcher

SCENARIO_STATE_STARTED = "Started"

METHOD_GET = "GET"
METHOD_POST = "POST"
METHOD_PUT = "PUT"
METHOD_DELETE = "DELETE"


def _named_matchers(matchers: Dict[str, ParamMatcher]) -> Dict[str, Dict[str, str]]:
    return {name: matcher.to_dict() for name, matcher in matchers.items()}


@dataclass
class RequestSpec:
    """Request half of a stub rule."""

    method: str
    url_matcher: URLMatcher
    # Named matchers stay None until first use
    headers: Optional[Dict[str, ParamMatcher]] = None
    cookies: Optional[Dict[str, ParamMatcher]] = None
    query_params: Optional[Dict[str, ParamMatcher]] = None
    body_patterns: List[ParamMatcher] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """
        Build the request object of the mapping.

        Also usable on its own as a request-journal query
        (find/count requests on the admin API).

        Returns:
            Dict with method, URL key and any non-empty matcher groups
        """
        request: Dict[str, Any] = {
            "method": self.method,
            self.url_matcher.strategy.value: self.url_matcher.value,
        }

        if self.body_patterns:
            request["bodyPatterns"] = [pattern.to_dict() for pattern in self.body_patterns]
        if self.headers:
            request["headers"] = _named_matchers(self.headers)
        if self.cookies:
            request["cookies"] = _named_matchers(self.cookies)
        if self.query_params:
            request["queryParameters"] = _named_matchers(self.query_params)

        return request

    def to_json(self, **json_kwargs) -> str:
        return json.dumps(self.to_dict(), **json_kwargs)


@dataclass
class ResponseSpec:
    """Response half of a stub rule."""

    body: str = ""
    headers: Optional[Dict[str, str]] = None
    status: int = 200

    def to_dict(self) -> Dict[str, Any]:
        response: Dict[str, Any] = {}
        if self.body:
            response["body"] = self.body
        if self.headers:
            response["headers"] = dict(self.headers)
        response["status"] = self.status
        return response


class StubRule:
    """
    Mutable builder for a single WireMock stub mapping.

    Every with_/will_/at_/in_/when_ method mutates the rule in place and
    returns it, so calls can be chained. Optional fields stay None until set;
    None fields are left out of the serialized document, while explicit
    values (including priority 0) are written.

    Not safe for concurrent mutation. Serializing a finished rule only reads.
    """

    def __init__(self, method: str, url_matcher: URLMatcher):
        """
        Initialize stub rule.

        Args:
            method: HTTP method to match (GET, POST, ...)
            url_matcher: URL matcher, fixed for the lifetime of the rule
        """
        self.request = RequestSpec(method=method, url_matcher=url_matcher)
        self.response = ResponseSpec()
        self.priority: Optional[int] = None
        self.scenario_name: Optional[str] = None
        self.required_scenario_state: Optional[str] = None
        self.new_scenario_state: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"StubRule({self.request.method} "
            f"{self.request.url_matcher.strategy.value}={self.request.url_matcher.value!r})"
        )

    def with_query_param(self, param: str, matcher: ParamMatcher) -> 'StubRule':
        """Match a query parameter. Replaces any matcher set for the same name."""
        if self.request.query_params is None:
            self.request.query_params = {}
        self.request.query_params[param] = matcher
        return self

    def with_header(self, header: str, matcher: ParamMatcher) -> 'StubRule':
        """Match a request header. Replaces any matcher set for the same name."""
        if self.request.headers is None:
            self.request.headers = {}
        self.request.headers[header] = matcher
        return self

    def with_cookie(self, cookie: str, matcher: ParamMatcher) -> 'StubRule':
        """Match a cookie. Replaces any matcher set for the same name."""
        if self.request.cookies is None:
            self.request.cookies = {}
        self.request.cookies[cookie] = matcher
        return self

    def with_body_pattern(self, matcher: ParamMatcher) -> 'StubRule':
        """
        Add a body pattern.

        Patterns accumulate in insertion order and are not deduplicated;
        WireMock requires all of them to match.
        """
        self.request.body_patterns.append(matcher)
        return self

    def will_return(self, body: str, headers: Optional[Dict[str, str]], status: int) -> 'StubRule':
        """Replace the whole response (body, headers and status)."""
        self.response = ResponseSpec(body=body, headers=headers, status=status)
        return self

    def at_priority(self, priority: int) -> 'StubRule':
        self.priority = priority
        return self

    def in_scenario(self, scenario_name: str) -> 'StubRule':
        self.scenario_name = scenario_name
        return self

    def when_scenario_state_is(self, scenario_state: str) -> 'StubRule':
        self.required_scenario_state = scenario_state
        return self

    def will_set_state_to(self, scenario_state: str) -> 'StubRule':
        self.new_scenario_state = scenario_state
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        Build the mapping document as plain dicts and lists.

        Returns:
            Dict ready to hand to any JSON encoder
        """
        stub: Dict[str, Any] = {}

        optional_fields = (
            ("priority", self.priority),
            ("scenarioName", self.scenario_name),
            ("requiredScenarioState", self.required_scenario_state),
            ("newScenarioState", self.new_scenario_state),
        )
        for key, value in optional_fields:
            if value is not None:
                stub[key] = value

        stub["request"] = self.request.to_dict()
        stub["response"] = self.response.to_dict()
        return stub

    def to_json(self, **json_kwargs) -> str:
        """
        Encode the mapping as JSON.

        Args:
            **json_kwargs: Passed through to json.dumps (indent, sort_keys, ...)

        Raises:
            TypeError: If a stored value cannot be encoded
        """
        return json.dumps(self.to_dict(), **json_kwargs)


def new_stub_rule(method: str, url_matcher: URLMatcher) -> StubRule:
    return StubRule(method, url_matcher)


def get(url_matcher: URLMatcher) -> StubRule:
    return StubRule(METHOD_GET, url_matcher)


def post(url_matcher: URLMatcher) -> StubRule:
    return StubRule(METHOD_POST, url_matcher)


def put(url_matcher: URLMatcher) -> StubRule:
    return StubRule(METHOD_PUT, url_matcher)


def delete(url_matcher: URLMatcher) -> StubRule:
    return StubRule(METHOD_DELETE, url_matcher)
