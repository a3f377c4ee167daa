"""
WireMock Stubs Definition Loader

Builds StubRule objects from YAML or JSON definition files.

Supported layouts:
- Format 1: {"stubs": [...]}  (wrapped format)
- Format 2: [...]             (direct list format)

Each entry uses WireMock's own key names:

    stubs:
      - name: create_thing
        method: POST
        url: /things
        headers:
          X-Key: {equalTo: abc}
        bodyPatterns:
          - {matchesJsonPath: "$.name"}
        response:
          status: 201
          body: "{}"
          headers: {Content-Type: application/json}
        scenarioName: flow
        requiredScenarioState: Started
        newScenarioState: next
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Dict, Any, Optional

import yaml

from ..matching import URLMatcher, ParamMatcher, URLMatchingStrategy
from ..stub_rule import StubRule

logger = logging.getLogger("wiremock_stubs.export")

URL_KEYS = tuple(strategy.value for strategy in URLMatchingStrategy)

# Named matcher groups: definition key -> builder method name
NAMED_MATCHER_GROUPS = {
    'headers': 'with_header',
    'cookies': 'with_cookie',
    'queryParameters': 'with_query_param',
}


@dataclass
class StubDefinition:
    """A stub rule plus the name used when exporting it."""

    rule: StubRule
    name: Optional[str] = None


class StubDefinitionLoader:
    """
    Loader for stub definition files.

    Example:
        loader = StubDefinitionLoader("stubs.yaml")
        for definition in loader.load():
            print(definition.name, definition.rule.to_json())
    """

    def __init__(self, file_path: str):
        """
        Initialize definition loader.

        Args:
            file_path: Path to a .yaml, .yml or .json definition file
        """
        self.file_path = Path(file_path)

    def load(self) -> List[StubDefinition]:
        """
        Load and build all stub definitions.

        Returns:
            List of StubDefinition in file order

        Raises:
            FileNotFoundError: If the definition file doesn't exist
            ValueError: If the document or one of its entries is malformed
        """
        if not self.file_path.exists():
            raise FileNotFoundError(f"Definition file not found: {self.file_path}")

        entries = self._extract_entries(self._read())

        definitions = []
        for index, entry in enumerate(entries):
            try:
                definitions.append(build_definition(entry))
            except ValueError as e:
                raise ValueError(f"Invalid stub #{index} in {self.file_path}: {e}") from e

        logger.info(f"Loaded {len(definitions)} stub definitions from {self.file_path}")
        return definitions

    @staticmethod
    def load_from_file(file_path: str) -> List[StubDefinition]:
        """Convenience method to load definitions in one call."""
        return StubDefinitionLoader(file_path).load()

    def _read(self) -> Any:
        with open(self.file_path, 'r', encoding='utf-8') as f:
            if self.file_path.suffix.lower() == '.json':
                return json.load(f)
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.file_path}: {e}") from e

    def _extract_entries(self, data: Any) -> List[Any]:
        if isinstance(data, dict):
            if 'stubs' in data:
                data = data['stubs']
            elif 'mappings' in data:
                data = data['mappings']
            else:
                raise ValueError(
                    f"Unexpected format in {self.file_path}. "
                    f"Expected dict with 'stubs' or 'mappings' key, "
                    f"or a list of stubs. Found keys: {list(data.keys())}"
                )

        if not isinstance(data, list):
            raise ValueError(
                f"Unexpected format in {self.file_path}. "
                f"Expected dict or list, got {type(data).__name__}"
            )
        return data


def _as_int(value: Any, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{field_name}' must be an integer, got {value!r}") from None


def build_definition(entry: Dict[str, Any]) -> StubDefinition:
    """
    Build a single StubDefinition from a definition entry.

    Accepts both the flat layout (method/url at top level) and WireMock's
    nested {"request": {...}, "response": {...}} layout.

    Raises:
        ValueError: If required keys are missing or a matcher is malformed
    """
    if not isinstance(entry, dict):
        raise ValueError(f"expected a mapping, got {type(entry).__name__}")

    request = entry.get('request', entry)
    if not isinstance(request, dict):
        raise ValueError("'request' must be a mapping")

    method = request.get('method')
    if not method:
        raise ValueError("missing 'method'")

    url_keys = [key for key in URL_KEYS if key in request]
    if len(url_keys) != 1:
        raise ValueError(f"expected exactly one of {', '.join(URL_KEYS)}, found {url_keys or 'none'}")
    url_key = url_keys[0]
    url_matcher = URLMatcher.from_dict({url_key: request[url_key]})

    rule = StubRule(str(method).upper(), url_matcher)

    for group_key, method_name in NAMED_MATCHER_GROUPS.items():
        group = request.get(group_key) or {}
        if not isinstance(group, dict):
            raise ValueError(f"'{group_key}' must be a mapping of name to matcher")
        add_matcher = getattr(rule, method_name)
        for name, matcher in group.items():
            add_matcher(str(name), ParamMatcher.from_dict(matcher))

    body_patterns = request.get('bodyPatterns') or []
    if not isinstance(body_patterns, list):
        raise ValueError("'bodyPatterns' must be a list of matchers")
    for pattern in body_patterns:
        rule.with_body_pattern(ParamMatcher.from_dict(pattern))

    response = entry.get('response')
    if response is not None:
        if not isinstance(response, dict):
            raise ValueError("'response' must be a mapping")
        body = response.get('body')
        if body is None:
            body = ''
        elif not isinstance(body, str):
            body = json.dumps(body)
        headers = response.get('headers') or None
        if headers is not None:
            if not isinstance(headers, dict):
                raise ValueError("'response.headers' must be a mapping")
            headers = {str(k): str(v) for k, v in headers.items()}
        rule.will_return(body, headers, _as_int(response.get('status', 200), 'status'))

    if entry.get('priority') is not None:
        rule.at_priority(_as_int(entry['priority'], 'priority'))
    if entry.get('scenarioName') is not None:
        rule.in_scenario(str(entry['scenarioName']))
    if entry.get('requiredScenarioState') is not None:
        rule.when_scenario_state_is(str(entry['requiredScenarioState']))
    if entry.get('newScenarioState') is not None:
        rule.will_set_state_to(str(entry['newScenarioState']))

    name = entry.get('name')
    return StubDefinition(rule=rule, name=str(name) if name is not None else None)
