"""
WireMock Stubs

Fluent builder for WireMock stub mappings.

This package provides:
- URL and parameter matcher value objects
- StubRule builder with scenario support
- Definition file loading and mapping export
"""

from .matching import (
    URLMatchingStrategy,
    ParamMatchingStrategy,
    URLMatcher,
    ParamMatcher,
    url_equal_to,
    url_path_equal_to,
    url_path_matching,
    url_matching,
    equal_to,
    matching,
    contains,
    equal_to_xml,
    equal_to_json,
    matching_xpath,
    matching_json_path,
    not_matching,
)
from .stub_rule import (
    SCENARIO_STATE_STARTED,
    RequestSpec,
    ResponseSpec,
    StubRule,
    new_stub_rule,
    get,
    post,
    put,
    delete,
)

__all__ = [
    # Matching
    'URLMatchingStrategy',
    'ParamMatchingStrategy',
    'URLMatcher',
    'ParamMatcher',
    'url_equal_to',
    'url_path_equal_to',
    'url_path_matching',
    'url_matching',
    'equal_to',
    'matching',
    'contains',
    'equal_to_xml',
    'equal_to_json',
    'matching_xpath',
    'matching_json_path',
    'not_matching',

    # Stub rule
    'SCENARIO_STATE_STARTED',
    'RequestSpec',
    'ResponseSpec',
    'StubRule',
    'new_stub_rule',
    'get',
    'post',
    'put',
    'delete',
]

__version__ = '1.0.0'
