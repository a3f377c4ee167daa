"""
Tests for WireMock Stubs matching strategies

Tests matcher value objects including:
- Strategy tag values
- Convenience constructors
- Immutability
- Parsing matchers from their wire form
"""

import dataclasses

import pytest

from wiremock_stubs.matching import (
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


class TestStrategyTags:
    """Test strategy enumerations carry WireMock's key names."""

    def test_url_tags(self):
        """Test URL strategy values."""
        assert [s.value for s in URLMatchingStrategy] == [
            'url', 'urlPath', 'urlPathPattern', 'urlPattern'
        ]

    def test_param_tags(self):
        """Test parameter strategy values."""
        assert [s.value for s in ParamMatchingStrategy] == [
            'equalTo', 'matches', 'contains', 'equalToXml', 'equalToJson',
            'matchesXPath', 'matchesJsonPath', 'absent', 'doesNotMatch'
        ]

    def test_tags_compare_as_strings(self):
        """Test enum members compare equal to their tag."""
        assert URLMatchingStrategy.PATH_EQUAL_TO == 'urlPath'
        assert ParamMatchingStrategy.EQUAL_TO == 'equalTo'


class TestURLMatchers:
    """Test URL matcher constructors."""

    @pytest.mark.parametrize('factory, strategy', [
        (url_equal_to, URLMatchingStrategy.EQUAL_TO),
        (url_path_equal_to, URLMatchingStrategy.PATH_EQUAL_TO),
        (url_path_matching, URLMatchingStrategy.PATH_MATCHING),
        (url_matching, URLMatchingStrategy.MATCHING),
    ])
    def test_constructor_sets_strategy_and_value(self, factory, strategy):
        """Test each constructor returns its own strategy and the given value."""
        matcher = factory('/users/[0-9]+')

        assert isinstance(matcher, URLMatcher)
        assert matcher.strategy is strategy
        assert matcher.value == '/users/[0-9]+'

    def test_to_dict(self):
        """Test wire fragment uses the strategy tag as key."""
        assert url_path_equal_to('/things').to_dict() == {'urlPath': '/things'}

    def test_is_immutable(self):
        """Test matcher fields cannot be reassigned."""
        matcher = url_equal_to('/a')

        with pytest.raises(dataclasses.FrozenInstanceError):
            matcher.value = '/b'

    def test_equality(self):
        """Test matchers with the same strategy and value are equal."""
        assert url_equal_to('/a') == url_equal_to('/a')
        assert url_equal_to('/a') != url_path_equal_to('/a')


class TestParamMatchers:
    """Test parameter matcher constructors."""

    @pytest.mark.parametrize('factory, strategy', [
        (equal_to, ParamMatchingStrategy.EQUAL_TO),
        (matching, ParamMatchingStrategy.MATCHES),
        (contains, ParamMatchingStrategy.CONTAINS),
        (equal_to_xml, ParamMatchingStrategy.EQUAL_TO_XML),
        (equal_to_json, ParamMatchingStrategy.EQUAL_TO_JSON),
        (matching_xpath, ParamMatchingStrategy.MATCHES_XPATH),
        (matching_json_path, ParamMatchingStrategy.MATCHES_JSON_PATH),
        (not_matching, ParamMatchingStrategy.DOES_NOT_MATCH),
    ])
    def test_constructor_sets_strategy_and_value(self, factory, strategy):
        """Test each constructor returns its own strategy and the given value."""
        matcher = factory('some value')

        assert isinstance(matcher, ParamMatcher)
        assert matcher.strategy is strategy
        assert matcher.value == 'some value'

    def test_values_are_not_validated(self):
        """Test invalid regex and XPath are passed through untouched."""
        assert matching('[unclosed').value == '[unclosed'
        assert matching_xpath('//*[').value == '//*['

    def test_absent_built_directly(self):
        """Test absent strategy through the plain constructor."""
        matcher = ParamMatcher(ParamMatchingStrategy.ABSENT, 'true')

        assert matcher.to_dict() == {'absent': 'true'}


class TestFromDict:
    """Test parsing matchers from {tag: value} mappings."""

    def test_param_from_dict(self):
        """Test parsing a parameter matcher."""
        assert ParamMatcher.from_dict({'contains': 'abc'}) == contains('abc')

    def test_url_from_dict(self):
        """Test parsing a URL matcher."""
        assert URLMatcher.from_dict({'urlPathPattern': '/a/.*'}) == url_path_matching('/a/.*')

    def test_value_coerced_to_string(self):
        """Test numeric YAML values become strings."""
        assert ParamMatcher.from_dict({'equalTo': 42}).value == '42'

    def test_unknown_param_tag(self):
        """Test unknown strategy raises ValueError."""
        with pytest.raises(ValueError, match='Unknown parameter matching strategy'):
            ParamMatcher.from_dict({'startsWith': 'a'})

    def test_url_tag_rejected_for_params(self):
        """Test URL tags are not accepted as parameter strategies."""
        with pytest.raises(ValueError):
            ParamMatcher.from_dict({'urlPath': '/a'})

    def test_param_tag_rejected_for_url(self):
        """Test parameter tags are not accepted as URL strategies."""
        with pytest.raises(ValueError, match='Unknown URL matching strategy'):
            URLMatcher.from_dict({'equalTo': '/a'})

    @pytest.mark.parametrize('data', [
        {},
        {'equalTo': 'a', 'contains': 'b'},
        'equalTo',
        None,
    ])
    def test_requires_single_entry_mapping(self, data):
        """Test malformed matcher shapes raise ValueError."""
        with pytest.raises(ValueError, match='exactly one strategy key'):
            ParamMatcher.from_dict(data)

    def test_none_value_rejected(self):
        """Test a strategy key without value raises ValueError."""
        with pytest.raises(ValueError, match='has no value'):
            ParamMatcher.from_dict({'equalTo': None})

        with pytest.raises(ValueError, match='has no value'):
            URLMatcher.from_dict({'url': None})
