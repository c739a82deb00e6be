import logging

import pytest

from sheetfilter.lib.filters.base import ConfigurationError, ValidationError
from sheetfilter.lib.filters.criteria import Comparator, FilterCriterion
from sheetfilter.lib.filters.custom_filters import FilterSet, criteria_from_entry


def test_defaults_to_or_with_no_criteria():
    fs = FilterSet()
    assert fs.combine_with_and is False
    assert fs.logical_and is False
    assert fs.criteria == ()


def test_between_expands_into_two_criteria_in_order(make_filter_set):
    fs = make_filter_set(
        {"comparator": "between", "operand": [5, 10]}, combine_with_and=True
    )

    assert len(fs.criteria) == 2
    first, second = fs.criteria
    assert first.comparator is Comparator.GREATER_THAN_OR_EQUAL
    assert first.operand == 5
    assert second.comparator is Comparator.LESS_THAN_OR_EQUAL
    assert second.operand == 10

    assert fs.row_matches(7) is True
    assert fs.row_matches(3) is False
    assert fs.row_matches(10) is True
    assert fs.row_matches(5) is True
    assert fs.row_matches(11) is False


def test_between_does_not_force_and(make_filter_set):
    fs = make_filter_set({"comparator": "between", "operand": (5, 10)})
    assert fs.combine_with_and is False
    # OR: qualquer lado satisfeito basta
    assert fs.row_matches(3) is True


def test_between_accepted_in_legacy_operator_key():
    fs = FilterSet({"and": True, "custom_filter_items": [{"operator": "between", "val": [1, 2]}]})
    assert [c.comparator for c in fs.criteria] == [
        Comparator.GREATER_THAN_OR_EQUAL,
        Comparator.LESS_THAN_OR_EQUAL,
    ]


@pytest.mark.parametrize("operand", [[5], [1, 2, 3], "ab", 5, None])
def test_malformed_between_raises_configuration_error(operand):
    with pytest.raises(ConfigurationError):
        criteria_from_entry({"comparator": "between", "operand": operand})


def test_and_semantics_require_every_criterion(make_filter_set):
    fs = make_filter_set(
        {"comparator": "beginsWith", "operand": "ba"},
        {"comparator": "endsWith", "operand": "na"},
        combine_with_and=True,
    )
    assert fs.row_matches("Banana") is True
    assert fs.row_matches("Bandana split") is False


def test_or_semantics_require_any_criterion(make_filter_set):
    fs = make_filter_set(
        {"comparator": "equal", "operand": "apple"},
        {"comparator": "greaterThan", "operand": 100},
    )
    assert fs.row_matches("apple") is True
    assert fs.row_matches(150) is True
    assert fs.row_matches("pear") is False


def test_empty_set_evaluation():
    assert FilterSet({"and": True}).row_matches("anything") is True
    assert FilterSet({"and": True}).row_matches(0) is True
    assert FilterSet({"and": False}).row_matches("anything") is False


@pytest.mark.parametrize("absent", [None, float("nan")])
def test_absent_value_hides_row_without_evaluating(absent, make_filter_set):
    fs = make_filter_set({"comparator": "notEqual", "operand": "x"})
    assert fs.row_matches(absent) is False
    assert FilterSet({"and": True}).row_matches(absent) is False


def test_write_xml_omits_and_attribute_when_false(make_filter_set):
    fs = make_filter_set({"comparator": "greaterThan", "operand": 5})
    assert fs.write_xml() == (
        '<customFilters><customFilter operator="greaterThan" val="5" /></customFilters>'
    )
    assert "and=" not in fs.write_xml()


def test_write_xml_emits_and_attribute_when_true(make_filter_set):
    fs = make_filter_set(
        {"comparator": "contains", "operand": "foo"},
        {"comparator": "greaterThan", "operand": 5},
        combine_with_and=True,
    )
    assert fs.write_xml() == (
        '<customFilters and="1">'
        '<customFilter operator="equal" val="*foo*" />'
        '<customFilter operator="greaterThan" val="5" />'
        "</customFilters>"
    )


def test_write_xml_empty_set():
    assert FilterSet().write_xml() == "<customFilters></customFilters>"


def test_serialization_is_deterministic():
    config = {
        "and": True,
        "custom_filter_items": [
            {"comparator": "between", "operand": [1, 9]},
            {"comparator": "notBlank"},
            {"comparator": "endsWith", "operand": "x"},
        ],
    }
    assert FilterSet.from_config(config).write_xml() == FilterSet.from_config(config).write_xml()


def test_to_config_reproduces_same_xml(make_filter_set):
    fs = make_filter_set(
        {"comparator": "between", "operand": [1, 9]},
        {"comparator": "notContains", "operand": "zz"},
        combine_with_and=True,
    )
    rebuilt = FilterSet.from_config(fs.to_config())
    assert rebuilt.write_xml() == fs.write_xml()
    assert list(rebuilt) == list(fs)


def test_invalid_comparator_does_not_mutate_criteria(make_filter_set):
    fs = make_filter_set({"comparator": "equal", "operand": 1})
    before = fs.criteria

    with pytest.raises(ValidationError):
        fs.assign_criteria(
            [
                {"comparator": "lessThan", "operand": 3},
                {"comparator": "approximately", "operand": 3},
            ]
        )

    assert fs.criteria == before
    assert len(fs) == 1


def test_malformed_entry_does_not_mutate_criteria():
    fs = FilterSet()
    with pytest.raises(ConfigurationError):
        fs.assign_criteria([{"comparator": "equal", "operand": 1}, "equal"])
    assert len(fs) == 0


@pytest.mark.parametrize("entries", [{"comparator": "equal"}, "equal", 5])
def test_assign_criteria_requires_a_list_of_entries(entries):
    with pytest.raises(ConfigurationError):
        FilterSet().assign_criteria(entries)


def test_assign_criteria_appends():
    fs = FilterSet()
    fs.assign_criteria([{"comparator": "equal", "operand": 1}])
    fs.assign_criteria([{"comparator": "equal", "operand": 2}])
    assert [c.operand for c in fs.criteria] == [1, 2]


def test_legacy_entry_shape_with_operator_and_val():
    fs = FilterSet(
        {
            "custom_filter_items": [
                {"operator": "greaterThan", "val": 5},
                {"comparator": "contains", "operator": "equal", "val": "ab"},
            ]
        }
    )
    assert fs.criteria == (
        FilterCriterion("greaterThan", 5),
        FilterCriterion("contains", "ab"),
    )


def test_inconsistent_legacy_operator_raises():
    with pytest.raises(ValidationError):
        FilterSet({"custom_filter_items": [{"comparator": "contains", "operator": "notEqual", "val": "a"}]})


@pytest.mark.parametrize("raw, expected", [(True, True), (1, True), ("true", True), ("0", False), (False, False)])
def test_and_option_accepts_boolean_like_values(raw, expected):
    assert FilterSet({"and": raw}).combine_with_and is expected


@pytest.mark.parametrize("raw", ["yes", 2, 1.5, []])
def test_and_option_rejects_non_boolean(raw):
    with pytest.raises(ValidationError):
        FilterSet({"and": raw})


def test_combine_with_and_alias_key():
    assert FilterSet({"combine_with_and": True}).combine_with_and is True


def test_none_options_are_skipped():
    fs = FilterSet({"and": None, "custom_filter_items": None})
    assert fs.combine_with_and is False
    assert len(fs) == 0


def test_unknown_option_is_ignored_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="sheetfilter.lib.filters.custom_filters"):
        fs = FilterSet({"and": True, "colour": "red"})
    assert fs.combine_with_and is True
    assert "colour" in caplog.text


def test_options_must_be_a_mapping():
    with pytest.raises(ConfigurationError):
        FilterSet([("and", True)])


def test_criteria_view_is_read_only():
    fs = FilterSet({"custom_filter_items": [{"comparator": "equal", "operand": 1}]})
    with pytest.raises(AttributeError):
        fs.criteria.append(FilterCriterion("equal", 2))
    assert len(fs) == 1


def test_parse_options_validates_everything_before_changing_state():
    fs = FilterSet({"custom_filter_items": [{"comparator": "equal", "operand": 1}]})

    with pytest.raises(ValidationError):
        fs.parse_options({"and": True, "custom_filter_items": [{"comparator": "nope"}]})
    assert fs.combine_with_and is False
    assert len(fs) == 1

    with pytest.raises(ValidationError):
        fs.parse_options({"custom_filter_items": [{"comparator": "lessThan", "operand": 3}], "and": "maybe"})
    assert fs.combine_with_and is False
    assert len(fs) == 1
