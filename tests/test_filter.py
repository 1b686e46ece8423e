# SPDX-License-Identifier: MIT

import pytest

from tsodata.exceptions import FilterConstructionError
from tsodata.query.filter import (
    FilterClause,
    FilterEntry,
    PrecedenceGroup,
    render_entries,
    where,
)
from tsodata.query.literal import literal
from tsodata.query.operator import ComparisonOperator, JoinOperator


def test_clause_renders_property_operator_operand() -> None:
    clause = FilterClause("CustomerId", ComparisonOperator.EQ, "5")
    assert clause.render() == "CustomerId eq 5"


def test_clause_accepts_operator_token() -> None:
    clause = FilterClause("Age", "ge", "30")  # type: ignore[arg-type]
    assert clause.operator is ComparisonOperator.GE
    assert clause.render() == "Age ge 30"


@pytest.mark.parametrize("property", ["", "   "])
def test_clause_rejects_empty_property(property: str) -> None:
    with pytest.raises(FilterConstructionError):
        FilterClause(property, ComparisonOperator.EQ, "5")


def test_clause_rejects_unknown_operator() -> None:
    with pytest.raises(FilterConstructionError):
        FilterClause("Age", "between", "5")  # type: ignore[arg-type]


def test_construction_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        PrecedenceGroup([])


def test_clause_is_immutable() -> None:
    clause = where("Name").eq(literal("Bob"))
    with pytest.raises(AttributeError):
        clause.property = "Other"  # type: ignore[misc]


def test_where_builds_each_operator() -> None:
    assert where("Age").ne(1).render() == "Age ne 1"
    assert where("Age").gt(1).render() == "Age gt 1"
    assert where("Age").ge(1).render() == "Age ge 1"
    assert where("Age").lt(1).render() == "Age lt 1"
    assert where("Age").le(1).render() == "Age le 1"
    assert where("Style").has("Sales.Color'Yellow'").render() == (
        "Style has Sales.Color'Yellow'"
    )


def test_where_formats_plain_values() -> None:
    assert where("Active").eq(True).render() == "Active eq true"
    assert where("Active").eq(False).render() == "Active eq false"
    assert where("Manager").eq(None).render() == "Manager eq null"
    assert where("Price").lt(9.5).render() == "Price lt 9.5"
    assert where("Name").eq(literal("Bob")).render() == "Name eq 'Bob'"


def test_where_in_renders_operand_list() -> None:
    clause = where("City").in_([literal("Oslo"), literal("Rome")])
    assert clause.render() == "City in ('Oslo','Rome')"


def test_entry_render_returns_join_and_text(customer_5: FilterClause) -> None:
    assert FilterEntry(customer_5, JoinOperator.OR).render() == (
        JoinOperator.OR,
        "CustomerId eq 5",
    )
    assert FilterEntry(customer_5).render() == (None, "CustomerId eq 5")


def test_group_renders_parenthesized(
    customer_5: FilterClause, customer_6: FilterClause
) -> None:
    group = PrecedenceGroup.of(customer_5).or_filter(customer_6)
    assert group.render() == "(CustomerId eq 5 or CustomerId eq 6)"


def test_group_rejects_empty_members() -> None:
    with pytest.raises(FilterConstructionError):
        PrecedenceGroup([])


def test_group_drops_join_of_first_member(
    customer_5: FilterClause, customer_6: FilterClause
) -> None:
    group = PrecedenceGroup(
        [FilterEntry(customer_5, JoinOperator.OR), FilterEntry(customer_6)]
    )
    assert group.members[0].join is None
    assert group.members[1].join is JoinOperator.AND
    assert group.render() == "(CustomerId eq 5 and CustomerId eq 6)"


def test_nested_groups_keep_their_parentheses(
    customer_5: FilterClause, customer_6: FilterClause
) -> None:
    inner = PrecedenceGroup.of(customer_5).or_filter(customer_6)
    outer = PrecedenceGroup.of(where("Active").eq(True)).and_filter(inner)
    wrapped = PrecedenceGroup.of(outer)

    assert outer.render() == (
        "(Active eq true and (CustomerId eq 5 or CustomerId eq 6))"
    )
    assert wrapped.render() == (
        "((Active eq true and (CustomerId eq 5 or CustomerId eq 6)))"
    )
    assert inner.depth() == 1
    assert outer.depth() == 2
    assert wrapped.depth() == 3


def test_groups_compare_by_structure(
    customer_5: FilterClause, customer_6: FilterClause
) -> None:
    first = PrecedenceGroup.of(customer_5).or_filter(customer_6)
    second = PrecedenceGroup.of(where("CustomerId").eq(5)).or_filter(
        where("CustomerId").eq(6)
    )
    assert first == second
    assert first != PrecedenceGroup.of(customer_5).and_filter(customer_6)


def test_group_rejects_itself_as_member(customer_5: FilterClause) -> None:
    group = PrecedenceGroup.of(customer_5)

    with pytest.raises(FilterConstructionError):
        group.and_filter(group)
    with pytest.raises(FilterConstructionError):
        group.or_filter(group)
    assert group.render() == "(CustomerId eq 5)"


def test_group_rejects_unknown_member_join(customer_5: FilterClause) -> None:
    with pytest.raises(FilterConstructionError):
        PrecedenceGroup([FilterEntry(customer_5, "xor")])  # type: ignore[arg-type]


def test_nested_group_is_copied_on_insert(
    customer_5: FilterClause, customer_6: FilterClause
) -> None:
    inner = PrecedenceGroup.of(customer_5)
    outer = PrecedenceGroup.of(where("Active").eq(True)).and_filter(inner)
    inner.or_filter(customer_6)

    assert outer.render() == "(Active eq true and (CustomerId eq 5))"
    assert PrecedenceGroup.of(outer).and_filter(outer).render() == (
        "((Active eq true and (CustomerId eq 5))"
        " and (Active eq true and (CustomerId eq 5)))"
    )


def test_str_matches_render(customer_5: FilterClause) -> None:
    group = PrecedenceGroup.of(customer_5)
    assert str(customer_5) == customer_5.render()
    assert str(group) == group.render()


def test_render_entries_skips_join_of_first_entry(customer_5: FilterClause) -> None:
    entries = [
        FilterEntry(customer_5, JoinOperator.OR),
        FilterEntry(where("Name").eq(literal("Bob")), JoinOperator.AND),
    ]
    assert render_entries(entries) == "CustomerId eq 5 and Name eq 'Bob'"


def test_to_dict_projects_nested_structure(
    customer_5: FilterClause, customer_6: FilterClause
) -> None:
    group = PrecedenceGroup.of(customer_5).or_filter(customer_6)
    assert FilterEntry(group, JoinOperator.AND).to_dict() == {
        "join": "and",
        "clause": {
            "members": [
                {
                    "join": None,
                    "clause": {
                        "property": "CustomerId",
                        "operator": "eq",
                        "operand": "5",
                    },
                },
                {
                    "join": "or",
                    "clause": {
                        "property": "CustomerId",
                        "operator": "eq",
                        "operand": "6",
                    },
                },
            ]
        },
    }
