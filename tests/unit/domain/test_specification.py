"""
Tests unitaires pour Specification.
"""

import pytest

from backoffice.domain.entities import Beat, Brand, User
from backoffice.domain.specification import (
    Criterion,
    Operator,
    Pagination,
    SortDirection,
    Specification,
    UnknownFieldError,
)


class TestPredicates:
    """Tests des predicats where_*."""

    def test_where_equal_adds_criterion(self):
        spec = Specification(Brand).where_equal("name_en", "Acme")

        assert spec.criteria == [Criterion("name_en", Operator.EQUAL, "Acme")]

    def test_predicates_are_chained(self):
        spec = (
            Specification(Beat)
            .where_equal("status_key", "active")
            .where_greater_than("id", 3)
            .where_in("brand_id", [1, 2])
        )

        assert [c.operator for c in spec.criteria] == [
            Operator.EQUAL, Operator.GREATER_THAN, Operator.IN,
        ]
        assert spec.criteria[2].value == (1, 2)

    def test_where_between_stores_bounds(self):
        spec = Specification(Brand).where_between("id", 1, 5)

        assert spec.criteria[0].operator == Operator.BETWEEN
        assert spec.criteria[0].value == (1, 5)

    def test_where_contains_ignore_case(self):
        spec = Specification(Brand).where_contains("name_en", "ac", ignore_case=True)

        assert spec.criteria[0].ignore_case is True

    def test_where_null(self):
        spec = Specification(Beat).where_null("caption", False)

        assert spec.criteria[0] == Criterion("caption", Operator.IS_NULL, False)


class TestFieldValidation:
    """Les chemins sont verifies a la construction."""

    def test_unknown_field_raises(self):
        with pytest.raises(UnknownFieldError) as exc_info:
            Specification(Brand).where_equal("nam_en", "Acme")

        assert exc_info.value.path == "nam_en"
        assert exc_info.value.entity_type is Brand

    def test_dotted_path_through_relations(self):
        spec = Specification(User).where_equal("user_roles.role.key", "Admin")

        assert spec.criteria[0].field == "user_roles.role.key"

    def test_dotted_path_with_unknown_leaf_raises(self):
        with pytest.raises(UnknownFieldError):
            Specification(User).where_equal("user_roles.role.label", "Admin")

    def test_optional_relation_path(self):
        spec = Specification(Beat).order_by("brand.name_en")

        assert spec.ordering[0].field == "brand.name_en"

    def test_include_unknown_relation_raises(self):
        with pytest.raises(UnknownFieldError):
            Specification(Beat).include("campaign")

    def test_constructor_checks_paths(self):
        with pytest.raises(UnknownFieldError):
            Specification(Brand, criteria=[Criterion("nope", Operator.EQUAL, 1)])

    def test_for_entity_rechecks_paths(self):
        spec = Specification(Brand).where_equal("name_en", "Acme")

        with pytest.raises(UnknownFieldError):
            spec.for_entity(Beat)


class TestSearch:
    """Tests de search_in."""

    def test_search_sets_clause(self):
        spec = Specification(User).search_in(["name", "email"], "  jane ")

        assert spec.search.fields == ("name", "email")
        assert spec.search.term == "jane"

    @pytest.mark.parametrize("term", [None, "", "   "])
    def test_blank_term_is_noop(self, term):
        spec = Specification(User).search_in(["name", "email"], term)

        assert spec.search is None
        assert spec.is_empty

    def test_blank_term_still_validates_fields(self):
        with pytest.raises(UnknownFieldError):
            Specification(User).search_in(["fullname"], "")


class TestOrderingAndPagination:
    """Tests du tri et de la pagination."""

    def test_order_by_accepts_string_direction(self):
        spec = Specification(Brand).order_by("created_at", "desc")

        assert spec.ordering[0].direction == SortDirection.DESC

    def test_include_deduplicates(self):
        spec = Specification(Beat).include("brand", "influencer").include("brand")

        assert spec.includes == ["brand", "influencer"]

    def test_paginate_offset(self):
        spec = Specification(Brand).paginate(page=3, limit=10)

        assert spec.pagination == Pagination(page=3, limit=10)
        assert spec.pagination.offset == 20
        assert spec.pagination.size == 10

    def test_skip_take(self):
        spec = Specification(Brand).skip_take(5, 15)

        assert not spec.pagination.is_page_based
        assert spec.pagination.offset == 5
        assert spec.pagination.size == 15

    def test_paginate_does_not_normalize(self):
        spec = Specification(Brand).paginate(page=0, limit=-1)

        assert spec.pagination.page == 0
        assert spec.pagination.limit == -1


class TestUtilities:
    """Tests clone, without_pagination, to_dict."""

    def test_empty_spec(self):
        assert Specification(Brand).is_empty

    def test_clone_is_independent(self):
        original = Specification(Brand).where_equal("name_en", "Acme")
        copy = original.clone().where_equal("name_ar", "أكمي")

        assert len(original.criteria) == 1
        assert len(copy.criteria) == 2

    def test_without_pagination_drops_paging_and_ordering(self):
        spec = (
            Specification(Brand)
            .where_equal("name_en", "Acme")
            .order_by("id")
            .paginate(2, 5)
        )

        counted = spec.without_pagination()

        assert counted.pagination is None
        assert counted.ordering == []
        assert counted.criteria == spec.criteria
        assert spec.pagination is not None

    def test_to_dict(self):
        spec = (
            Specification(Beat)
            .where_in("brand_id", [1, 2])
            .search_in(["caption"], "summer")
            .include("brand")
            .order_by("id", SortDirection.DESC)
            .paginate(1, 10)
        )

        data = spec.to_dict()

        assert data["entity"] == "Beat"
        assert data["criteria"][0] == {
            "field": "brand_id", "operator": "in", "value": [1, 2], "ignore_case": False,
        }
        assert data["search"] == {"fields": ["caption"], "term": "summer"}
        assert data["includes"] == ["brand"]
        assert data["order_by"] == [{"field": "id", "direction": "desc"}]
        assert data["pagination"]["page"] == 1
