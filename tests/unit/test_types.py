"""Unit tests for builder value types."""

from sqlfluent.constants import SortDirection
from sqlfluent.query_builder.types import ClauseState, CompiledQuery, GroupSpec, OrderBy, WhereFragment


class TestCompiledQuery:

    def test_params_and_placeholder_count(self):
        query = CompiledQuery(text="SELECT * FROM t WHERE (a = ?) AND (b IN (?, ?))", values=[1, 2, 3])

        assert query.params == (1, 2, 3)
        assert query.placeholder_count == 3

    def test_to_dict(self):
        query = CompiledQuery(text="SELECT * FROM t")
        assert query.to_dict() == {"text": "SELECT * FROM t", "values": []}


class TestOrderBy:

    def test_direction(self):
        assert OrderBy(column="a").direction == SortDirection.ASC
        assert OrderBy(column="a", sort="DeSc").direction == SortDirection.DESC
        assert OrderBy(column="a", sort="down").direction == SortDirection.ASC

    def test_to_dict_omits_missing_sort(self):
        assert OrderBy(column="a").to_dict() == {"column": "a"}


class TestClauseState:

    def test_copy_does_not_share_lists(self):
        state = ClauseState(columns=["id"], where=[WhereFragment("a = ?", (1,))], order=["id"])
        state.group = GroupSpec(columns=("id",))

        copy = state.copy()
        copy.columns.append("name")
        copy.where.append(WhereFragment("b = ?", (2,)))
        copy.order.clear()

        assert state.columns == ["id"]
        assert state.where == [WhereFragment("a = ?", (1,))]
        assert state.order == ["id"]
        assert copy.group is state.group
