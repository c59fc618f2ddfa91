"""Tests for fluentsql.query.select: SelectQuery compile, fluent options, descriptor round-trip, execution."""

import pytest

from fluentsql.query import CompiledQuery, QueryDescriptor, QueryError, QueryResult, SelectQuery


class TestSelectCompile:
    """SQL text and values produced by SelectQuery.compile()."""

    def test_select_all(self):
        compiled = SelectQuery(table="city").compile()
        assert isinstance(compiled, CompiledQuery)
        assert compiled.sql == 'SELECT * FROM "city"'
        assert compiled.values == ()

    def test_select_fields_and_where(self):
        q = SelectQuery(
            table="city",
            fields=["name", "population"],
            where=[{"country": "FR", "population": ">100000"}, {"name": "Par*"}],
        )
        compiled = q.compile()
        assert compiled.sql == (
            'SELECT "name", "population" FROM "city" '
            'WHERE "country" = $1 AND "population" > $2 OR "name" LIKE $3'
        )
        assert compiled.values == ("FR", "100000", "Par%")

    def test_select_single_field_as_string(self):
        q = SelectQuery(table="city", fields="name")
        assert q.fields == ["name"]
        assert q.compile().sql == 'SELECT "name" FROM "city"'

    def test_select_star_as_first_field(self):
        q = SelectQuery(table="city", fields=["*", "ignored"])
        assert q.compile().sql == 'SELECT * FROM "city"'

    def test_order_limit_offset(self):
        q = SelectQuery(table="city").order("name").limit(10).offset(20)
        assert q.compile().sql == 'SELECT * FROM "city" ORDER BY "name" LIMIT 10 OFFSET 20'

    def test_order_multiple_fields(self):
        q = SelectQuery(table="city").order(["country", "name"])
        assert q.compile().sql == 'SELECT * FROM "city" ORDER BY "country", "name"'

    def test_desc(self):
        q = SelectQuery(table="city").desc("population")
        assert q.compile().sql == 'SELECT * FROM "city" ORDER BY "population" DESC'

    def test_desc_multiple_fields_each_descending(self):
        q = SelectQuery(table="city").desc(["country", "name"])
        assert q.compile().sql == 'SELECT * FROM "city" ORDER BY "country" DESC, "name" DESC'

    def test_limit_zero_is_kept(self):
        q = SelectQuery(table="city").limit(0)
        assert q.compile().sql == 'SELECT * FROM "city" LIMIT 0'

    def test_limit_requires_integer(self):
        with pytest.raises(ValueError):
            SelectQuery(table="city").limit("1; DROP TABLE city")

    def test_limit_and_offset_reject_negative(self):
        q = SelectQuery(table="city")
        with pytest.raises(QueryError, match="LIMIT must be a non-negative integer"):
            q.limit(-1)
        with pytest.raises(QueryError, match="OFFSET must be a non-negative integer"):
            q.offset(-5)
        assert q.options.limit is None
        assert q.options.offset is None

    def test_limit_rejects_fractions(self):
        with pytest.raises(QueryError, match="got 2.9"):
            SelectQuery(table="city").limit(2.9)

    def test_limit_accepts_integral_values(self):
        q = SelectQuery(table="city").limit(3.0).offset("4")
        assert q.compile().sql == 'SELECT * FROM "city" LIMIT 3 OFFSET 4'

    def test_where_with_offset_keeps_numbering(self):
        q = SelectQuery(table="city", where=[{"a": 1}, {"b": 2}]).limit(5)
        compiled = q.compile()
        assert compiled.sql == 'SELECT * FROM "city" WHERE "a" = $1 OR "b" = $2 LIMIT 5'
        assert compiled.values == (1, 2)


class TestSelectFluentOptions:
    """Fluent setters return the same query; order/desc exclude each other."""

    def test_setters_return_same_instance(self):
        q = SelectQuery(table="city")
        assert q.order("a") is q
        assert q.desc("a") is q
        assert q.limit(1) is q
        assert q.offset(1) is q

    def test_desc_clears_order(self):
        q = SelectQuery(table="city").order(["a"]).desc(["b"])
        assert q.options.order is None
        assert q.options.desc == ["b"]
        assert q.compile().sql == 'SELECT * FROM "city" ORDER BY "b" DESC'

    def test_order_clears_desc(self):
        q = SelectQuery(table="city").desc(["b"]).order(["a"])
        assert q.options.desc is None
        assert q.options.order == ["a"]
        assert q.compile().sql == 'SELECT * FROM "city" ORDER BY "a"'


class TestSelectDescriptor:
    """to_object() / from_object() transport."""

    def test_to_object_shape(self):
        q = SelectQuery(table="city", fields=["name"], where=[{"country": "FR"}]).desc("name").limit(3)
        assert q.to_object() == {
            "table": "city",
            "fields": ["name"],
            "where": [[("country", "FR")]],
            "options": {"desc": ["name"], "limit": 3},
        }

    def test_to_object_keeps_none_condition_values(self):
        q = SelectQuery(table="city", where=[{"deleted_at": None}])
        assert q.to_object()["where"] == [[("deleted_at", None)]]

    def test_round_trip_compiles_identically(self, recorder):
        q = SelectQuery(
            database=recorder,
            table="city",
            fields=["name", "population"],
            where=[{"population": ">=1000", "name": "L*"}, {"country": "<>FR"}],
        ).order("name").limit(10).offset(5)
        copy = SelectQuery.from_object(recorder, q.to_object())
        assert copy.compile() == q.compile()
        assert copy.database is recorder

    def test_round_trip_preserves_key_order(self):
        q = SelectQuery(table="t", where=[{"z": 1, "a": 2}])
        copy = SelectQuery.from_object(None, q.to_object())
        assert copy.compile().sql == 'SELECT * FROM "t" WHERE "z" = $1 AND "a" = $2'

    def test_round_trip_keeps_repeated_keys(self):
        q = SelectQuery(table="person", where=[[("age", ">18"), ("age", "<65")]])
        copy = SelectQuery.from_object(None, q.to_object())
        compiled = copy.compile()
        assert compiled.sql == 'SELECT * FROM "person" WHERE "age" > $1 AND "age" < $2'
        assert compiled.values == ("18", "65")
        assert compiled == q.compile()

    def test_from_object_accepts_pairs_as_lists(self):
        descriptor = {"table": "person", "where": [[["age", ">18"], ["age", "<65"]]]}
        q = SelectQuery.from_object(None, descriptor)
        assert q.compile().values == ("18", "65")

    def test_to_object_is_independent_of_later_changes(self):
        q = SelectQuery(table="city", fields=["name"], where=[{"tags": ["a"]}]).limit(3)
        descriptor = q.to_object()
        q.limit(9)
        q.fields.append("country")
        q.where[0][0][1].append("b")
        assert descriptor["options"] == {"limit": 3}
        assert descriptor["fields"] == ["name"]
        assert descriptor["where"] == [[("tags", ["a"])]]

    def test_from_object_is_independent_of_descriptor(self):
        descriptor = {"table": "city", "fields": ["name"], "where": [{"tags": ["a"]}], "options": {"order": ["name"]}}
        q = SelectQuery.from_object(None, descriptor)
        descriptor["where"][0]["tags"].append("b")
        descriptor["options"]["order"].append("x")
        assert q.compile().values == (["a"],)
        assert q.options.order == ["name"]

    def test_from_object_defaults(self):
        q = SelectQuery.from_object(None, {"table": "city"})
        assert q.compile().sql == 'SELECT * FROM "city"'

    def test_from_object_accepts_descriptor_model(self):
        descriptor = QueryDescriptor(table="city", fields="name", where=[{"a": 1}])
        q = SelectQuery.from_object(None, descriptor)
        assert q.compile().sql == 'SELECT "name" FROM "city" WHERE "a" = $1'


class TestSelectExecute:
    """Deferred execution: nothing is sent until execute(), then exactly one call."""

    async def test_construction_does_not_dispatch(self, recorder):
        SelectQuery(database=recorder, table="city").order("name").limit(1)
        assert recorder.calls == []

    async def test_execute_returns_rows(self, recorder):
        recorder.results.append(QueryResult(rows=[{"name": "Lyon"}, {"name": "Nice"}]))
        rows = await SelectQuery(database=recorder, table="city", fields=["name"], where=[{"country": "FR"}]).execute()
        assert rows == [{"name": "Lyon"}, {"name": "Nice"}]
        assert recorder.calls == [('SELECT "name" FROM "city" WHERE "country" = $1', ("FR",))]

    async def test_execute_twice_dispatches_twice(self, recorder):
        q = SelectQuery(database=recorder, table="city")
        await q.execute()
        await q.execute()
        assert len(recorder.calls) == 2
        assert recorder.calls[0] == recorder.calls[1]

    async def test_execute_unbound_raises(self):
        with pytest.raises(QueryError, match="not bound"):
            await SelectQuery(table="city").execute()

    async def test_driver_errors_propagate(self):
        class FailingDatabase:
            async def query(self, sql, values):
                raise RuntimeError("connection lost")

        with pytest.raises(RuntimeError, match="connection lost"):
            await SelectQuery(database=FailingDatabase(), table="city").execute()
