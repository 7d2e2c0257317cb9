from urllib.parse import unquote

import pytest
from pydantic import BaseModel

from stripe_bindings.domain.exceptions import SerializationError
from stripe_bindings.domain.params import ListParams, RangeBounds
from stripe_bindings.resources.customer import ListCustomers
from stripe_bindings.utils.query_string import encode_query, flatten_params


class _Nested(BaseModel):
    name: str
    tags: list[str] = []


class _Params(BaseModel):
    enabled: bool | None = None
    nested: _Nested | None = None
    metadata: dict[str, str] | None = None


class TestFlattenParams:
    def test_none_values_are_skipped(self):
        assert flatten_params(ListParams()) == []

    def test_scalars(self):
        assert flatten_params({"limit": 5, "email": "a@b.c", "amount": 1.5}) == [
            ("limit", "5"),
            ("email", "a@b.c"),
            ("amount", "1.5"),
        ]

    def test_booleans(self):
        assert flatten_params(_Params(enabled=True)) == [("enabled", "true")]
        assert flatten_params(_Params(enabled=False)) == [("enabled", "false")]

    def test_nested_model_and_list(self):
        params = _Params(nested=_Nested(name="n", tags=["a", "b"]), metadata={"order": "123"})
        assert flatten_params(params) == [
            ("nested[name]", "n"),
            ("nested[tags][0]", "a"),
            ("nested[tags][1]", "b"),
            ("metadata[order]", "123"),
        ]

    def test_empty_expand_is_skipped(self):
        assert flatten_params(ListParams(limit=3)) == [("limit", "3")]

    def test_expand(self):
        assert flatten_params(ListParams(expand=["data.customer"])) == [("expand[0]", "data.customer")]

    @pytest.mark.parametrize(
        ("created", "expected"),
        [
            pytest.param(1700000000, [("created", "1700000000")], id="exact"),
            pytest.param(RangeBounds.after(1700000000), [("created[gt]", "1700000000")], id="gt"),
            pytest.param(RangeBounds.after_or_at(1), [("created[gte]", "1")], id="gte"),
            pytest.param(RangeBounds.before(2), [("created[lt]", "2")], id="lt"),
            pytest.param(RangeBounds.before_or_at(3), [("created[lte]", "3")], id="lte"),
            pytest.param(
                RangeBounds(gt=1, lt=2),
                [("created[gt]", "1"), ("created[lt]", "2")],
                id="both bounds",
            ),
        ],
    )
    def test_range_query(self, created: int | RangeBounds, expected: list[tuple[str, str]]):
        assert flatten_params(ListCustomers(created=created)) == expected

    def test_unsupported_value(self):
        with pytest.raises(SerializationError, match="Unsupported value type"):
            flatten_params({"value": object()})


class TestEncodeQuery:
    def test_empty(self):
        assert encode_query({}) == ""

    def test_brackets_are_url_encoded(self):
        encoded = encode_query(ListCustomers(limit=5, created=RangeBounds.after(10)))
        assert encoded == "limit=5&created%5Bgt%5D=10"
        assert unquote(encoded) == "limit=5&created[gt]=10"

    def test_values_are_url_encoded(self):
        assert encode_query({"email": "a+b@example.com"}) == "email=a%2Bb%40example.com"
