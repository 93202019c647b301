import pytest

from moneyflow.records.errors import MappingError, RemoteError, describe_error
from moneyflow.utils import coerce_relation_id, parse_float, parse_int, to_camel_case


@pytest.mark.parametrize(
    "value, expected",
    [
        (42, 42),
        ("42", 42),
        (" 17 ", 17),
        ("12abc", 12),
        ("7.9", 7),
        (3.0, 3),
        ("abc", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_int_takes_leading_integer(value, expected):
    assert parse_int(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("12.50", 12.5),
        ("1e3", 1000.0),
        (".5", 0.5),
        ("-4", -4.0),
        ("99kg", 99.0),
        (7, 7.0),
    ],
)
def test_parse_float_takes_leading_number(value, expected):
    assert parse_float(value, "amount") == expected


@pytest.mark.parametrize("value", ["abc", "", None, float("nan")])
def test_parse_float_rejects_non_numeric(value):
    with pytest.raises(MappingError) as excinfo:
        parse_float(value, "amount")
    assert excinfo.value.field == "amount"


def test_relation_id_zero_or_garbage_means_no_relation():
    assert coerce_relation_id("5") == 5
    assert coerce_relation_id("0") is None
    assert coerce_relation_id("none") is None
    assert coerce_relation_id(None) is None


def test_to_camel_case():
    assert to_camel_case("monthly_limit") == "monthlyLimit"
    assert to_camel_case("alert_methods") == "alertMethods"
    assert to_camel_case("name") == "name"


def test_describe_error_prefers_service_message():
    assert describe_error(RemoteError("quota exceeded", status=429)) == "quota exceeded"
    assert describe_error(RemoteError()) == "Record service request failed"
    assert describe_error(KeyError("Id")) == "'Id'"
