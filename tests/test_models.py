import pytest
from pydantic import ValidationError

from moneyflow.models import (
    Budget,
    BudgetInput,
    Category,
    CategoryInput,
    ExpandedRelation,
    SavingsGoal,
    SavingsGoalInput,
    ScalarRelation,
    Transaction,
    TransactionInput,
    decode_relation,
    resolve_relation,
)
from moneyflow.records.errors import MappingError


# -- Storage -> domain --------------------------------------------------------


def test_budget_defaults_when_optional_columns_missing():
    budget = Budget.from_record({"Id": 3, "monthly_limit_c": 500.0, "month_c": "2024-05"})

    assert budget.id == 3
    assert budget.spent == 0
    assert budget.alert_threshold == 80
    assert budget.alert_methods == ["email", "push"]
    assert budget.category is None


def test_budget_alert_methods_split_from_delimited_string():
    budget = Budget.from_record({"Id": 1, "alert_methods_c": "email,sms"})
    assert budget.alert_methods == ["email", "sms"]


def test_budget_category_resolves_expanded_relation_name():
    budget = Budget.from_record(
        {"Id": 1, "category_c": {"Id": 7, "Name": "Groceries"}}
    )
    assert budget.category == "Groceries"


def test_budget_category_passes_scalar_relation_through():
    budget = Budget.from_record({"Id": 1, "category_c": 7})
    assert budget.category == 7


def test_budget_dumps_camel_case_shape():
    budget = Budget.from_record(
        {
            "Id": 4,
            "monthly_limit_c": 250.0,
            "spent_c": 12.5,
            "month_c": "2024-06",
            "alert_threshold_c": 90,
            "alert_methods_c": "push",
            "category_c": {"Id": 2, "Name": "Fun"},
        }
    )

    assert budget.to_dict() == {
        "Id": 4,
        "monthlyLimit": 250.0,
        "spent": 12.5,
        "month": "2024-06",
        "alertThreshold": 90,
        "alertMethods": ["push"],
        "category": "Fun",
    }


def test_category_name_falls_back_to_display_name():
    category = Category.from_record({"Id": 2, "Name": "Rent", "type_c": "expense"})
    assert category.name == "Rent"
    assert category.type == "expense"


def test_savings_goal_prefers_name_column():
    goal = SavingsGoal.from_record(
        {"Id": 5, "Name": "Goal 5", "name_c": "Holiday", "target_amount_c": 1200.0}
    )
    assert goal.name == "Holiday"
    assert goal.target_amount == 1200.0


def test_transaction_missing_text_fields_become_empty_strings():
    transaction = Transaction.from_record({"Id": 9, "amount_c": 20.0, "type_c": "expense"})

    assert transaction.name == ""
    assert transaction.description == ""


def test_record_without_id_is_rejected():
    with pytest.raises(ValidationError):
        Transaction.from_record({"Name": "orphan"})


# -- Relations ------------------------------------------------------------------


def test_decode_relation_shapes():
    assert decode_relation(None) is None
    assert decode_relation(3) == ScalarRelation(value=3)
    assert decode_relation({"Id": 3, "Name": "Food"}) == ExpandedRelation(id=3, name="Food")


def test_resolve_expanded_relation_without_name_uses_id():
    assert resolve_relation(ExpandedRelation(id=3)) == 3


# -- Domain -> storage ----------------------------------------------------------


def test_budget_input_create_record_coerces_and_names():
    record = BudgetInput.model_validate(
        {
            "monthlyLimit": "300.50",
            "month": "2024-07",
            "alertMethods": ["email", "sms"],
            "category": "Groceries",
            "category_c": "7",
        }
    ).to_record()

    assert record == {
        "Name": "Groceries Budget - 2024-07",
        "monthly_limit_c": 300.5,
        "spent_c": 0.0,
        "month_c": "2024-07",
        "alert_threshold_c": 80,
        "alert_methods_c": "email,sms",
        "category_c": 7,
    }


def test_budget_input_update_record_carries_id_without_name():
    record = BudgetInput(monthly_limit=10, alert_threshold="75").to_record(record_id=4)

    assert record["Id"] == 4
    assert "Name" not in record
    assert record["alert_threshold_c"] == 75


def test_unparsable_relation_id_means_no_relation():
    record = TransactionInput.model_validate(
        {"type": "expense", "amount": "5", "category_c": "none"}
    ).to_record()
    assert record["category_c"] is None


def test_unparsable_amount_raises_mapping_error():
    with pytest.raises(MappingError):
        TransactionInput(type="expense", amount="abc").to_record()


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"name": "Coffee", "description": "latte", "type": "expense", "amount": 4}, "Coffee"),
        ({"description": "latte", "type": "expense", "amount": 4}, "latte"),
        ({"type": "income", "amount": "1500"}, "income - 1500"),
    ],
)
def test_transaction_display_name_template(data, expected):
    assert TransactionInput.model_validate(data).to_record()["Name"] == expected


def test_savings_goal_name_column_only_set_on_create():
    goal = SavingsGoalInput(name="Car", target_amount="8000")

    assert goal.to_record()["Name"] == "Car"
    assert goal.to_record()["current_amount_c"] == 0.0
    assert "Name" not in goal.to_record(record_id=2)


def test_category_input_ignores_unknown_keys():
    record = CategoryInput.model_validate(
        {"Id": 1, "name": "Salary", "type": "income", "icon": "Wallet", "color": "#0f0"}
    ).to_record()

    assert record == {
        "Name": "Salary",
        "name_c": "Salary",
        "type_c": "income",
        "icon_c": "Wallet",
        "color_c": "#0f0",
    }


def test_update_record_keeps_relation_unless_category_id_given():
    untouched = TransactionInput(type="expense", amount=5).to_record(record_id=3)
    cleared = TransactionInput(type="expense", amount=5, category_c=None).to_record(record_id=3)
    budget = BudgetInput.model_validate({"monthlyLimit": 10, "category": "Food"})

    assert "category_c" not in untouched
    assert cleared["category_c"] is None
    assert "category_c" not in budget.to_record(record_id=1)
    assert budget.to_record()["category_c"] is None
