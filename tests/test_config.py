import pytest

from moneyflow.config import AppConfig


def test_defaults_match_record_tables():
    config = AppConfig()

    assert config.BUDGET_TABLE == "budget_c"
    assert config.CATEGORY_TABLE == "category_c"
    assert config.SAVINGS_GOAL_TABLE == "savings_goal_c"
    assert config.TRANSACTION_TABLE == "transaction_c"
    assert config.LIST_PAGE_LIMIT == 100


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LIST_PAGE_LIMIT", "25")
    monkeypatch.setenv("BUDGET_TABLE", "budgets_v2")

    config = AppConfig()

    assert config.LIST_PAGE_LIMIT == 25
    assert config.BUDGET_TABLE == "budgets_v2"


def test_validate_supabase_config_requires_credentials():
    with pytest.raises(ValueError):
        AppConfig(SUPABASE_URL="", SUPABASE_ANON_KEY="").validate_supabase_config()

    AppConfig(
        SUPABASE_URL="https://example.supabase.co", SUPABASE_ANON_KEY="anon"
    ).validate_supabase_config()
