from config import EXPRESSION_CONFIG, INTEGRATION_CONFIG, STEPPING_MODES, validate_config


def test_default_config_is_valid():
    assert validate_config() is True


def test_defaults_match_classic_driver():
    assert INTEGRATION_CONFIG["num_steps"] == 1000
    assert INTEGRATION_CONFIG["stepping"] in STEPPING_MODES
    assert EXPRESSION_CONFIG["variable_symbol"] == "x"
