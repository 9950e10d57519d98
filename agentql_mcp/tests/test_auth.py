from agentql_mcp.helpers.auth import (
    API_KEY_PARAM,
    AuthContext,
    get_auth_value,
    resolve_api_key,
)


def test_meta_auth_wins_over_headers():
    auth = AuthContext(
        headers={"agentql_api_key": "from-header"},
        meta={"auth": {API_KEY_PARAM: "from-meta"}},
    )
    assert get_auth_value(auth, API_KEY_PARAM) == "from-meta"


def test_flat_meta_value():
    auth = AuthContext(meta={API_KEY_PARAM: "flat"})
    assert get_auth_value(auth, API_KEY_PARAM) == "flat"


def test_header_lookup_is_case_insensitive_and_accepts_dashes():
    assert (
        get_auth_value(AuthContext(headers={"agentql-api-key": "dash"}), API_KEY_PARAM)
        == "dash"
    )
    assert (
        get_auth_value(AuthContext(headers={"AGENTQL_API_KEY": "upper"}), API_KEY_PARAM)
        == "upper"
    )


def test_blank_values_count_as_absent():
    auth = AuthContext(
        headers={"agentql_api_key": "  "}, meta={"auth": {API_KEY_PARAM: ""}}
    )
    assert get_auth_value(auth, API_KEY_PARAM) is None
    assert get_auth_value(None, API_KEY_PARAM) is None


def test_per_call_key_overrides_default(make_settings):
    settings = make_settings(agentql_api_key="default")
    auth = AuthContext(headers={"agentql_api_key": "per-call"})
    assert resolve_api_key(auth, settings) == "per-call"


def test_falls_back_to_default(make_settings):
    settings = make_settings(agentql_api_key="default")
    assert resolve_api_key(AuthContext(), settings) == "default"
    assert resolve_api_key(None, settings) == "default"


def test_no_key_anywhere(make_settings):
    settings = make_settings(agentql_api_key="")
    assert resolve_api_key(AuthContext(), settings) is None
