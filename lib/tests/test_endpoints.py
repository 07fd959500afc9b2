from __future__ import annotations

from wealthsimple_client.endpoints import ENDPOINTS


def test_path_and_body_argument_routing() -> None:
    assert ENDPOINTS["get_user"].path_args == ("user_id",)
    assert ENDPOINTS["update_person"].path_args == ("person_id",)
    assert ENDPOINTS["update_person"].body_args == ()
    assert ENDPOINTS["token_exchange"].body_args == ("code",)
    assert ENDPOINTS["list_users"].path_args == ()


def test_get_person_wire_method_depends_on_legacy_mode() -> None:
    ep = ENDPOINTS["get_person"]
    assert ep.wire_method(legacy=False) == "GET"
    assert ep.wire_method(legacy=True) == "POST"
    assert ENDPOINTS["get_user"].wire_method(legacy=True) == "GET"


def test_only_health_check_skips_credentials() -> None:
    without = {name for name, ep in ENDPOINTS.items() if not ep.with_credentials}
    assert without == {"health_check"}


def test_unauthorized_endpoints() -> None:
    unauthorized = {name for name, ep in ENDPOINTS.items() if not ep.authorized}
    assert unauthorized == {"health_check", "token_exchange", "token_refresh", "create_user"}


def test_every_endpoint_uses_known_method_and_absolute_path() -> None:
    for ep in ENDPOINTS.values():
        assert ep.method in {"GET", "POST", "PATCH"}
        assert ep.path.startswith("/")
        assert ep.summary
