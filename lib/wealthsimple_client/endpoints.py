"""Static registry of the Wealthsimple API operations.

Each ``Endpoint`` pairs a path template with an HTTP method and describes how
the positional arguments of the bound client method are routed:

* ``token`` (when ``authorized``) becomes the bearer token;
* an argument named in the path template fills that path segment;
* ``params`` is merged into the query string;
* ``body`` is the JSON payload;
* any other argument is added as a field of the JSON payload, on top of
  ``body_defaults``.
"""
from __future__ import annotations

import inspect
from dataclasses import dataclass
from string import Formatter
from typing import Any


@dataclass(frozen=True)
class Endpoint:
    name: str
    method: str
    path: str
    args: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    authorized: bool = True
    with_credentials: bool = True
    body_defaults: tuple[tuple[str, Any], ...] = ()
    legacy_method: str | None = None
    legacy_body_in_query: bool = False
    summary: str = ""

    @property
    def path_args(self) -> tuple[str, ...]:
        return tuple(field for _, field, _, _ in Formatter().parse(self.path) if field)

    @property
    def body_args(self) -> tuple[str, ...]:
        skip = {"params", "body", *self.path_args}
        return tuple(a for a in self.args if a not in skip)

    def wire_method(self, *, legacy: bool) -> str:
        if legacy and self.legacy_method:
            return self.legacy_method
        return self.method

    def signature(self) -> inspect.Signature:
        params = [inspect.Parameter("self", inspect.Parameter.POSITIONAL_OR_KEYWORD)]
        names = (("token",) if self.authorized else ()) + self.args
        for name in names:
            default = None if name in self.optional else inspect.Parameter.empty
            params.append(inspect.Parameter(name, inspect.Parameter.POSITIONAL_OR_KEYWORD, default=default))
        return inspect.Signature(params)


def _ep(name: str, method: str, path: str, *args: str, **kwargs: Any) -> Endpoint:
    return Endpoint(name=name, method=method, path=path, args=args, **kwargs)


_ENDPOINT_LIST: tuple[Endpoint, ...] = (
    # --- health ---
    _ep("health_check", "GET", "/healthcheck",
        authorized=False, with_credentials=False,
        summary="Check that the API is reachable. Sends neither credentials nor a token."),
    # --- auth ---
    _ep("token_exchange", "POST", "/oauth/token", "code",
        authorized=False,
        body_defaults=(("grant_type", "authorization_code"),),
        legacy_body_in_query=True,
        summary="Exchange an auth code from the OAuth redirect for OAuth2 tokens."),
    _ep("token_refresh", "POST", "/oauth/token", "refresh_token",
        authorized=False,
        body_defaults=(("grant_type", "refresh_token"),),
        legacy_body_in_query=True,
        summary="Refresh OAuth2 tokens."),
    # --- users ---
    _ep("create_user", "POST", "/users", "body",
        authorized=False,
        summary="Create a User. Resolves with the newly created user."),
    _ep("list_users", "GET", "/users", "params",
        optional=("params",),
        summary="List Users scoped by the authorization credentials, e.g. params "
                "{'limit': 25, 'offset': 50, 'created_before': '2017-06-21'}."),
    _ep("get_user", "GET", "/users/{user_id}", "user_id",
        summary="Get a User by id, e.g. 'user-12398ud'."),
    # --- people ---
    _ep("create_person", "POST", "/people", "body",
        summary="Create a Person."),
    _ep("list_people", "GET", "/people", "params",
        optional=("params",),
        summary="List People scoped by the authorization credentials."),
    _ep("get_person", "GET", "/people/{person_id}", "person_id",
        legacy_method="POST",
        summary="Get a Person the current credentials have access to, e.g. 'person-12398ud'. "
                "Historically sent as POST; the legacy wire format keeps that."),
    _ep("update_person", "PATCH", "/people/{person_id}", "person_id", "body",
        summary="Update a Person. Attributes set to None are removed; omitted attributes "
                "are left unchanged."),
    # --- accounts ---
    _ep("create_account", "POST", "/accounts", "body",
        summary="Open an Account."),
    _ep("list_accounts", "GET", "/accounts", "params",
        optional=("params",),
        summary="List Accounts scoped by the authorization credentials."),
    _ep("get_account", "GET", "/accounts/{account_id}", "account_id",
        summary="Get an Account by id."),
    _ep("get_account_types", "GET", "/accounts/account_types", "params",
        optional=("params",),
        summary="List the account types available to the user."),
    # --- daily values ---
    _ep("get_daily_values", "GET", "/daily_values/", "params",
        optional=("params",),
        summary="Daily values for an account over a date range."),
    # --- projections ---
    _ep("get_projection", "GET", "/projections", "params",
        optional=("params",),
        summary="Projected account growth."),
    # --- bank accounts ---
    _ep("list_bank_accounts", "GET", "/bank_accounts", "params",
        optional=("params",),
        summary="List linked bank accounts."),
    # --- deposits ---
    _ep("create_deposit", "POST", "/deposits", "body",
        legacy_body_in_query=True,
        summary="Create a Deposit."),
    _ep("list_deposits", "GET", "/deposits", "params",
        optional=("params",),
        summary="List Deposits."),
    _ep("get_deposit", "GET", "/deposits/{deposit_id}", "deposit_id", "params",
        optional=("params",),
        summary="Get a Deposit by id."),
)

ENDPOINTS: dict[str, Endpoint] = {ep.name: ep for ep in _ENDPOINT_LIST}
