from __future__ import annotations

import typer

from .commands import accounts_cmd, auth_cmd, funding_cmd, health_cmd, people_cmd, reports_cmd, settings_cmd, users_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="wealthsimple",
        help="Wealthsimple API CLI",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.command("health")(health_cmd.health)
    app.add_typer(auth_cmd.app, name="auth")
    app.add_typer(users_cmd.app, name="users")
    app.add_typer(people_cmd.app, name="people")
    app.add_typer(accounts_cmd.app, name="accounts")
    app.command("daily-values")(reports_cmd.daily_values)
    app.command("projections")(reports_cmd.projections)
    app.add_typer(funding_cmd.bank_accounts_app, name="bank-accounts")
    app.add_typer(funding_cmd.deposits_app, name="deposits")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
