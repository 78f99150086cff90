import typer

import cli.cli

if __name__ == "__main__":
    typer_app: typer.Typer = cli.cli.app
    typer_app()
