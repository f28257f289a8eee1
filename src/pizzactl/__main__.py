from pizzactl.cli import cli

cli()
