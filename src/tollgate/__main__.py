from tollgate.presentation.cli import cli

cli()
