import click

from apps.productapi.productapi_cli import productapi_cli


@click.group()
def cli():
    pass


cli.add_command(productapi_cli, name="productapi")


if __name__ == "__main__":
    cli()
