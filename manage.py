import click
from flask.cli import FlaskGroup

from mdformatter import app
import mdformatter.render.controllers as controllers


cli = FlaskGroup(create_app=lambda: app)


@cli.command('list')
def list_formatters():
    """List the formatter bundles."""
    for name in controllers.list_formatters():
        click.echo(name)


@cli.command('render')
@click.argument('name')
@click.argument('xml_file', type=click.File('rb'))
@click.option('--lang', default=None, help='UI language, three letter code.')
@click.option('--schema', default=None)
@click.option('--param', 'params', multiple=True, help='Request parameter as key=value.')
def render(name, xml_file, lang, schema, params):
    """Render XML_FILE with the formatter NAME and print the HTML."""
    params = dict(p.split('=', 1) if '=' in p else (p, '') for p in params)
    click.echo(controllers.apply_formatter(name, xml_file.read(), params=params, lang=lang, schema=schema), nl=False)


if __name__ == '__main__':
    cli()
