"""CLI commands implemented with click.

- `key`: store the API key in the config file
- `read` / `search`: one call to the Jina Reader / Search API, body to stdout
- `completions`: shell completion script for this command tree
"""
from __future__ import annotations
import logging, click
from click.shell_completion import get_completion_class
from jinab import __version__
from jinab.config.settings import APP_NAME, COMPLETION_SHELLS, LOG_LEVEL
from jinab.lib.keystore import KeyStore, KeyStoreError
from jinab.lib.client import JinaClient, ClientError

log = logging.getLogger(__name__)

def _fail(e: Exception):
	log.debug('Command failed', exc_info=e)
	click.echo(f'Error: {e}', err=True)
	raise SystemExit(1)

def _log_level(verbose: bool) -> int:
	if verbose:
		return logging.DEBUG
	level = logging.getLevelName(LOG_LEVEL)
	# unknown names come back as "Level <name>"
	return level if isinstance(level, int) else logging.WARNING

@click.group()
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Log debug output to stderr.')
@click.pass_context
def cli(ctx, verbose):
	"""Read and search the web using Jina AI's Reader API"""
	logging.basicConfig(level=_log_level(verbose), format='%(levelname)s %(name)s: %(message)s')
	ctx.ensure_object(dict)
	ctx.obj.setdefault('store', KeyStore())
	ctx.obj.setdefault('client', JinaClient())

@cli.command('key')
@click.argument('api_key')
@click.pass_obj
def store_key(obj, api_key):
	"""Store the Jina API key in the jinab config file."""
	try:
		path = obj['store'].persist(api_key)
	except KeyStoreError as e:
		_fail(e)
	click.echo(f'API key saved to {path}', err=True)

@cli.command()
@click.argument('url')
@click.option('--json', 'json_output', is_flag=True, help='Output JSON instead of markdown')
@click.pass_obj
def read(obj, url, json_output):
	"""Read a webpage using Jina's Reader API."""
	try:
		api_key = obj['store'].require()
		content = obj['client'].read(url, api_key, json_output)
	except (KeyStoreError, ClientError) as e:
		_fail(e)
	click.echo(content, nl=False, color=True)

@cli.command()
@click.argument('query')
@click.option('--json', 'json_output', is_flag=True, help='Output JSON instead of markdown')
@click.pass_obj
def search(obj, query, json_output):
	"""Search the web using Jina's Search API."""
	try:
		api_key = obj['store'].require()
		content = obj['client'].search(query, api_key, json_output)
	except (KeyStoreError, ClientError) as e:
		_fail(e)
	click.echo(content, nl=False, color=True)

@cli.command()
@click.argument('shell', type=click.Choice(COMPLETION_SHELLS))
@click.pass_context
def completions(ctx, shell):
	"""Generate shell completions."""
	comp_cls = get_completion_class(shell)
	complete_var = f"_{APP_NAME.replace('-', '_').upper()}_COMPLETE"
	comp = comp_cls(ctx.find_root().command, {}, APP_NAME, complete_var)
	click.echo(comp.source())
