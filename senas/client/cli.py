import logging
import sys
import webbrowser

import click

from .api import ApiClient
from .contexts import GuestUserContext, MatchContext
from .views import GameView, Leaderboard


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.group()
@click.option("--api-url", envvar="SENAS_API_URL", default=None, help="Game server base URL.")
@click.option("--verbose", is_flag=True, help="Log every request.")
@click.pass_context
def cli(ctx, api_url, verbose):
    """Memoria de Señas client."""
    _configure_logging(verbose)
    ctx.obj = ctx.with_resource(ApiClient(api_url))


@cli.command()
@click.pass_obj
def leaderboard(api):
    """Print the top players."""
    board = Leaderboard(api)
    board.fetch()
    click.echo(board.render())


@cli.command()
@click.argument("username")
@click.option("--open", "open_browser", is_flag=True, help="Open the match page in a browser.")
@click.pass_obj
def play(api, username, open_browser):
    """Start a guest session as USERNAME and find a match."""
    guest = GuestUserContext(api)
    if not guest.start_session(username):
        click.echo("No se pudo iniciar la sesión de invitado.", err=True)
        sys.exit(1)

    def navigate(path):
        url = api.url_for(path)
        click.echo(url)
        if open_browser:
            webbrowser.open(url)

    def show_error(title, text):
        click.echo(f"{title}: {text}", err=True)

    view = GameView(guest, MatchContext(api), Leaderboard(api), navigate, show_error)
    view.mount()
    click.echo(view.render())
    if view.on_match_button_click() is None:
        sys.exit(1)
