import pathlib

import click

import logging

from . import dictfile, read_dict
from .errors import EmptyDictionary


def setup_logging(verbose, text):
    if verbose:
        level = logging.DEBUG
    elif text:
        level = logging.WARNING # keep the console for the game
    else:
        level = logging.INFO    # shown in the logging window

    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)
    logging.getLogger('asyncio').setLevel(logging.WARNING)


@click.command()
@click.option('--dict', default=dictfile, envvar='WORDLE_DICT', show_default=True,
              type=click.Path(exists=True, dir_okay=False, readable=True, path_type=pathlib.Path),
              help="newline delimited word list")
@click.option('--text/--gui', 'text', default=False, help="play in the console or the terminal gui")
@click.option('--seed', type=int, default=None, help="seed the answer picker for a repeatable game")
@click.option('--strict', is_flag=True, help="count repeated letters when marking letters present")
@click.option('--verbose', '-v', is_flag=True, help="debug logging")
@click.argument('start_word', required=False)
@click.pass_context
def cli(ctx, *_, **args):
    """
    play a game of wordle

    provide a START_WORD to force a specific one (useful for testing) or
    omit and a random word from the dictionary file will be chosen.
    """
    setup_logging(args['verbose'], args['text'])

    try:
        args['words'] = read_dict(args['dict'])
    except EmptyDictionary as e:
        raise click.ClickException(str(e))

    if args['start_word']:
        args['start_word'] = args['start_word'].lower()

        if args['start_word'] not in args['words']:
            raise click.BadParameter(
                f"{args['start_word']} is not in the dictionary", param_hint='START_WORD'
            )

    try:
        if args['text']:
            from .textui import WordleUI
            ui = WordleUI(args)
            ui.run()
        else:
            from .gui import App
            app = App(args)
            app.setup()
            app.run()       # blocking call
    except (KeyboardInterrupt, EOFError):
        pass
