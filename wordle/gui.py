import asyncio
import random
import string

import urwid
from blinker import Namespace

import logging
logger = logging.getLogger(__name__)

from . import WORD_LENGTH, NUMBER_OF_GUESSES, read_dict
from .state import LetterResult, GameStatus
from .utils import dotdict
from .wordle import Wordle, create_session

# palette entry for each letter result, None is a letter that wasn't guessed
ATTRS = {
    None:                 'blank',
    LetterResult.ABSENT:  'absent',
    LetterResult.PRESENT: 'present',
    LetterResult.EXACT:   'exact',
}

KEYBOARD = ['qwertyuiop', 'asdfghjkl', 'zxcvbnm']


class Signal:
    """
    a blinker.signal that is also a variable
    when signal.value is set, emit the new value
    """

    def __init__(self, signal, value=None):
        self._value = value
        self._signal = signal

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        self._value = value
        self._signal.send(self._signal.name, value=self.value)

    def __getattr__(self, name):
        return getattr(self._signal, name)


class Signals:
    """
    the game never notifies anyone, the app fires these after each
    submit_guess so the windows can redraw

    every App gets its own namespace
    """

    def __init__(self):
        ns = Namespace()

        self.pending  = ns.signal('pending', doc='called with the letters typed for the current row')
        self.attempt  = ns.signal('attempt', doc='called with the AttemptOutcome of an accepted guess')
        self.message  = ns.signal('message', doc='called with text for the status line')
        self.new_game = ns.signal('new_game', doc='called with a freshly started Wordle')


class Window(urwid.WidgetWrap):
    def __init__(self, *args, **kw):
        super().__init__(
            urwid.LineBox(*args, **kw)
        )

    def __repr__(self):
        return self.__class__.__name__

    @property
    def original_widget(self):
        # return what's inside the LineBox
        return self._w.original_widget


class Tile(urwid.WidgetWrap):
    """
    one letter, colored by its result
    """

    def __init__(self, letter=''):
        self.label = urwid.Text(letter.upper(), align='center')
        super().__init__(urwid.AttrMap(self.label, ATTRS[None]))

    @property
    def letter(self):
        return self.label.text

    @property
    def attr(self):
        return self._w.attr_map[None]

    def set(self, letter, result=None):
        self.label.set_text(letter.upper())
        self._w.set_attr_map({None: ATTRS[result]})


class WinBoard(Window):

    def __init__(self, signals):
        self.tiles = [
            [Tile() for _ in range(WORD_LENGTH)]
            for _ in range(NUMBER_OF_GUESSES)
        ]
        self.current_row = 0 # row of tiles being typed into

        widget = urwid.Pile([
            urwid.Columns([(3, tile) for tile in row], dividechars=1)
            for row in self.tiles
        ])
        super().__init__(
            urwid.Padding(widget, align='center', width=WORD_LENGTH * 4 - 1),
            title='Wordle',
        )

        signals.pending.connect(self.cb_pending)
        signals.attempt.connect(self.cb_attempt)
        signals.new_game.connect(self.cb_new_game)

    def row_text(self, i):
        return ''.join(tile.letter for tile in self.tiles[i])

    def cb_pending(self, sender, value):
        if self.current_row >= len(self.tiles):
            return

        for i, tile in enumerate(self.tiles[self.current_row]):
            tile.set(value[i] if i < len(value) else '')

    def cb_attempt(self, sender, value):
        attempt = value.attempt

        for tile, (c, r) in zip(self.tiles[attempt.number - 1], attempt):
            tile.set(c, r)

        self.current_row = attempt.number

    def cb_new_game(self, sender, value):
        for row in self.tiles:
            for tile in row:
                tile.set('')

        self.current_row = 0


class WinKeyboard(Window):

    def __init__(self, signals):
        self.keys = {}
        rows = []

        for line in KEYBOARD:
            tiles = []
            for c in line:
                self.keys[c] = Tile(c)
                tiles.append((3, self.keys[c]))

            rows.append(urwid.Padding(
                urwid.Columns(tiles, dividechars=1),
                align='center', width=len(line) * 4 - 1,
            ))

        super().__init__(urwid.Pile(rows), title='Letters', title_align='left')

        signals.attempt.connect(self.cb_attempt)
        signals.new_game.connect(self.cb_new_game)

    def cb_attempt(self, sender, value):
        for c, result in value.knowledge.items():
            self.keys[c].set(c, result)

    def cb_new_game(self, sender, value):
        for c, tile in self.keys.items():
            tile.set(c)


class WinStatus(Window):

    def __init__(self, signals):
        super().__init__(urwid.Text(''))
        signals.message.connect(self.cb_message)

    @property
    def text(self):
        text, _ = self.original_widget.get_text()
        return text

    def cb_message(self, sender, value):
        self.original_widget.set_text(value)


class WinLogging(Window):

    def __init__(self, *args, **kw):
        super().__init__(
            urwid.BoxAdapter(
                urwid.ListBox(urwid.SimpleListWalker([])),
                height=3
            ),
            title="Logging", title_align='left',
        )

    @property
    def listbox(self):
        return self.original_widget.original_widget


class MainFrame(urwid.Frame):
    def __init__(self, signals, **kw):
        self.win_board    = WinBoard(signals)
        self.win_keyboard = WinKeyboard(signals)
        self.win_status   = WinStatus(signals)
        self.win_logging  = WinLogging()

        body = urwid.Filler(
            urwid.Pile([self.win_board, self.win_keyboard, self.win_status]),
            valign='top',
        )

        super().__init__(
            body,
            header=urwid.Text('type a guess, enter to submit, esc to quit', align='center'),
            footer=self.win_logging,
            **kw
        )


class App:

    def __init__(self, args):
        self.args    = dotdict(args)
        self.words   = self.args.words or read_dict(self.args.dict)
        self.rng     = random.Random(self.args.seed)
        self.signals = Signals()
        self.pending = Signal(self.signals.pending, value='')
        self.game    = None

    def setup(self):
        self.frame = MainFrame(self.signals)
        self.new_game()

    def new_game(self):
        if self.args.start_word:
            game = Wordle(self.words, self.args.start_word, strict=self.args.strict)
        else:
            game = create_session(self.words, self.rng, strict=self.args.strict)

        self.game = game
        self.signals.new_game.send(self, value=game)
        self.pending.value = ''
        self.signals.message.send(self, value="I picked a word, what's your guess?")
        logger.info("new game started")

    def submit(self):
        outcome = self.game.submit_guess(self.pending.value)

        if not outcome.ok:
            self.signals.message.send(self, value=outcome.message)
            return outcome

        self.signals.attempt.send(self, value=outcome)
        self.pending.value = ''

        answer = self.game.answer.upper()

        if outcome.status == GameStatus.WON:
            message = f"You got it in {outcome.attempt.number} tries! The word was {answer}."
        elif outcome.status == GameStatus.LOST:
            message = f"You ran out of tries. The word was {answer}."
        else:
            message = f"attempt {self.game.attempt_number} of {NUMBER_OF_GUESSES}"

        if outcome.status.is_terminal:
            message += " (n)ew game or esc to quit"
            logger.info(f"game {outcome.status.value} in {outcome.attempt.number} tries")

        self.signals.message.send(self, value=message)
        return outcome

    def run(self):
        palette = [
            # (name, foreground, background, mono, foreground_high, background_high)
            ('blank', 'default', ''),
            ('absent', 'white', 'dark gray'),
            ('present', 'black,bold', 'brown', '', '#000,bold', '#cb4'),
            ('exact', 'white,bold', 'dark green', '', '#fff,bold', '#6a5'),
        ]

        replace_handlers(logging.getLogger(), self.frame.win_logging.listbox)

        event_loop = urwid.AsyncioEventLoop(loop=asyncio.new_event_loop())
        self.loop = urwid.MainLoop(self.frame,
                                   palette,
                                   unhandled_input=self.handle_keypress,
                                   handle_mouse=False,
                                   event_loop=event_loop,
                                   )

        self.loop.screen.set_terminal_properties(colors=256)
        self.loop.run() # blocking

    def handle_keypress(self, key):
        # logger.debug(f"input: {key}")

        if key in ('f10', 'esc'):
            raise urwid.ExitMainLoop()

        if self.game.is_terminal():
            if key in ('n', 'N'):
                self.new_game()
            return

        if key == 'backspace':
            self.pending.value = self.pending.value[:-1]
            return

        if key == 'enter':
            self.submit()
            return

        # propagate keypress if not a letter
        if not isinstance(key, str) or len(key) != 1 or key not in string.ascii_letters:
            return key

        # only allow 5 chars
        if len(self.pending.value) >= WORD_LENGTH:
            return

        self.pending.value += key.lower()


class UrwidHandler(logging.StreamHandler):
    def __init__(self, listbox):
        super().__init__()
        self.listbox = listbox

    def emit(self, record):
        msg = self.format(record)
        msg = urwid.Text(msg)
        self.listbox.body.append(msg)
        self.listbox.focus_position = len(self.listbox.body) - 1 # scroll to last line


def replace_handlers(logger, listbox):
    """
    replace current handlers and emit to given urwid.ListBox
    """
    logger.handlers = [UrwidHandler(listbox)]
