"""
Interactive front end for the Markov text generator.

A small state machine asks where the sample should come from (console or
file), reads it through a SampleSource, prompts for the order and length,
and prints the generated text. The transition table can be toggled on for
diagnostic output.
"""
import logging
import random
from pathlib import Path

import click

from . import config
from .markov_chain import EmptySampleError, InvalidOrderError, MarkovChain
from .sample_source import ConsoleSampleSource, FileSampleSource
from .utils import format_table

MAIN_MENU = 'main_menu'
CONSOLE_INPUT = 'console_input'
FILE_INPUT = 'file_input'
QUIT = 'quit'

MENU_CHOICES = {
    '1': CONSOLE_INPUT,
    '2': FILE_INPUT,
    'q': QUIT,
}


class MenuController:
    def __init__(self, seed=None, show_table=False):
        self.state = MAIN_MENU
        self.show_table = show_table
        self.rng = random.Random(seed)

    def run(self):
        while self.state != QUIT:
            self.step()

    def step(self):
        if self.state == MAIN_MENU:
            self._main_menu()
        elif self.state == CONSOLE_INPUT:
            self._generate_from(ConsoleSampleSource())
        elif self.state == FILE_INPUT:
            path = click.prompt("Path to sample file", type=click.Path(dir_okay=False, path_type=Path))
            self._generate_from(FileSampleSource(path))

    def _main_menu(self):
        click.echo()
        click.echo("[1] Enter sample text")
        click.echo("[2] Read sample from a file")
        click.echo(f"[t] Toggle table printing (currently {'on' if self.show_table else 'off'})")
        click.echo("[q] Quit")
        choice = click.prompt(
            "Choice",
            type=click.Choice(['1', '2', 't', 'q'], case_sensitive=False),
            show_choices=False,
        ).lower()

        if choice == 't':
            self.show_table = not self.show_table
            click.echo(f"Table printing {'enabled' if self.show_table else 'disabled'}.")
            return
        self.state = MENU_CHOICES[choice]

    def _generate_from(self, source):
        # Whatever happens, the next step is the main menu
        self.state = MAIN_MENU
        try:
            sample = source.read()
        except (OSError, UnicodeDecodeError) as e:
            click.secho(f"Error reading {source.description} sample: {e}", fg='red')
            return

        model = None
        while model is None:
            order = click.prompt("Order", type=int, default=config.DEFAULT_ORDER)
            try:
                model = MarkovChain(order=order).train(sample)
            except EmptySampleError as e:
                click.secho(f"Error: {e}", fg='red')
                return
            except InvalidOrderError as e:
                click.secho(f"Error: {e}", fg='red')

        length = click.prompt("Length", type=click.IntRange(min=0), default=config.DEFAULT_LENGTH)
        logging.info(f"Generating {length} characters from a {source.description} sample of order {order}")

        if self.show_table:
            click.echo(format_table(model.table))
        click.echo("Generated text:")
        click.echo(model.generate(length=length, rng=self.rng))


@click.command()
@click.option('--seed', type=int, default=config.DEFAULT_SEED, help="Seed for the random source.")
@click.option('--show-table/--hide-table', default=False, help="Print the transition table before each generation.")
def main(seed, show_table):
    """Interactively build Markov chains from sample text and generate from them."""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    MenuController(seed=seed, show_table=show_table).run()
    click.echo("Bye.")


if __name__ == '__main__':
    main()
