import argparse
import logging
import random
import sys

from .. import config
from ..utils import describe_table, format_table, read_sample_files
from .markov_chain import MarkovChain


def generate_sequence(sample, order, length, seed=None, start=None):
    model = MarkovChain(order=order).train(sample)
    stats = describe_table(model.table)
    logging.info(
        f"Built table of order {order}: {stats['states']} states, "
        f"{stats['transitions']} transitions, {stats['dead_ends']} dead ends"
    )
    text = model.generate(length=length, rng=random.Random(seed), start=start)
    return model, text


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate text by randomly walking a Markov chain built from a sample.")
    parser.add_argument('--input', action='append', default=None,
                        help='Sample text file (repeatable). Uses the built-in sample if not set.')
    parser.add_argument('--order', type=int, default=config.DEFAULT_ORDER, help='Width of each grouping in characters')
    parser.add_argument('--length', type=int, default=config.DEFAULT_LENGTH, help='Minimum number of characters to generate')
    parser.add_argument('--seed', type=int, default=config.DEFAULT_SEED, help='Seed for the random source')
    parser.add_argument('--start', type=str, default=None, help='Optional start grouping')
    parser.add_argument('--show-table', action='store_true', help='Print the transition table before generating')
    parser.add_argument('--output', type=str, default=None, help='Output file to save the generated text (prints to stdout if not set)')
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    if args.input:
        sample = read_sample_files(args.input)
    else:
        sample = config.DEFAULT_SAMPLE

    if args.length < 0:
        print(f"Error: --length must be non-negative, got {args.length}", file=sys.stderr)
        sys.exit(1)

    try:
        model, text = generate_sequence(sample, args.order, args.length, seed=args.seed, start=args.start)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.show_table:
        print(format_table(model.table))
        print()

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as out_f:
            out_f.write(text)
            out_f.write('\n')
        logging.info(f"Generated text saved to {args.output}")
    else:
        print(text)


if __name__ == "__main__":
    main()
