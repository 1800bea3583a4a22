from .markov_chain import (
    EmptySampleError,
    InvalidOrderError,
    MarkovChain,
    SampleError,
    TransitionTable,
    build_table,
    generate_text,
    validate_sample,
)
