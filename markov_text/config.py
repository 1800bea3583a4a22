import os


def _int_from_env(name, default):
    value = os.environ.get(name)
    if value is None or value == '':
        return default
    try:
        return int(value)
    except ValueError:
        print(f"Warning: {name}={value!r} is not an integer. Using the default of {default}.")
        return default


# --- Generation Defaults ---
DEFAULT_ORDER = _int_from_env('MARKOV_ORDER', 1)
DEFAULT_LENGTH = _int_from_env('MARKOV_LENGTH', 16)
# None means a fresh, unseeded random source per request
DEFAULT_SEED = _int_from_env('MARKOV_SEED', None)
DEFAULT_SAMPLE = "aa ba bbaac abc"

# --- Logging ---
LOG_LEVEL = os.environ.get('MARKOV_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
