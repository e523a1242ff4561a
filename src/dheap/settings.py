# Upper bound on the number of keys a heap may hold
MAX_CAPACITY = 5000

# Inclusive key range
MIN_KEY = -99999
MAX_KEY = 99999

DEFAULT_BRANCHING_FACTOR = 2

# Size of the backing buffer allocated for an empty or small heap; the
# buffer doubles on demand up to the heap capacity.
INITIAL_BUFFER_SIZE = 16

DEFAULT_INPUT_FILE = "numbers.txt"
