import string
import sys

# size of array to allocate at a time
ALLOC_SIZE = 200
# maximum length of a line, including terminator
MAX_LINE_SIZE = 300
# vectors per line of emitted VHDL
VEC_PER_LINE = 5

# C locale isspace()
WHITESPACE = " \t\n\v\f\r"

UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def upper(s):
    # ASCII only, leave other bytes alone
    return s.translate(UPPER)


def chomp(l):
    if l.endswith("\r\n"):
        return l[:-2]
    if l.endswith("\n") or l.endswith("\r"):
        return l[:-1]
    return l


def skip_space(l, i):
    while i < len(l) and l[i] in WHITESPACE:
        i += 1
    return i


def skip_nonspace(l, i):
    while i < len(l) and l[i] not in WHITESPACE:
        i += 1
    return i


def read_lines(f, max_line=MAX_LINE_SIZE):
    """
    Yield lines as a fixed size line buffer would see them
    One byte is reserved for the terminator, so anything past max_line - 1
    chars rolls over and becomes the start of the next line

    Ex: 299 chars + "\n"
    Yields: the 299 chars, then "\n"
    """
    n = max_line - 1
    for l in f:
        while len(l) > n:
            yield l[:n]
            l = l[n:]
        yield l


class VectorStore:
    """
    Append only vector buffer with explicit capacity
    Grows a chunk at a time
    max_alloc caps the capacity (None: as much as python will give us)
    """
    def __init__(self, chunk=ALLOC_SIZE, max_alloc=None):
        assert chunk > 0
        self.chunk = chunk
        self.max_alloc = max_alloc
        self.buf = []
        self.nvectors = 0
        self.error = False

    @property
    def nalloc(self):
        return len(self.buf)

    def __len__(self):
        return self.nvectors

    def __iter__(self):
        for i in range(self.nvectors):
            yield self.buf[i]

    def __getitem__(self, i):
        return self.buf[:self.nvectors][i]

    def grow(self):
        nalloc = self.nalloc + self.chunk
        if self.max_alloc is not None and nalloc > self.max_alloc:
            raise MemoryError("vector store capped at %u" % self.max_alloc)
        self.buf.extend([None] * self.chunk)

    def reserve(self, n=1):
        """
        Make room for n more vectors
        Return False if out of memory, which sticks
        """
        if self.error:
            return False
        try:
            while self.nvectors + n > self.nalloc:
                self.grow()
        except MemoryError:
            self.error = True
        return not self.error

    def append(self, v):
        assert self.nvectors < self.nalloc, "append without reserve"
        self.buf[self.nvectors] = v
        self.nvectors += 1

    def extend(self, vs):
        for v in vs:
            self.append(v)


def write_vhdl_array(f, elems):
    """
    Write the body of a VHDL array aggregate, the opening "(" already written
    elems: list of (literal, separator)
    The separator pads short literals so columns line up
    """
    if not elems:
        f.write(" );\n")
        return

    for i, (literal, sep) in enumerate(elems):
        if i % VEC_PER_LINE == 0:
            # need a new line for vectors
            f.write("\n    ")
        f.write(literal)
        if i != len(elems) - 1:
            f.write(sep)
        else:
            f.write(" );\n")


class Converter:
    """
    stdin => parse each line => vector store => VHDL on stdout
    Summary goes to stderr
    """
    def __init__(self, store=None):
        self.store = VectorStore() if store is None else store
        self.nlines = 0

    def nreserve(self, l):
        """Return number of vectors to make room for before parsing l"""
        assert 0, "Must be implemented"

    def parse_line(self, l):
        """Return list of vectors for line l"""
        assert 0, "Must be implemented"

    def write(self, f, vectors):
        assert 0, "Must be implemented"

    def parse(self, f_in):
        for l in read_lines(f_in):
            # have a line, count it
            self.nlines += 1
            n = self.nreserve(l)
            if n and not self.store.reserve(n):
                break
            self.store.extend(self.parse_line(l))

    def write_summary(self, f_err):
        if self.store.error:
            print("Out of memory", file=f_err)
        print("Lines processed: %d" % self.nlines, file=f_err)
        print("Vectors generated: %d" % len(self.store), file=f_err)

    def run(self, f_in, f_out, f_err):
        self.parse(f_in)
        self.write_summary(f_err)
        self.write(f_out, list(self.store))
        return self.store


def setup_stdio():
    """
    Input is 8 bit bytes, echo them back unchanged
    Lines end at LF only, no newline translation either way
    """
    sys.stdin.reconfigure(encoding="latin-1", newline="\n")
    sys.stdout.reconfigure(encoding="latin-1", newline="\n")
