"""
Assembler .LST listing => VHDL instruction word literals
Only the instructions are output, meant to be pasted into an existing array

Code lines start with a zero padded address in column 0
Instruction words are column aligned with a single space gutter:

    000100  1234 5678   foo bar
    000104  abcd         nop
"""

from . import vutil
from .vutil import chomp, skip_space, skip_nonspace, upper

# first word => second word column
WORD2_OFFSET = 5


def is_code_line(l):
    return l[:1] == "0"


def parse_words(l):
    """
    Ex: "000100  1234 5678   foo bar"
    Return: ["1234", "5678"]

    Ex: "000104  abcd         nop"
    Return: ["ABCD"]

    Not a code line: []
    """
    if not is_code_line(l):
        return []
    l = chomp(l)

    # instruction follows the first space
    i = skip_nonspace(l, 0)
    i = skip_space(l, i)
    ret = [upper(l[i:i + 4])]

    # blank column => one word instruction
    word2 = l[i + WORD2_OFFSET:i + WORD2_OFFSET + 4]
    if word2.strip(" "):
        ret.append(upper(word2))
    return ret


class LstToVectors(vutil.Converter):
    def nreserve(self, l):
        # could have two instruction words
        return 2 if is_code_line(l) else 0

    def parse_line(self, l):
        return parse_words(l)

    def write(self, f, vectors):
        for i, word in enumerate(vectors):
            if i % vutil.VEC_PER_LINE == 0:
                # need a new line for vectors
                f.write("\n")
            f.write('X"%s", ' % word)
        # make sure finished off the last line
        f.write("\n")


def run(f_in, f_out, f_err, store=None):
    return LstToVectors(store=store).run(f_in, f_out, f_err)
