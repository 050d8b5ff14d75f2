"""
Annotated .asm listing => skeleton VHDL CPU testbench with test vectors

Any line that accesses data memory has a comment starting with R or W (read
or write), followed by the data read or written and the address it is read
from or written to (space separated):

    LDI  R16, 0x00    ;R AB 1234
    STS  0xFFEE, R0   ;W 0A FFEE

Every line becomes one vector, bus cycle or not
"""

from collections import namedtuple
import enum

from . import vutil
from .vutil import chomp, skip_space, skip_nonspace


class Direction(enum.Enum):
    READ = "r"
    WRITE = "w"
    NONE = " "


# data and address are None unless there is a bus cycle
Access = namedtuple("Access", ("direction", "data", "address"))

HEADER = """\
library ieee;
use ieee.std_logic_1164.all;
use ieee.std_logic_arith.all;
use ieee.std_logic_unsigned.all;
use ieee.numeric_std.all;

library OpCodes;
use OpCodes.OpCodes.all;


entity cpu_test_tb is
end cpu_test_tb;


architecture TB_ARCHITECTURE of cpu_test_tb is



    -- Stimulus signals - signals mapped to the input and inout ports of tested entity
    signal  Clock    :  std_logic;
    signal  Reset    :  std_logic;
    signal  DataDB   :  std_logic_vector(7 downto 0);

    -- Observed signals - signals mapped to the output ports of tested entity
    signal  DataRd   :  std_logic;
    signal  DataWr   :  std_logic;
    signal  DataAB   :  std_logic_vector(15 downto 0);

    --Signal used to stop clock signal generators
    signal  END_SIM  :  BOOLEAN := FALSE;

    -- test value types
    type  byte_array    is array (natural range <>) of std_logic_vector(7 downto 0);
    type  addr_array    is array (natural range <>) of std_logic_vector(15 downto 0);
"""

# X"dd" plus padding lines up with "ZZZZZZZZ" / "--------"
SEP_BYTE = ",      "
# X"aaaa" plus padding lines up with "----------------"
SEP_ADDR = ",            "
SEP = ", "

HIGHZ_BYTE = '"ZZZZZZZZ"'
DONTCARE_BYTE = '"--------"'
DONTCARE_ADDR = '"----------------"'


def parse_access(l):
    """
    Ex: "LDI R16, 0x00    ;R AB 1234"
    Return: Access(Direction.READ, "AB", "1234")

    Fields are copied verbatim, no hex validation
    A short line gives short fields
    """
    l = chomp(l)

    # read/write follows the semi-colon
    i = l.find(";")
    if i < 0:
        return Access(Direction.NONE, None, None)
    marker = l[i + 1:i + 2]
    if marker in ("r", "R"):
        direction = Direction.READ
    elif marker in ("w", "W"):
        direction = Direction.WRITE
    else:
        return Access(Direction.NONE, None, None)
    # move past the r/w symbol
    i += 2

    # data follows the next space
    i = skip_nonspace(l, i)
    i = skip_space(l, i)
    data = l[i:i + 2]
    i += 2

    # address follows the space after the data
    i = skip_space(l, i)
    address = l[i:i + 4]
    return Access(direction, data, address)


def strobe_bits(vectors, active):
    # strobes are active low
    return "".join("0" if v.direction == active else "1" for v in vectors)


def data_elems(vectors, active, idle):
    ret = []
    for v in vectors:
        if v.direction == active:
            ret.append(('X"%s"' % v.data, SEP_BYTE))
        else:
            ret.append((idle, SEP))
    return ret


def addr_elems(vectors):
    ret = []
    for v in vectors:
        if v.direction in (Direction.READ, Direction.WRITE):
            ret.append(('X"%s"' % v.address, SEP_ADDR))
        else:
            ret.append((DONTCARE_ADDR, SEP))
    return ret


class AsmToVectors(vutil.Converter):
    def nreserve(self, l):
        # every line is a vector
        return 1

    def parse_line(self, l):
        return [parse_access(l)]

    def write(self, f, vectors):
        def line(l=""):
            f.write(l + "\n")

        last = len(vectors) - 1

        f.write(HEADER)

        # finally output the test vectors
        line()
        line("-- expected data bus write signal for each instruction")
        line("signal  DataWrTestVals  :  std_logic_vector(0 to %d) :=" % last)
        line('    "%s";' % strobe_bits(vectors, Direction.READ))

        line()
        line("-- expected data bus read signal for each instruction")
        line("signal  DataRdTestVals  :  std_logic_vector(0 to %d) :=" % last)
        line('    "%s";' % strobe_bits(vectors, Direction.WRITE))

        line()
        line("-- supplied data bus values for each instruction (for read operations)")
        f.write("signal  DataDBVals      :  byte_array(0 to %d) := (" % last)
        vutil.write_vhdl_array(f, data_elems(vectors, Direction.READ, HIGHZ_BYTE))

        line()
        line("-- expected data bus output values for each instruction (only has a value on writes)")
        f.write("signal  DataDBTestVals  :  byte_array(0 to %d) := (" % last)
        vutil.write_vhdl_array(
            f, data_elems(vectors, Direction.WRITE, DONTCARE_BYTE))

        line()
        line("-- expected data addres bus values for each instruction")
        f.write("signal  DataABTestVals  :  addr_array(0 to %d) := (" % last)
        vutil.write_vhdl_array(f, addr_elems(vectors))

        # finish off any remaining line
        line()
        line()


def run(f_in, f_out, f_err, store=None):
    return AsmToVectors(store=store).run(f_in, f_out, f_err)
