"""
Hack SDK Test Configuration
===========================

Shared fixtures for the assembler test suite.
"""

import pytest


# Max.asm: stores max(R0, R1) in R2. Uses forward label references.
MAX_SOURCE = """\
// Computes R2 = max(R0, R1)

   @R0
   D=M              // D = first number
   @R1
   D=D-M            // D = first number - second number
   @OUTPUT_FIRST
   D;JGT            // if D>0 (first is greater) goto output_first
   @R1
   D=M              // D = second number
   @OUTPUT_D
   0;JMP            // goto output_d
(OUTPUT_FIRST)
   @R0
   D=M              // D = first number
(OUTPUT_D)
   @R2
   M=D              // M[2] = D (greatest number)
(INFINITE_LOOP)
   @INFINITE_LOOP
   0;JMP            // infinite loop
"""

MAX_HACK = """\
0000000000000000
1111110000010000
0000000000000001
1111010011010000
0000000000001010
1110001100000001
0000000000000001
1111110000010000
0000000000001100
1110101010000111
0000000000000000
1111110000010000
0000000000000010
1110001100001000
0000000000001110
1110101010000111
"""


@pytest.fixture
def max_source() -> str:
    """Source of the Max program."""
    return MAX_SOURCE


@pytest.fixture
def max_hack() -> str:
    """Expected .hack output for the Max program."""
    return MAX_HACK
