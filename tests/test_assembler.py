# =============================================================================
# test_assembler.py - Full Assembler Integration Tests
# =============================================================================
# End-to-end tests for the complete Hack assembler.
# These tests verify the full pipeline from source text to .hack output.
#
# Test coverage includes:
#   - Complete program assembly
#   - Determinism across runs
#   - Symbol, variable, and label behaviour through the pipeline
#   - Error reporting with line numbers
#   - Output files (.hack, symbols, listing)
# =============================================================================

from pathlib import Path

import pytest

from hack_sdk import Assembler, assemble, assemble_file
from hack_sdk.assembler import default_output_path
from hack_sdk.errors import (
    AddressRangeError,
    AssemblerError,
    HackError,
    InvalidOpcodeError,
)


def hack_lines(source: str) -> list[str]:
    """Assemble source and return the .hack lines."""
    asm = Assembler()
    asm.assemble_string(source)
    return asm.to_hack_text().splitlines()


# =============================================================================
# Full Assembly Pipeline Tests
# =============================================================================

class TestFullPipeline:
    """Test the complete assembly pipeline from source to .hack text."""

    def test_max_program(self, max_source, max_hack):
        """The Max program assembles to its known output."""
        asm = Assembler()
        asm.assemble_string(max_source, "Max.asm")
        assert asm.to_hack_text() == max_hack

    def test_add_program(self):
        """A straight-line program without symbols."""
        source = """
            // Computes R0 = 2 + 3
            @2
            D=A
            @3
            D=D+A
            @0
            M=D
        """
        assert hack_lines(source) == [
            "0000000000000010",
            "1110110000010000",
            "0000000000000011",
            "1110000010010000",
            "0000000000000000",
            "1110001100001000",
        ]

    def test_labels_produce_no_output(self):
        """Label lines add no words."""
        assert len(assemble("(A)\n@1\n(B)\n(C)\nD=A\n(D)")) == 2

    def test_deterministic(self, max_source):
        """Assembling the same source twice gives identical output."""
        asm = Assembler()
        first = asm.assemble_string(max_source + "@x\n@y\n")
        first_text = asm.to_hack_text()
        second = asm.assemble_string(max_source + "@x\n@y\n")
        assert first == second
        assert asm.to_hack_text() == first_text

    def test_fresh_symbols_per_run(self):
        """Symbols from one run do not leak into the next."""
        asm = Assembler()
        asm.assemble_string("@a\n@b")
        assert asm.assemble_string("@b") == [16]

    def test_comment_only_source(self):
        """Comment-only source produces no output at all."""
        asm = Assembler()
        assert asm.assemble_string("// nothing\n\n   // here\n") == []
        assert asm.to_hack_text() == ""

    def test_empty_source(self):
        """Empty source produces no output."""
        assert assemble("") == []


# =============================================================================
# Symbol Tests
# =============================================================================

class TestSymbols:
    """Test symbol handling through the full pipeline."""

    def test_predefined_symbols(self):
        """Predefined symbols resolve regardless of use order."""
        source = "\n".join(f"@R{n}" for n in reversed(range(16)))
        source += "\n@KBD\n@SCREEN\n@THAT\n@THIS\n@ARG\n@LCL\n@SP"
        assert assemble(source) == list(reversed(range(16))) + [24576, 16384, 4, 3, 2, 1, 0]

    def test_label_before_definition(self):
        """A forward reference resolves to the label, not a variable."""
        source = """
            @LOOP_END
            0;JMP
            @counter
            M=0
        (LOOP_END)
            @counter
            M=M+1
        """
        words = assemble(source)
        assert words[0] == 4
        assert words[2] == 16
        assert words[4] == 16

    def test_variable_allocation_order(self):
        """foo=16, bar=17, and foo again is 16."""
        assert assemble("@foo\n@bar\n@foo") == [16, 17, 16]

    def test_get_symbols(self):
        """The symbol table is available after assembly."""
        asm = Assembler()
        asm.assemble_string("@i\n(LOOP)\n@LOOP\n0;JMP")
        symbols = asm.get_symbols()
        assert symbols["i"] == 16
        assert symbols["LOOP"] == 1
        assert symbols["SP"] == 0

    def test_get_symbol_table(self):
        """The live table records how each symbol was bound."""
        from hack_sdk.assembler import SymbolKind

        asm = Assembler()
        asm.assemble_string("@i\n(LOOP)\n@LOOP\n0;JMP")
        table = asm.get_symbol_table()
        assert [s.name for s in table.of_kind(SymbolKind.LABEL)] == ["LOOP"]
        assert [s.name for s in table.of_kind(SymbolKind.VARIABLE)] == ["i"]
        assert table.next_variable_address == 17


# =============================================================================
# Whitespace and Comment Tests
# =============================================================================

class TestWhitespaceAndComments:
    """Comments and surrounding whitespace do not change the output."""

    @pytest.mark.parametrize("source", [
        "@5 // comment",
        "@5",
        "\n\n  @5  \n\n",
        "\t@5\t// tabbed\n",
        "@5\r\n",
    ])
    def test_same_word(self, source):
        """Every variant produces the single word 0000000000000101."""
        assert hack_lines(source) == ["0000000000000101"]


# =============================================================================
# Error Handling Tests
# =============================================================================

class TestErrors:
    """Test fatal error reporting."""

    def test_overflow(self):
        """@32768 aborts assembly."""
        with pytest.raises(AddressRangeError):
            assemble("@32768")

    def test_max_literal(self):
        """@32767 succeeds."""
        assert hack_lines("@32767") == ["0111111111111111"]

    def test_error_is_hack_error(self):
        """All assembler errors derive from HackError."""
        with pytest.raises(HackError):
            assemble("D=Q")

    def test_error_line_number(self):
        """Errors report file, line, and the offending source."""
        source = "@1\nD=A\n// comment\n   D=D*A\n"
        with pytest.raises(InvalidOpcodeError) as exc_info:
            assemble(source, "Mul.asm")
        message = str(exc_info.value)
        assert message.startswith("Mul.asm:4:6: error: 'D*A' is an invalid opcode")
        assert "    D=D*A" in message

    def test_error_after_valid_lines_returns_nothing(self):
        """A failing run leaves no words behind."""
        asm = Assembler()
        with pytest.raises(AssemblerError):
            asm.assemble_string("@1\n@2\n0;JUMP")
        assert asm.get_words() == []
        assert asm.to_hack_text() == ""


# =============================================================================
# File I/O Tests
# =============================================================================

class TestFileIO:
    """Test reading sources and writing outputs."""

    def test_assemble_file(self, tmp_path, max_source):
        """assemble_file reads UTF-8 source from disk."""
        src = tmp_path / "Max.asm"
        src.write_text(max_source, encoding="utf-8")
        assert len(assemble_file(src)) == 16

    def test_missing_file(self, tmp_path):
        """A missing source file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            Assembler().assemble_file(tmp_path / "missing.asm")

    def test_write_hack(self, tmp_path, max_source, max_hack):
        """write_hack writes one 16-digit line per word."""
        asm = Assembler()
        asm.assemble_string(max_source)
        out = tmp_path / "Max.hack"
        asm.write_hack(out)
        assert out.read_text(encoding="utf-8") == max_hack

    def test_write_symbols(self, tmp_path):
        """The symbol file lists every symbol, sorted by name."""
        asm = Assembler()
        asm.assemble_string("@i\n(LOOP)\n@LOOP\n0;JMP")
        out = tmp_path / "prog.sym"
        asm.write_symbols(out)
        lines = out.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "# Symbol table"
        assert "LOOP 1" in lines
        assert "i 16" in lines
        assert "SCREEN 16384" in lines
        entries = [line for line in lines if not line.startswith("#")]
        assert entries == sorted(entries, key=lambda line: line.split()[0])

    def test_listing(self, tmp_path):
        """The listing shows address, word, line, and source."""
        asm = Assembler()
        asm.assemble_string("// header\n@i\n(LOOP)\n@LOOP\n0;JMP")
        listing = asm.get_listing()
        assert "Hack Assembler Listing" in listing
        assert "    0  0000000000010000     2  @i" in listing
        assert "LOOP" in listing and "(label)" in listing
        assert "(variable)" in listing

        out = tmp_path / "prog.lst"
        asm.write_listing(out)
        assert out.read_text(encoding="utf-8") == listing


# =============================================================================
# Output Path Tests
# =============================================================================

class TestDefaultOutputPath:
    """Test derivation of the .hack path."""

    def test_simple(self):
        """Prog.asm becomes Prog.hack."""
        assert default_output_path("Prog.asm") == Path("Prog.hack")

    def test_directory(self):
        """Directories are kept."""
        assert default_output_path(Path("dir/Prog.asm")) == Path("dir/Prog.hack")

    def test_first_occurrence_only(self):
        """Only the first '.asm' is replaced."""
        assert default_output_path("a.asm.asm") == Path("a.hack.asm")

    def test_no_extension(self):
        """A path without '.asm' gets '.hack' appended."""
        assert default_output_path("prog") == Path("prog.hack")
