#!/usr/bin/env python3
"""
Test actual execution of programs through the full pipeline.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

import pytest

from bftree import (
    Evaluator,
    InputExhaustedError,
    Interpreter,
    RunOptions,
    Tape,
    UnbalancedLoopError,
    parse_string,
    run_file,
    run_string,
)

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


def execute_bf_code_inprocess(bf_code, input_data=b"", **option_kwargs):
    stdin = io.BytesIO(input_data)
    return run_string(bf_code, options=RunOptions(**option_kwargs), stdin=stdin)


def test_simple_output():
    result = execute_bf_code_inprocess("+++.")
    assert result.output == bytes([3])


def test_copy_loop():
    result = execute_bf_code_inprocess("+[>+<-]")
    assert result.cells == (0, 1)
    assert result.cursor == 0


def test_copy_loop_on_seeded_tape():
    program = parse_string("[>+<-]")
    evaluator = Evaluator(io.BytesIO(), io.BytesIO())
    tape = evaluator.run(program, tape=Tape.from_cells([1, 0]))
    assert tape.cells().tolist() == [0, 1]


def test_hello_world():
    assert execute_bf_code_inprocess(HELLO_WORLD).output == b"Hello World!\n"


@pytest.mark.parametrize("source", [".+]", "[+."])
def test_unbalanced_program_produces_no_output(source):
    sink = io.BytesIO()
    with pytest.raises(UnbalancedLoopError):
        run_string(source, stdin=io.BytesIO(), stdout=sink)
    assert sink.getvalue() == b""


def test_comment_only_program_has_no_side_effects():
    result = execute_bf_code_inprocess("hello world")
    assert result.output == b""
    assert result.cells == (0,)
    assert result.steps == 0


def test_get_char_on_empty_input_is_fatal():
    sink = io.BytesIO()
    with pytest.raises(InputExhaustedError) as exc:
        run_string("+.,.", stdin=io.BytesIO(b""), stdout=sink)
    # Output before the failing ',' was already written; nothing after it.
    assert sink.getvalue() == bytes([1])
    assert exc.value.cursor == 0


def test_input_exhausted_is_not_caught_by_loops():
    with pytest.raises(InputExhaustedError):
        execute_bf_code_inprocess("+[,]", input_data=b"a\n")


def test_line_mode_keeps_first_byte_of_each_line():
    result = execute_bf_code_inprocess(",.,.", input_data=b"AB\nC\n")
    assert result.output == b"AC"


def test_line_mode_blank_line_reads_newline_byte():
    result = execute_bf_code_inprocess(",.", input_data=b"\n")
    assert result.output == b"\n"


def test_byte_mode_reads_single_bytes():
    result = execute_bf_code_inprocess(",.,.", input_data=b"AB\nC\n", input_mode='byte')
    assert result.output == b"AB"


def test_echo_until_zero_byte():
    result = execute_bf_code_inprocess(",[.,]", input_data=b"hi\x00", input_mode='byte')
    assert result.output == b"hi"


def test_output_is_raw_bytes():
    result = execute_bf_code_inprocess("-.")
    assert result.output == bytes([255])


def test_loop_skipped_when_cell_is_zero():
    result = execute_bf_code_inprocess("[.]+.")
    assert result.output == bytes([1])


def test_shift_left_from_origin_grows_tape():
    result = execute_bf_code_inprocess("+<++")
    assert result.cells == (2, 1)
    assert result.cursor == 0


def test_deep_nesting_does_not_hit_recursion_limit():
    depth = sys.getrecursionlimit() * 3
    source = "+" + "[" * depth + "-" + "]" * depth + "+."
    assert execute_bf_code_inprocess(source).output == bytes([1])


def test_nested_loops_multiply():
    # 3 * 4 = 12 in cell 1.
    result = execute_bf_code_inprocess("+++[>++++<-]>.")
    assert result.output == bytes([12])


def test_steps_count_executed_instructions():
    result = execute_bf_code_inprocess("++[-]")
    assert result.steps == 4


def test_interpreter_keeps_program_tree():
    interp = Interpreter("+[-]")
    sink = io.BytesIO()
    result = interp.run(stdin=io.BytesIO(), stdout=sink)
    assert len(interp.program) == 2
    assert result.output == b""
    assert result.cells == (0,)


def test_run_file(tmp_path):
    path = tmp_path / "three.bf"
    path.write_text("+++ print it .\n", encoding="utf-8")
    result = run_file(path, stdin=io.BytesIO())
    assert result.output == bytes([3])


def test_options_from_env(monkeypatch):
    monkeypatch.setenv("BFTREE_INPUT_MODE", "BYTE")
    monkeypatch.setenv("BFTREE_ENCODING", "latin-1")
    options = RunOptions.from_env()
    assert options.input_mode == "byte"
    assert options.encoding == "latin-1"


def test_options_from_env_rejects_unknown_mode(monkeypatch):
    monkeypatch.setenv("BFTREE_INPUT_MODE", "char")
    with pytest.raises(ValueError):
        RunOptions.from_env()


def test_options_from_env_rejects_unknown_encoding(monkeypatch):
    monkeypatch.setenv("BFTREE_ENCODING", "bogus-enc")
    with pytest.raises(ValueError):
        RunOptions.from_env()


def test_evaluator_rejects_unknown_input_mode():
    with pytest.raises(ValueError):
        Evaluator(io.BytesIO(), io.BytesIO(), input_mode="char")
