import pytest

from simulator.evaluator import evaluate
from simulator.tape import BLANK, Move
from simulator.turing_machine import ConfigurationError, Transition
from tools.machine_parser import (
    MachineDescriptionError,
    build_machine,
    load_input_word,
    load_machine_description,
    parse_machine_text,
)

from conftest import EVEN_LENGTH, UNARY_INCREMENT


def test_parse_header_and_transitions():
    description = parse_machine_text(UNARY_INCREMENT)

    assert description.start == "q0"
    assert description.accept == "qA"
    assert description.reject == "qR"
    assert description.blank == "B"
    assert description.transitions == [
        Transition("q0", "1", "q0", "1", Move.RIGHT),
        Transition("q0", BLANK, "qA", "1", Move.STAY),
    ]


def test_blank_header_after_transitions_still_maps_blank():
    text = "q0 B -> qA B <\nstart: q0\naccept: qA\nreject: qR\nblank: B\n"
    description = parse_machine_text(text)
    assert description.transitions == [Transition("q0", BLANK, "qA", BLANK, Move.LEFT)]


def test_symbols_take_last_character_and_spacing_is_flexible():
    text = "start: q0\naccept: qA\nreject: qR\nblank: _\nq0   xy->q1  ab   ^\n"
    description = parse_machine_text(text)
    assert description.transitions == [Transition("q0", "y", "q1", "b", Move.STAY)]


def test_comments_and_blank_lines_are_ignored():
    description = parse_machine_text(EVEN_LENGTH + "\n\n# trailing comment\n")
    assert len(description.transitions) == 6


def test_unparseable_line_reports_line_number():
    text = "start: q0\naccept: qA\nreject: qR\nblank: B\nq0 1 => qA 1 >\n"
    with pytest.raises(MachineDescriptionError, match="line 5"):
        parse_machine_text(text)


def test_invalid_move_is_rejected():
    text = "start: q0\naccept: qA\nreject: qR\nblank: B\nq0 1 -> qA 1 R\n"
    with pytest.raises(MachineDescriptionError) as excinfo:
        parse_machine_text(text)
    assert excinfo.value.line_number == 5


def test_missing_header_fields():
    with pytest.raises(MachineDescriptionError, match="reject, blank"):
        parse_machine_text("start: q0\naccept: qA\n")


def test_duplicate_transitions_fail_when_building():
    text = UNARY_INCREMENT + "q0 1 -> qR 0 <\n"
    description = parse_machine_text(text)
    with pytest.raises(ConfigurationError):
        build_machine(description)


def test_built_machine_runs_with_presentation_blank(machine_file):
    description = load_machine_description(machine_file(UNARY_INCREMENT))
    machine = build_machine(description)

    result = evaluate(machine, description.internal_word("11"))
    assert result.verdict == "accept"
    assert result.final.tape.render(description.blank) == "11[1]"


def test_internal_word_and_display_mapping():
    description = parse_machine_text(UNARY_INCREMENT)
    assert description.internal_word("1B1") == "1" + BLANK + "1"
    assert description.to_display(BLANK) == "B"
    assert description.to_display("1") == "1"


def test_load_missing_description(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_machine_description(tmp_path / "absent.txt")


def test_load_input_word_strips_whitespace(tmp_path):
    path = tmp_path / "word.txt"
    path.write_text("  0110\n\n", encoding="utf-8")
    assert load_input_word(path) == "0110"
