import io

import pytest

from linearstructs.infix import (
    convert_infix_to_postfix,
    convert_postfix_to_assembly,
    main,
    op_priority,
)


def test_priority_ordering():
    assert op_priority("+") == op_priority("-")
    assert op_priority("*") == op_priority("/")
    assert op_priority("+") < op_priority("*") < op_priority("^")
    assert op_priority("x") == 0
    assert op_priority("(") == 0


def test_simple_postfix():
    assert convert_infix_to_postfix("5 + 2") == " 5 2 +"


def test_parenthesised_postfix():
    assert convert_infix_to_postfix("(a+b)*c") == " a b + c *"


def test_operand_only_expression_is_kept():
    assert convert_infix_to_postfix("abc") == " abc"
    assert convert_infix_to_postfix("3.14") == " 3.14"


@pytest.mark.parametrize(
    "infix",
    ["a + b * c", "(x - y) / z", "1 + 2 + 3", "a ^ b ^ c", "pi * r ^ 2"],
)
def test_postfix_keeps_operands_and_operators(infix):
    postfix = convert_infix_to_postfix(infix)
    assert postfix.startswith(" ")
    tokens = postfix.split()
    operands = [t for t in tokens if t[0].isalnum()]
    operators = [t for t in tokens if not t[0].isalnum()]
    expected_operands = infix.replace("(", " ").replace(")", " ")
    for op in "+-*/^":
        expected_operands = expected_operands.replace(op, " ")
    assert operands == expected_operands.split()
    assert sorted(operators) == sorted(c for c in infix if c in "+-*/^")


def test_higher_priority_operator_comes_first():
    tokens = convert_infix_to_postfix("a + b * c").split()
    assert tokens.index("*") < tokens.index("+")


def test_unbalanced_closing_parenthesis_raises():
    with pytest.raises(ValueError, match="unbalanced"):
        convert_infix_to_postfix("a + b)")


def test_simple_assembly():
    assert convert_postfix_to_assembly(" 5 2 +") == "\tSET 5\n\tADD 2\n\tSAV A\n"


def test_assembly_one_save_per_operator():
    postfix = convert_infix_to_postfix("a + b * c - d / e")
    lines = convert_postfix_to_assembly(postfix).splitlines()
    saves = [line.split()[1] for line in lines if line.startswith("\tSAV")]
    assert len(saves) == 4
    assert saves == sorted(saves)
    assert len(set(saves)) == len(saves)
    assert len(lines) == 3 * len(saves)


def test_assembly_loads_saved_variable():
    lines = convert_postfix_to_assembly(convert_infix_to_postfix("1 + 2 + 3")).splitlines()
    first_save = lines[2].split()[1]
    assert lines[3] == f"\tLOD {first_save}"


def test_assembly_letter_operand_uses_load():
    lines = convert_postfix_to_assembly(" x 2 *").splitlines()
    assert lines[0].split() == ["LOD", "x"]
    assert lines[1].split() == ["MUL", "2"]


def test_assembly_operands_without_operator_is_empty():
    assert convert_postfix_to_assembly(" 7") == ""


def test_assembly_missing_operand_raises():
    with pytest.raises(ValueError, match="missing operand"):
        convert_postfix_to_assembly(" 5 +")


def test_main_prints_postfix(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 + 2\nquit\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"\tpostfix: {convert_infix_to_postfix('5 + 2')}\n" in out
    assert out.count("infix > ") == 2


def test_main_prints_assembly(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a * (b + c)\nquit\n"))
    assert main(["--assembly"]) == 0
    out = capsys.readouterr().out
    expected = convert_postfix_to_assembly(convert_infix_to_postfix("a * (b + c)"))
    assert expected in out
    assert "postfix:" not in out


def test_main_reports_errors_and_continues(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a)\n1 + 1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "ERROR" in out
    assert f"\tpostfix: {convert_infix_to_postfix('1 + 1')}" in out