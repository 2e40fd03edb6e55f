import pytest

from clawn import control, hir
from clawn.printer import Printer, to_string


def integer(value):
    return hir.Integer("int", None, value)


def variable(name="x", type_="int"):
    return hir.Variable(type_, None, name)


def test_integer_prints_its_value():
    assert to_string(integer(42)) == "42"
    assert to_string(integer(-7)) == "-7"


def test_float_uses_six_decimals():
    assert to_string(hir.Float("float", None, 1.5)) == "1.500000"


def test_string_is_quoted():
    assert to_string(hir.String("string", None, "abc")) == '"' + "abc" + '"'


def test_variable_shows_name_and_type():
    assert to_string(variable("x", "int")) == "x" + ":@" + "int"


def test_reference_and_dereference_prefixes():
    inner = variable()
    assert to_string(hir.Reference("ref", None, inner)) == "refer " + to_string(inner)
    assert to_string(hir.Dereference("int", None, inner)) == "access " + to_string(inner)


def test_list_joins_elements():
    node = hir.List("list", None, [integer(1), integer(2)])
    assert to_string(node) == "list" + "[" + "1" + ", " + "2" + "]"


def test_empty_list():
    assert to_string(hir.List("list", None, [])) == "list" + "[" + "]"


def test_function_wraps_body():
    body = integer(3)
    node = hir.Function("fn", None, "f", body)
    assert to_string(node) == "function:" + "f" + "fn" + "{\n" + "3" + "\n}"


def test_assignment():
    lhs, rhs = variable("a"), integer(5)
    node = hir.Assignment("int", None, rhs, lhs)
    assert to_string(node) == to_string(lhs) + " = " + to_string(rhs)


def test_function_call_with_arguments():
    function = variable("f", "fn")
    node = hir.FunctionCall("int", None, function, [integer(1), integer(2)])
    text = to_string(node)
    assert text.startswith(to_string(function) + "(\n")
    assert text.endswith("\n):" + "int")
    assert "    1,\n    2" in text


def test_function_call_without_arguments():
    function = variable("f", "fn")
    node = hir.FunctionCall("int", None, function, [])
    assert to_string(node) == to_string(function) + "(\n" + "\n):" + "int"


def test_access_element_named_and_tag():
    lhs = variable("s", "S")
    named = hir.AccessElement("int", None, lhs, "field")
    tag = hir.AccessElement("int", None, lhs, "")
    assert to_string(named) == to_string(lhs) + "." + "field"
    assert to_string(tag) == to_string(lhs) + "." + "[tag]"


def test_access_list():
    lst, index = variable("l", "list"), integer(0)
    node = hir.AccessList("int", None, lst, index)
    assert to_string(node) == to_string(lst) + "[" + to_string(index) + "]"


def test_construction():
    node = hir.Construction("S", None, [("a", integer(1)), ("b", integer(2))])
    assert to_string(node) == "construct " + "S" + "{" + "a : 1, b : 2" + "}"


def test_union_construction():
    node = hir.UnionConstruction("U", None, ("tag", integer(9)))
    assert to_string(node) == "union construct " + "U" + "{" + "9" + "}"


def test_block_indents_children():
    node = control.Block("int", None, [integer(1), integer(2)])
    assert to_string(node) == "Block:{\n" + "  1\n" + "  2\n" + "}:" + "int" + "\n"


def test_match_with_and_without_default():
    target = variable("u", "U")
    without = control.Match("int", None, target, [("a", integer(1))])
    text = to_string(without)
    assert text.startswith("{\nmatch " + to_string(target) + "\n{\n")
    assert "a => 1\n" in text
    assert "default" not in text
    assert text.endswith("}\n")

    with_default = control.Match("int", None, target, [("a", integer(1))], integer(0))
    assert "default => 0\n" in to_string(with_default)


def test_if_with_and_without_else():
    condition, body = variable("c", "bool"), integer(1)
    plain = control.If("int", None, condition, body)
    expected = "if " + to_string(condition) + "\n{\n" + "1" + "\n}\n"
    assert to_string(plain) == expected

    full = control.If("int", None, condition, body, integer(2))
    assert to_string(full) == expected + "else\n{\n" + "2" + "\n}\n"


def test_loop():
    condition, body = variable("c", "bool"), integer(1)
    node = control.Loop("void", None, condition, body)
    assert to_string(node) == (
        "loop while " + to_string(condition) + "\n{\n" + "1" + "\n}" + "void" + "\n"
    )


def test_binary_expression():
    node = control.BinaryExpression(
        "bool", None, (integer(1), integer(2)), control.OperatorKind.EQUAL
    )
    assert to_string(node) == "compare(" + "1" + ", " + "2" + ")"


def test_set_result_and_return():
    value = integer(4)
    assert to_string(control.SetResult("int", None, value)) == "=> " + "4"
    assert to_string(control.Return("int", None, value)) == "return " + "4"


def test_root_lists_each_child_on_a_line():
    root = hir.Root("void", None, [integer(1), integer(2)])
    text = to_string(root)
    assert text.startswith("~ROOT~")
    assert text == "~ROOT~" + "1\n" + "2\n"
    assert text.count("\n") == len(root.children())


def test_printer_visit_matches_to_string():
    node = control.Block("int", None, [hir.Assignment("int", None, integer(1), variable())])
    assert Printer().visit(node) == to_string(node)


def test_unsupported_node_raises():
    with pytest.raises(TypeError):
        to_string(hir.Argument("int", None, "x"))