"""Rendering intermediate-representation trees as readable text."""

from __future__ import annotations

from functools import singledispatchmethod

from clawn import control, hir


def _type_name(node: hir.Node) -> str:
    return str(node.type)


class Printer:
    """Turns a node and everything below it into a multi-line string."""

    @singledispatchmethod
    def visit(self, node: hir.Node) -> str:
        """Render ``node`` as text."""
        raise TypeError(f"cannot print node of kind {type(node).__name__}")

    @visit.register
    def _(self, node: hir.Root) -> str:
        return "~ROOT~" + "".join(
            self.visit(child) + "\n" for child in node.children()
        )

    @visit.register
    def _(self, node: hir.Integer) -> str:
        return str(node.initial_value)

    @visit.register
    def _(self, node: hir.Float) -> str:
        return f"{node.initial_value:f}"

    @visit.register
    def _(self, node: hir.String) -> str:
        return '"' + node.initial_value + '"'

    @visit.register
    def _(self, node: hir.Reference) -> str:
        return "refer " + self.visit(node.refer_to)

    @visit.register
    def _(self, node: hir.Dereference) -> str:
        return "access " + self.visit(node.target)

    @visit.register
    def _(self, node: hir.List) -> str:
        elements = ", ".join(self.visit(value) for value in node.initial_values)
        return _type_name(node) + "[" + elements + "]"

    @visit.register
    def _(self, node: hir.Variable) -> str:
        return node.name + ":@" + _type_name(node)

    @visit.register
    def _(self, node: hir.Function) -> str:
        body = self.visit(node.body)
        return "function:" + node.name + _type_name(node) + "{\n" + body + "\n}"

    @visit.register
    def _(self, node: hir.Assignment) -> str:
        return (
            self.visit(node.left_hand_side)
            + " = "
            + self.visit(node.right_hand_side)
        )

    @visit.register
    def _(self, node: hir.FunctionCall) -> str:
        function = self.visit(node.function_obj)
        arguments = ",\n".join(
            "    " + self.visit(argument) for argument in node.arguments
        )
        return function + "(\n" + arguments + "\n):" + _type_name(node)

    @visit.register
    def _(self, node: hir.AccessElement) -> str:
        element_name = node.element_name or "[tag]"
        return self.visit(node.left_hand_side) + "." + element_name

    @visit.register
    def _(self, node: hir.AccessList) -> str:
        return self.visit(node.list) + "[" + self.visit(node.index) + "]"

    @visit.register
    def _(self, node: hir.Construction) -> str:
        arguments = ", ".join(
            name + " : " + self.visit(value) for name, value in node.arguments
        )
        return "construct " + _type_name(node) + "{" + arguments + "}"

    @visit.register
    def _(self, node: hir.UnionConstruction) -> str:
        return (
            "union construct "
            + _type_name(node)
            + "{"
            + self.visit(node.argument[1])
            + "}"
        )

    @visit.register
    def _(self, node: control.Block) -> str:
        body = "".join("  " + self.visit(child) + "\n" for child in node.nodes)
        return "Block:{\n" + body + "}:" + _type_name(node) + "\n"

    @visit.register
    def _(self, node: control.Match) -> str:
        text = "match " + self.visit(node.target) + "\n{\n"
        for tag, expression in node.patterns:
            text += tag + " => " + self.visit(expression) + "\n"
        if node.default_case is not None:
            text += "default => " + self.visit(node.default_case) + "\n"
        return "{\n" + text + "}\n"

    @visit.register
    def _(self, node: control.If) -> str:
        text = (
            "if "
            + self.visit(node.condition)
            + "\n{\n"
            + self.visit(node.body)
            + "\n}\n"
        )
        if node.else_body is not None:
            text += "else\n{\n" + self.visit(node.else_body) + "\n}\n"
        return text

    @visit.register
    def _(self, node: control.Loop) -> str:
        return (
            "loop while "
            + self.visit(node.condition)
            + "\n{\n"
            + self.visit(node.body)
            + "\n}"
            + _type_name(node)
            + "\n"
        )

    @visit.register
    def _(self, node: control.BinaryExpression) -> str:
        first, second = node.targets
        return "compare(" + self.visit(first) + ", " + self.visit(second) + ")"

    @visit.register
    def _(self, node: control.SetResult) -> str:
        return "=> " + self.visit(node.expression)

    @visit.register
    def _(self, node: control.Return) -> str:
        return "return " + self.visit(node.expression)


def to_string(node: hir.Node) -> str:
    """Render ``node`` and its descendants as text."""
    return Printer().visit(node)