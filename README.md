# clawn

Data structures for the front and middle of a compiler for the Clawn
language: scope paths and name mangling, source locations, a tree of
high-level intermediate-representation (HIR) nodes, and a printer for
that tree.

## Modules

### `clawn.hierarchy`

`Hierarchy` is an immutable scope path such as `[GLOBAL]/main/loop`, split
on a one-character separator (`/` by default). Hierarchies compare, order
and hash by their full text.

- `Hierarchy.parse(name, separator="/")` and `Hierarchy.root()` (the
  `[GLOBAL]` scope) build hierarchies.
- `names`, `front()` and `back()` give the components.
- `appended(name)` goes one level deeper; `popped_back()` drops the
  innermost component (a single-component hierarchy is returned unchanged).
- `is_deeper_than(other)` / `is_shallower_than(other)` test ancestry; a
  hierarchy counts as both deeper and shallower than itself.
- `accessible_hierarchies()` lists every enclosing hierarchy, outermost
  first, ending with the hierarchy itself.

`mangle(name, hierarchy)` joins a name onto a scope, and
`demangle(mangled_name)` splits it back into `(name, hierarchy)`.

### `clawn.location`

`TokenInfo` (line number, index in line, token text) and `Location`
(file name, token info, scope `Hierarchy`) are frozen dataclasses.
`Location.key()` returns a string identifying the location, and a
location hashes by that key.

### `clawn.hir` and `clawn.control`

Every node derives from `clawn.hir.Node`, carrying a `type`, an optional
`location` and a process-unique `id`. Nodes compare by identity. The `type`
field accepts any object; the package does not interpret it.

- `clawn.hir`: `Root` (with `insert(nodes)`), `Integer`, `Float`, `String`,
  `Reference`, `Dereference`, `List`, `Variable` (with `is_global()`),
  `Function`, `Assignment`, `FunctionCall`, `Argument`, `AccessElement`,
  `AccessList`, `Construction`, `UnionConstruction`.
- `clawn.control`: `Block`, `Match`, `If`, `Loop`, `BinaryExpression` with
  its `OperatorKind` enum, `SetResult`, `Return`.

`children()` returns a node's direct sub-nodes in evaluation order.
`walk(functor)` calls `functor` on the node and its descendants; each
descendant is reported once by its parent and once again when it walks
itself, so every descendant below the starting node is seen twice.

### `clawn.printer`

`to_string(node)`, or `Printer().visit(node)`, renders a tree as text. Node
types are shown with `str()`. Printing an unknown node kind raises
`TypeError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from clawn.hierarchy import Hierarchy, mangle, demangle

scope = Hierarchy.root().appended("main")
name = mangle("counter", scope)        # "[GLOBAL]/main/counter"
short, where = demangle(name)          # ("counter", Hierarchy("[GLOBAL]/main"))
assert where.is_deeper_than(Hierarchy.root())
```

```python
from clawn.hir import Integer, Variable, Assignment
from clawn.printer import to_string

node = Assignment(
    type="int",
    location=None,
    right_hand_side=Integer("int", None, 1),
    left_hand_side=Variable("int", None, "[GLOBAL]/x"),
)
print(to_string(node))                 # [GLOBAL]/x:@int = 1
```

## What this package does not do

It has no parser, no type inference or type solver, no cloning of trees,
no lowering to lower-level representations and no code generation, and it
provides no command-line program. It is a library of the tree, scope and
location structures and a printer for them.