"""Find statements that invoke a guarded syscall primitive.

Matching is a set-membership test on the callee's identifier text. No
symbol resolution is attempted: ``syscall.Syscall(...)``, calls through a
function value, and renamed imports are never detected.
"""

from __future__ import annotations

from collections.abc import Iterator

import tree_sitter

from syscallguard.config import GUARDED_PRIMITIVES
from syscallguard.rewrite.ast_parser import position_of
from syscallguard.rewrite.schemas import GuardSite, SourceFile

# Statement node types whose right-hand side is scanned for calls:
# ``a, b = f()``, ``a += f()`` and ``a, b := f()``.
_ASSIGNMENT_NODE_TYPES = frozenset({
    "assignment_statement",
    "short_var_declaration",
})


def find_guard_sites(
    source: SourceFile,
    primitives: frozenset[str] = GUARDED_PRIMITIVES,
) -> list[GuardSite]:
    """Return guard sites in pre-order walk order (ascending position).

    An assignment with several matching right-hand-side calls yields one
    site per call, all positioned at the statement start.
    """
    sites: list[GuardSite] = []

    for node in _walk(source.tree.root_node):
        if node.type == "expression_statement":
            call = _bare_call(node)
            name = _matched_primitive(call, primitives)
            if call is not None and name is not None:
                sites.append(
                    GuardSite(
                        position=position_of(node),
                        call=call,
                        primitive=name,
                    )
                )
        elif node.type in _ASSIGNMENT_NODE_TYPES:
            right = node.child_by_field_name("right")
            if right is None:
                continue
            for expr in right.named_children:
                name = _matched_primitive(expr, primitives)
                if name is not None:
                    sites.append(
                        GuardSite(
                            position=position_of(node),
                            call=expr,
                            primitive=name,
                        )
                    )

    return sites


def _walk(root: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    """Depth-first pre-order traversal without recursion."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _bare_call(stmt: tree_sitter.Node) -> tree_sitter.Node | None:
    """Return the call when the statement is exactly one call expression."""
    exprs = [c for c in stmt.named_children if c.type != "comment"]
    if len(exprs) != 1:
        return None
    if exprs[0].type != "call_expression":
        return None
    return exprs[0]


def _matched_primitive(
    node: tree_sitter.Node | None,
    primitives: frozenset[str],
) -> str | None:
    """Return the primitive name if ``node`` is a direct call to one."""
    if node is None or node.type != "call_expression":
        return None
    # Explicit instantiation (Syscall[T](...)) is an index expression
    # callee, not a plain identifier.
    if node.child_by_field_name("type_arguments") is not None:
        return None
    func = node.child_by_field_name("function")
    if func is None or func.type != "identifier" or func.text is None:
        return None
    name = func.text.decode("utf-8")
    return name if name in primitives else None
