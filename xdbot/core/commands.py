"""Command tree and routing.

A tree is made of two node kinds:

    Leaf    an invocable command with a minimum role and a handler
    Branch  a routing node; each child is selected by consuming one token,
            with an optional default leaf for tokens that match no child

Routing never raises. The outcome is reported as a DispatchResult:

    INVOKED            handler ran and accepted its arguments
    REJECTED           handler ran but refused its arguments (reason given)
    PERMISSION_DENIED  user role below the leaf's minimum role
    ROUTING_MISS       no child and no default matched
    IGNORED            message was not addressed to the bot at all
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from ..shared.models.user import Role, User
from .guards import allows

# Returns None when the command went through, or a rejection reason.
Handler = Callable[..., Union[str, None]]


@dataclass(frozen=True)
class Leaf:
    allows: Role
    handler: Handler
    description: str
    example: Callable[[str], str]


@dataclass(frozen=True)
class Branch:
    children: dict[str, Node] = field(default_factory=dict)
    default: Leaf | None = None


Node = Union[Leaf, Branch]


class DispatchStatus(str, Enum):
    INVOKED = "invoked"
    REJECTED = "rejected"
    PERMISSION_DENIED = "permission_denied"
    ROUTING_MISS = "routing_miss"
    IGNORED = "ignored"


@dataclass(frozen=True)
class DispatchResult:
    status: DispatchStatus
    path: tuple[str, ...] = ()
    reason: str | None = None

    @property
    def invoked(self) -> bool:
        return self.status is DispatchStatus.INVOKED


IGNORED = DispatchResult(DispatchStatus.IGNORED)


def _invoke(leaf: Leaf, path: tuple[str, ...], user: User, args: Sequence[str]) -> DispatchResult:
    if not allows(user.role, leaf.allows):
        return DispatchResult(DispatchStatus.PERMISSION_DENIED, path)

    reason = leaf.handler(user, *args)
    if reason is not None:
        return DispatchResult(DispatchStatus.REJECTED, path, reason)
    return DispatchResult(DispatchStatus.INVOKED, path)


def dispatch(tree: Branch, user: User, tokens: Sequence[str]) -> DispatchResult:
    """Walk tokens down the tree and invoke the leaf they lead to."""
    node: Node = tree
    path: tuple[str, ...] = ()
    remaining = list(tokens)

    while isinstance(node, Branch):
        name = remaining[0].lower() if remaining else None
        if name is None or name not in node.children:
            if node.default is None:
                return DispatchResult(DispatchStatus.ROUTING_MISS, path)
            # unmatched token stays as the first argument of the default
            return _invoke(node.default, path, user, remaining)

        node = node.children[name]
        path = (*path, name)
        remaining = remaining[1:]

    return _invoke(node, path, user, remaining)


def invoke_default(tree: Branch, user: User, tokens: Sequence[str]) -> DispatchResult:
    """Invoke only the root default leaf, e.g. for unprefixed messages."""
    if tree.default is None:
        return DispatchResult(DispatchStatus.ROUTING_MISS)
    return _invoke(tree.default, (), user, list(tokens))


def iter_commands(tree: Branch, path: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], Leaf]]:
    """Yield (path, leaf) for every named leaf, depth first.

    A default leaf is only listed when no named child already points at it.
    """
    named = set()
    for name, child in tree.children.items():
        if isinstance(child, Branch):
            yield from iter_commands(child, (*path, name))
        else:
            named.add(id(child))
            yield (*path, name), child

    if tree.default is not None and id(tree.default) not in named:
        yield path, tree.default


@dataclass(frozen=True)
class CommandHelp:
    path: tuple[str, ...]
    role: Role
    example: str
    description: str


def describe_commands(tree: Branch, prefix: str) -> list[CommandHelp]:
    """Human-readable listing of the command surface for a given prefix."""
    helps = []
    for path, leaf in iter_commands(tree):
        example = leaf.example(prefix)
        words = example[len(prefix):].split() if example.startswith(prefix) else example.split()
        args = words[len(path):]
        placeholders = leaf.description.count("{")
        args += ["?"] * max(0, placeholders - len(args))
        helps.append(
            CommandHelp(
                path=path,
                role=leaf.allows,
                example=example,
                description=leaf.description.format(*args),
            )
        )
    return helps
