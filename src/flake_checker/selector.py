"""Selection of the lock-file nodes that policy applies to."""

from __future__ import annotations

from typing import Callable, Dict, Mapping

from flake_checker.lockfile import Node

TRACKED_PREFIX = "nixpkgs"

Selector = Callable[[Mapping[str, Node]], Dict[str, Node]]


def select_tracked(nodes: Mapping[str, Node]) -> Dict[str, Node]:
    """Return the nodes whose name marks them as a pinned nixpkgs.

    Matching is by name prefix only; a node called ``nixpkgs-unstable`` is
    tracked while ``my-nixpkgs`` is not.
    """
    # TODO: match on locked.node_type == "github" and origin.repo == "nixpkgs" instead of the name.
    return {name: node for name, node in nodes.items() if name.startswith(TRACKED_PREFIX)}
