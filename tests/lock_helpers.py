from __future__ import annotations

NOW = 1_760_000_000
DAY = 86_400


def days_ago(days: int) -> int:
    return NOW - days * DAY


def fixed_clock() -> int:
    return NOW


def github_node(
    *,
    ref: str | None = "nixos-unstable",
    last_modified: int | None = None,
    repo: str = "nixpkgs",
) -> dict[str, object]:
    node: dict[str, object] = {}
    if last_modified is not None:
        node["locked"] = {
            "lastModified": last_modified,
            "narHash": "sha256-AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA=",
            "owner": "NixOS",
            "repo": repo,
            "rev": "0123456789abcdef0123456789abcdef01234567",
            "type": "github",
        }
    original: dict[str, object] = {"owner": "NixOS", "repo": repo, "type": "github"}
    if ref is not None:
        original["ref"] = ref
    node["original"] = original
    return node


def lock_payload(nodes: dict[str, dict[str, object]], *, root: str = "root") -> dict[str, object]:
    all_nodes: dict[str, object] = {root: {"inputs": {name: name for name in nodes}}}
    all_nodes.update(nodes)
    return {"nodes": all_nodes, "root": root, "version": 7}
