"""Helpers for comparing multi-line strings."""

from __future__ import annotations

from dataclasses import dataclass, field


def unindent_string(s: str, *prefixes: str) -> str:
    """Trim s, then strip each line of the given prefixes.

    With no prefixes, all leading tabs are stripped from each line.
    """
    lines = s.strip().split("\n")
    result = []
    for line in lines:
        if not prefixes:
            line = line.lstrip("\t")
        else:
            for prefix in prefixes:
                line = line.removeprefix(prefix)
        result.append(line)
    return "\n".join(result)


@dataclass
class _Chunk:
    added: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    equal: list[str] = field(default_factory=list)

    def empty(self) -> bool:
        return not (self.added or self.deleted or self.equal)

    def __str__(self) -> str:
        lines = [f"+ {s}" for s in self.added]
        lines += [f"- {s}" for s in self.deleted]
        lines += [f"  {s}" for s in self.equal]
        return "\n".join(lines)


def _diff_chunks(a: list[str], b: list[str]) -> list[_Chunk]:
    alen, blen = len(a), len(b)
    max_path = alen + blen
    if max_path == 0:
        return []

    v = [0] * (2 * max_path + 1)
    snapshots: list[list[int]] = []

    def search() -> int:
        for d in range(max_path + 1):
            for diag in range(-d, d + 1, 2):
                if diag == -d:
                    x = v[max_path - d + 1]
                elif diag == d:
                    x = v[max_path + d - 1] + 1
                elif v[max_path + diag + 1] > v[max_path + diag - 1]:
                    x = v[max_path + diag + 1]
                else:
                    x = v[max_path + diag - 1] + 1
                y = x - diag
                while x < alen and y < blen and a[x] == b[y]:
                    x += 1
                    y += 1
                v[max_path + diag] = x
                if x >= alen and y >= blen:
                    snapshots.append(list(v))
                    return d
            snapshots.append(list(v))
        return max_path + 1

    distance = search()
    if distance == 0:
        return []

    chunks = [_Chunk() for _ in range(distance + 1)]
    x, y = alen, blen
    for d in range(distance, 0, -1):
        endpoint = snapshots[d]
        diag = x - y
        insert = diag == -d or (
            diag != d and endpoint[max_path + diag - 1] < endpoint[max_path + diag + 1]
        )
        x1 = endpoint[max_path + diag]
        kk = diag + 1 if insert else diag - 1
        x0 = endpoint[max_path + kk]
        y0 = x0 - kk
        x_mid = x0 if insert else x0 + 1

        chunk = _Chunk()
        if insert:
            chunk.added = b[y0 : y0 + 1]
        else:
            chunk.deleted = a[x0 : x0 + 1]
        if x_mid < x1:
            chunk.equal = a[x_mid:x1]
        chunks[d] = chunk
        x, y = x0, y0

    if x > 0:
        chunks[0].equal = a[:x]
    if chunks[0].empty():
        chunks = chunks[1:]
    return chunks


def diff_string(a: str, b: str) -> str:
    """Produce a line diff of two multi-line strings, prefixed by a newline.

    Added lines start with "+ ", deleted lines with "- ", and unchanged
    lines with two spaces.
    """
    chunks = _diff_chunks(a.split("\n"), b.split("\n"))
    return "\n" + "\n".join(str(c) for c in chunks)