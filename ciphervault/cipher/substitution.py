from __future__ import annotations

from typing import Dict, Mapping, Sequence


def build_substitution_map(source: Sequence[str], target: Sequence[str]) -> Dict[str, str]:
    """Pair ``source[i]`` with ``target[i]`` for every position of ``source``.

    Positions past the end of ``target`` map a character to itself. A
    character repeated in ``source`` keeps the target of its last occurrence.
    """
    cipher_map: Dict[str, str] = {}
    for i, ch in enumerate(source):
        cipher_map[ch] = target[i] if i < len(target) else ch
    return cipher_map


def substitute(text: str, cipher_map: Mapping[str, str], *, case_sensitive: bool = True) -> str:
    """Map every code point of ``text`` through ``cipher_map``.

    Characters without an entry are copied unchanged. With
    ``case_sensitive=False`` the lowercase form is tried first, then the
    uppercase form, so ``"H"`` and ``"h"`` substitute identically.
    """
    out = []
    for ch in text:
        if case_sensitive:
            out.append(cipher_map.get(ch, ch))
            continue
        lower = ch.lower()
        upper = ch.upper()
        if lower in cipher_map:
            out.append(cipher_map[lower])
        elif upper in cipher_map:
            out.append(cipher_map[upper])
        else:
            out.append(ch)
    return "".join(out)
